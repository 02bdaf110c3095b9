"""Django ORM implementation of the Item repository.

Satisfies ``IItemRepository`` using Django's QuerySet API.
Look-ups return ``None`` for a missing item; ``ItemService`` turns that
into ``ItemNotFound``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.items.models import Item
from modules.items.repositories.interfaces import IItemRepository


class ItemDjangoRepository(IItemRepository):
    """Concrete Item repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Item]:
        """Retrieve an item by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Item.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
    ) -> List[Item]:
        """List items with optional Django ORM look-ups.

        Examples of valid filters::

            {"status": 1}
            {"name__icontains": "mug"}
        """
        queryset = Item.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        if ordering:
            queryset = queryset.order_by(*ordering)
        if limit is not None:
            queryset = queryset[:limit]
        return list(queryset)

    def list_by_ids(self, ids: Iterable[UUID]) -> List[Item]:
        return list(Item.objects.filter(id__in=list(ids)))

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Item:
        return Item.objects.create(**data)

    @transaction.atomic
    def save(self, entity: Item) -> Item:
        """Persist changes to an item."""
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Delete an item by ID.

        Returns ``True`` if the item was found and deleted, ``False`` if
        no item exists with the given ID.
        """
        deleted, _ = Item.objects.filter(id=id).delete()
        return bool(deleted)
