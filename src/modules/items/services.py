"""Item service layer (Use Cases).

Orchestrates the catalogue operations, delegating persistence to the
injected ``IItemRepository``.

Rules enforced here:
- Malformed ids are rejected before any look-up.
- A direct status update follows the shared forward-by-one rule
  (``modules.core.transitions``), bounded by ``ItemStatus.DONE``.
- Deleting an item leaves order snapshots of it untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

import structlog
from django.db import transaction

from modules.core.identifiers import parse_id
from modules.core.transitions import check_transition
from modules.items.constants import ITEM_STATUS_TERMINAL
from modules.items.exceptions import InvalidItemId, ItemNotFound

if TYPE_CHECKING:
    from modules.items.dtos import CreateItemDTO, UpdateItemDTO
    from modules.items.models import Item
    from modules.items.repositories.interfaces import IItemRepository

logger = structlog.get_logger(__name__)


class ItemService:
    """Application service for Item use-cases.

    Receives an ``IItemRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IItemRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_item(self, dto: CreateItemDTO) -> Item:
        item = self._repo.create(
            {
                "name": dto.name,
                "picture_url": dto.picture_url,
                "price": dto.price,
            }
        )
        logger.info("item.created", item_id=str(item.id))
        return item

    @transaction.atomic
    def update_item(self, id: str, dto: UpdateItemDTO) -> Item:
        """Replace an item's name, picture and price.

        Raises:
            InvalidItemId: the id is malformed.
            ItemNotFound: the item does not exist.
            InvalidTransition: ``dto.status`` is not a legal move.
        """
        item = self.get_item(id)
        log = logger.bind(item_id=str(item.id))

        if dto.status is not None:
            check_transition(item.status, dto.status, upper=ITEM_STATUS_TERMINAL)
            item.status = dto.status

        item.name = dto.name
        item.picture_url = dto.picture_url
        item.price = dto.price

        item = self._repo.save(item)
        log.info("item.updated", status=item.status)
        return item

    @transaction.atomic
    def delete_item(self, id: str) -> None:
        """Delete an item from the catalogue.

        Raises:
            InvalidItemId: the id is malformed.
            ItemNotFound: the item does not exist.
        """
        item = self.get_item(id)
        self._repo.delete(str(item.id))
        logger.info("item.deleted", item_id=str(item.id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_item(self, id: str) -> Item:
        """Retrieve a single item by ID.

        Raises:
            InvalidItemId: the id is malformed.
            ItemNotFound: the item does not exist.
        """
        item_id = parse_id(id, InvalidItemId)
        item = self._repo.get_by_id(str(item_id))
        if not item:
            raise ItemNotFound(f"Item {item_id} not found.")
        return item

    def list_items(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Optional[Sequence[str]] = None,
    ) -> List[Item]:
        """Return the catalogue, optionally filtered and sorted."""
        return self._repo.list(filters, ordering=ordering)
