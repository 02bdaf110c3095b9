"""Item repository interface.

Extends ``IRepository[Item]`` with the bulk look-up the order workflow
needs to attach items to an order.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List
from uuid import UUID

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.items.models import Item


class IItemRepository(IRepository["Item"]):
    """Repository contract for catalogue items."""

    @abstractmethod
    def list_by_ids(self, ids: Iterable[UUID]) -> List[Item]:
        """Return the items whose id is in ``ids``.

        Unknown ids are skipped, so the result may be shorter than the
        input.  Duplicated ids yield a single item.
        """

    @abstractmethod
    def save(self, entity: Item) -> Item:
        """Persist changes made to an existing item."""
