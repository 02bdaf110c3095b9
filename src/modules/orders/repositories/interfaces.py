"""Order repository interface.

Extends ``IRepository[Order]`` with the methods the order workflow
needs: the latest-order look-up for numbering, a locking read for
updates, and the two write paths (replace the whole item set, or change
snapshot statuses in place).

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional
from uuid import UUID

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.aggregation import AttachedItems
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The Order aggregate includes its OrderItem snapshots.  Mutations
    must be atomic.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its item snapshots atomically.

        ``data`` must include ``number`` and ``attached``
        (``AttachedItems``); ``status`` defaults to pending.
        """

    @abstractmethod
    def get_latest(self) -> Optional[Order]:
        """Return the most recently inserted order, ``None`` if there is none."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[Order]:
        """Retrieve an order with a row-level lock (SELECT FOR UPDATE)."""

    @abstractmethod
    def replace_items(
        self, order: Order, status: int, attached: AttachedItems
    ) -> Order:
        """Store a new status, item set and total for ``order`` atomically."""

    @abstractmethod
    def update_item_statuses(
        self, order: Order, statuses: Mapping[UUID, int]
    ) -> Order:
        """Set the status of the snapshots keyed by catalogue item id.

        The order's own status and total are left untouched.
        """
