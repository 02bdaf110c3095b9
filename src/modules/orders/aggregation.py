"""Attaching catalogue items to an order.

``attach_items`` turns the items chosen for an order into order-item
snapshots and computes the order total.  Attaching always puts every
item back at the start of production, so each snapshot's status is
``ItemStatus.PENDING`` whatever the catalogue item says.  The function
is pure: it neither mutates its input nor touches the database.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, List, Protocol, Tuple
from uuid import UUID

from modules.items.constants import ItemStatus


class Attachable(Protocol):
    id: UUID
    name: str
    picture_url: str
    price: Decimal


@dataclass(frozen=True)
class ItemSnapshot:
    item_id: UUID
    name: str
    picture_url: str
    price: Decimal
    status: int = ItemStatus.PENDING


@dataclass(frozen=True)
class AttachedItems:
    items: Tuple[ItemSnapshot, ...] = field(default_factory=tuple)
    total_price: Decimal = Decimal("0.00")

    @property
    def item_ids(self) -> List[UUID]:
        return [snapshot.item_id for snapshot in self.items]


def attach_items(items: Iterable[Attachable]) -> AttachedItems:
    """Snapshot ``items`` with a reset status and sum their prices."""
    snapshots = tuple(
        ItemSnapshot(
            item_id=item.id,
            name=item.name,
            picture_url=item.picture_url,
            price=Decimal(item.price),
            status=ItemStatus.PENDING,
        )
        for item in items
    )
    total = sum((snapshot.price for snapshot in snapshots), Decimal("0.00"))
    return AttachedItems(items=snapshots, total_price=total)
