"""Order and OrderItem models.

Rules implemented:
- ``number`` is a display number in [1, 100] assigned on creation by
  ``modules.orders.sequencing``; it wraps and is not unique over time.
- ``OrderItem`` rows are **snapshots** of catalogue items taken when the
  item set is attached.  They keep their own ``status``, which may
  diverge from ``Item.status``, and reference the catalogue item by id
  only, so deleting an item never touches existing orders.
- ``total_price`` is the sum of the snapshot prices; it is computed by
  ``modules.orders.aggregation`` and stored with the order.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.items.constants import (
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    ItemStatus,
)
from modules.orders.constants import (
    ORDER_NUMBER_MAX,
    ORDER_NUMBER_MIN,
    TOTAL_DECIMAL_PLACES,
    TOTAL_MAX_DIGITS,
    OrderStatus,
)


class Order(BaseModel):
    """Order aggregate root.

    The UUIDv7 ``id`` orders rows by insertion time, which is what the
    sequencer uses to find the last order.
    """

    number = models.PositiveSmallIntegerField(
        validators=[
            MinValueValidator(ORDER_NUMBER_MIN),
            MaxValueValidator(ORDER_NUMBER_MAX),
        ],
    )
    status = models.PositiveSmallIntegerField(
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
    )
    total_price = models.DecimalField(
        max_digits=TOTAL_MAX_DIGITS,
        decimal_places=TOTAL_DECIMAL_PLACES,
        default=Decimal("0.00"),
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(number__gte=ORDER_NUMBER_MIN)
                & models.Q(number__lte=ORDER_NUMBER_MAX),
                name="orders_number_in_range",
            ),
        ]

    def __str__(self) -> str:
        return f"#{self.number} ({self.get_status_display()})"


class OrderItem(BaseModel):
    """Snapshot of a catalogue item inside an order.

    ``status`` is nullable for snapshots written before statuses were
    tracked; readers treat ``None`` as ``ItemStatus.PENDING``.
    """

    order = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )
    item_id = models.UUIDField(db_index=True)
    name = models.CharField(max_length=255)
    picture_url = models.URLField(max_length=1024)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    status = models.PositiveSmallIntegerField(
        choices=ItemStatus.choices,
        default=ItemStatus.PENDING,
        null=True,
    )
    position = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "order_items"
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["order", "item_id"],
                name="order_items_unique_item_per_order",
            ),
        ]

    @property
    def current_status(self) -> int:
        return ItemStatus.PENDING if self.status is None else self.status

    def __str__(self) -> str:
        return f"{self.name} in order {self.order_id} ({self.status})"
