"""Catalogue item model.

Rules implemented here:
- ``price`` is a non-negative amount with two decimal places.
- ``status`` is the item's own production status; order snapshots of
  the item carry an independent copy (see ``modules.orders.models``).
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.items.constants import (
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    ItemStatus,
)


class Item(BaseModel):
    """A product that can be attached to orders."""

    name = models.CharField(max_length=255)
    picture_url = models.URLField(max_length=1024)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    status = models.PositiveSmallIntegerField(
        choices=ItemStatus.choices,
        default=ItemStatus.PENDING,
    )

    class Meta:
        db_table = "items"
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["status"], name="items_status_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="items_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"
