"""Order domain constants.

Defines the order status scale and the bounds of the display number.
Status moves follow ``modules.core.transitions``: forward by one step
at most, never backwards, never past ``ORDER_STATUS_TERMINAL``.
"""

from decimal import Decimal

from django.db import models


class OrderStatus(models.IntegerChoices):
    PENDING = 0, "Pending"
    IN_PRODUCTION = 1, "In production"
    READY = 2, "Ready"
    DELIVERED = 3, "Delivered"


ORDER_STATUS_TERMINAL: int = max(OrderStatus.values)

ORDER_NUMBER_MIN = 1
ORDER_NUMBER_MAX = 100

# Shape of ``Order.total_price``.
TOTAL_MAX_DIGITS = 12
TOTAL_DECIMAL_PLACES = 2
ORDER_TOTAL_MAX = (
    Decimal(10 ** (TOTAL_MAX_DIGITS - TOTAL_DECIMAL_PLACES)) - Decimal("0.01")
)
