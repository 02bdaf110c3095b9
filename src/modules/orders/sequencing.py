"""Display numbers for new orders.

Orders are numbered 1, 2, ... 100 and then start again at 1.  The
number of a new order follows the number of the most recently inserted
order, which the caller looks up (``IOrderRepository.get_latest``).
"""

from __future__ import annotations

from typing import Optional

from modules.orders.constants import ORDER_NUMBER_MAX, ORDER_NUMBER_MIN


def next_order_number(last_number: Optional[int]) -> int:
    """Return the number for the order created after ``last_number``.

    ``None`` means no order exists yet.
    """
    if last_number is None or last_number >= ORDER_NUMBER_MAX:
        return ORDER_NUMBER_MIN
    return last_number + 1
