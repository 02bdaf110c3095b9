"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The REST framework exception handler translates them into HTTP
responses; status transition failures are raised as
``modules.core.transitions.InvalidTransition``.
"""

from __future__ import annotations

from modules.core.exceptions import BadRequest, InvalidIdentifier, NotFound


class OrderNotFound(NotFound):
    """The requested order does not exist."""

    default_code = "order_not_found"
    default_detail = "The order does not exist."


class InvalidOrderId(InvalidIdentifier):
    """The order identifier is not a valid UUID."""

    default_code = "invalid_order_id"
    default_detail = "The order id is wrong."


class EmptyItemSet(BadRequest):
    """An order update resolved to no items at all."""

    default_code = "empty_item_set"
    default_detail = "An order must contain at least one item."


class MissingStatus(BadRequest):
    """The item status endpoint was called without a ``status``."""

    default_code = "missing_status"
    default_detail = "The status field is required."


class OrderTotalTooLarge(BadRequest):
    """The attached items add up to more than an order total can hold."""

    default_code = "order_total_too_large"
    default_detail = "The order total is too large."
