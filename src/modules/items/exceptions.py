"""Item domain exceptions.

Raised by the Service Layer; the REST framework exception handler
translates them into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import InvalidIdentifier, NotFound


class ItemNotFound(NotFound):
    """The requested item does not exist."""

    default_code = "item_not_found"
    default_detail = "The item does not exist."


class InvalidItemId(InvalidIdentifier):
    """The item identifier is not a valid UUID."""

    default_code = "invalid_item_id"
    default_detail = "The item id is wrong."
