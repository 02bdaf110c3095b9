"""Identifier parsing shared by the item and order services."""

from __future__ import annotations

from typing import Any, Type
from uuid import UUID

from modules.core.exceptions import BadRequest, InvalidIdentifier


def parse_id(value: Any, error: Type[BadRequest] = InvalidIdentifier) -> UUID:
    """Return ``value`` as a ``UUID`` or raise ``error`` if it is malformed."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise error(f"'{value}' is not a valid identifier.") from None
