"""Error taxonomy shared by the item and order services.

Services raise these at the point where a rule is violated.  Nothing in
the service layer knows about HTTP; ``modules.core.handlers`` maps each
kind onto its status code.
"""

from __future__ import annotations

from typing import Optional

from rest_framework import status


class DomainError(Exception):
    """Base class for business-rule violations raised by services."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_code: str = "error"
    default_detail: str = "The request could not be processed."

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class BadRequest(DomainError):
    """A required field is missing or an identifier is malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "bad_request"
    default_detail = "Bad request."


class InvalidIdentifier(BadRequest):
    default_code = "invalid_id"
    default_detail = "The identifier is malformed."


class NotFound(DomainError):
    """The referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_code = "not_found"
    default_detail = "Not found."


class Forbidden(DomainError):
    """The operation is understood but not allowed in the current state."""

    status_code = status.HTTP_403_FORBIDDEN
    default_code = "forbidden"
    default_detail = "Operation not allowed."
