"""REST framework error responder.

``drf-standardized-errors`` renders every error body in one shape::

    {
        "type": "client_error",
        "errors": [{"code": "order_not_found", "detail": "...", "attr": null}]
    }

``DomainExceptionHandler`` plugs into it and converts the service-layer
``DomainError`` family and pydantic DTO errors into DRF exceptions first.
"""

from __future__ import annotations

from typing import Dict, List

import structlog
from drf_standardized_errors.handler import ExceptionHandler
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions

from modules.core.exceptions import DomainError

logger = structlog.get_logger(__name__)


class DomainExceptionHandler(ExceptionHandler):
    """Map domain and DTO errors onto DRF exceptions before rendering."""

    def convert_known_exceptions(self, exc: Exception) -> Exception:
        if isinstance(exc, DomainError):
            logger.info(
                "api.domain_error",
                error=type(exc).__name__,
                code=exc.default_code,
                detail=exc.detail,
            )
            converted = exceptions.APIException(exc.detail, code=exc.default_code)
            converted.status_code = exc.status_code
            return converted

        if isinstance(exc, PydanticValidationError):
            errors: Dict[str, List[str]] = {}
            for err in exc.errors():
                attr = ".".join(str(part) for part in err["loc"]) or "non_field_errors"
                errors.setdefault(attr, []).append(err["msg"])
            logger.info("api.validation_error", error_count=exc.error_count())
            return exceptions.ValidationError(errors)

        return super().convert_known_exceptions(exc)
