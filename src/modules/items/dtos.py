"""Item DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateItemDTO``: input for item creation.
- ``UpdateItemDTO``: input for a full item update.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from modules.items.constants import PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS

Price = Annotated[
    Decimal,
    Field(ge=0, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES),
]


class CreateItemDTO(BaseModel):
    """Immutable DTO for item creation requests.

    ``name``, ``picture_url`` and ``price`` are all required.  The price
    may be zero but never negative, and must fit the stored column
    (at most two decimals and ten digits in total).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    picture_url: str
    price: Price

    @field_validator("name", "picture_url")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Field must not be empty.")
        return v.strip()


class UpdateItemDTO(CreateItemDTO):
    """Immutable DTO for item update requests.

    The update replaces ``name``, ``picture_url`` and ``price`` as a
    whole.  ``status`` is optional; when given it must be a JSON integer
    and a legal move from the item's current status.
    """

    status: Optional[StrictInt] = None
