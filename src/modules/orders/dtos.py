"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateOrderDTO``: item ids for a new order.
- ``UpdateOrderDTO``: optional replacement item ids and status.
- ``UpdateItemStatusDTO``: new status of one item inside an order.

Statuses are strict integers: JSON booleans and numeric strings are
rejected instead of being coerced.
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, StrictInt


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Ids that match no catalogue item are dropped by the service, so
    the list is not checked for emptiness here.
    """

    model_config = ConfigDict(frozen=True)

    items: List[UUID]


class UpdateOrderDTO(BaseModel):
    """Immutable DTO for whole-order updates.

    Both fields are optional: a missing or empty ``items`` keeps the
    order's current items and a missing ``status`` keeps its status.
    """

    model_config = ConfigDict(frozen=True)

    items: Optional[List[UUID]] = None
    status: Optional[StrictInt] = None


class UpdateItemStatusDTO(BaseModel):
    """Immutable DTO for the status of a single item in an order.

    ``status`` is optional at this level only so the service can report
    its absence as ``MissingStatus`` rather than a generic validation
    error.
    """

    model_config = ConfigDict(frozen=True)

    status: Optional[StrictInt] = None
