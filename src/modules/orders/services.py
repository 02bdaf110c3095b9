"""Order service layer (Use Cases).

Orchestrates the order lifecycle: creation, whole-order update, the
status of a single item inside an order, and deletion.  All write
operations are atomic; the service defines the unit-of-work boundary.

Rules enforced:
- New orders are numbered after the latest inserted order, wrapping
  100 -> 1 (``sequencing.next_order_number``).
- Attaching items (creation, whole update) snapshots them with their
  status reset to pending and recomputes ``total_price``
  (``aggregation.attach_items``).
- Order and item statuses only move forward by one step or stay put
  (``modules.core.transitions``).
- Updating one item's status changes nothing else on the order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence
from uuid import UUID

import structlog
from django.conf import settings
from django.db import transaction

from modules.core.identifiers import parse_id
from modules.core.transitions import InvalidTransition, check_transition
from modules.items.constants import ITEM_STATUS_TERMINAL
from modules.items.exceptions import InvalidItemId
from modules.orders.aggregation import AttachedItems, attach_items
from modules.orders.constants import (
    ORDER_STATUS_TERMINAL,
    ORDER_TOTAL_MAX,
    OrderStatus,
)
from modules.orders.exceptions import (
    EmptyItemSet,
    InvalidOrderId,
    MissingStatus,
    OrderNotFound,
    OrderTotalTooLarge,
)
from modules.orders.sequencing import next_order_number

if TYPE_CHECKING:
    from modules.items.models import Item
    from modules.items.repositories.interfaces import IItemRepository
    from modules.orders.dtos import (
        CreateOrderDTO,
        UpdateItemStatusDTO,
        UpdateOrderDTO,
    )
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).

    ``falsy_status_is_absent`` reproduces the legacy behaviour where a
    proposed order status of ``0`` on a whole-order update was taken as
    "no status supplied".  It defaults to the
    ``ORDERS_FALSY_STATUS_IS_ABSENT`` setting.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        item_repository: IItemRepository,
        falsy_status_is_absent: Optional[bool] = None,
    ) -> None:
        self._order_repo = order_repository
        self._item_repo = item_repository
        if falsy_status_is_absent is None:
            falsy_status_is_absent = getattr(
                settings, "ORDERS_FALSY_STATUS_IS_ABSENT", False
            )
        self._falsy_status_is_absent = falsy_status_is_absent

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create a new order from catalogue item ids.

        Ids that match no item are silently dropped.  The order gets
        the next display number, pending status, and pending snapshots
        of the items.

        Raises:
            OrderTotalTooLarge: the items add up to more than a total can hold.
        """
        log = logger.bind(requested_items=len(dto.items))
        log.info("order.creation_started")

        items = self._item_repo.list_by_ids(dto.items)
        latest = self._order_repo.get_latest()
        number = next_order_number(latest.number if latest else None)
        attached = self._attach(items, log)

        order = self._order_repo.create(
            {
                "number": number,
                "status": OrderStatus.PENDING,
                "attached": attached,
            }
        )

        log.info(
            "order.created",
            order_id=str(order.id),
            number=number,
            item_count=len(attached.items),
            total_price=str(attached.total_price),
        )
        return order

    @transaction.atomic
    def update_order(self, order_id: str, dto: UpdateOrderDTO) -> Order:
        """Replace an order's items and/or advance its status.

        Steps:
        1. Lock the order row.
        2. Resolve item ids: the proposed ids when non-empty, otherwise
           the ids currently on the order.
        3. Resolve status: the proposed status when supplied, otherwise
           the current one.
        4. Validate the status move.
        5. Re-attach the resolved items (statuses reset, total recomputed).

        Raises:
            InvalidOrderId: the id is malformed.
            OrderNotFound: the order does not exist.
            EmptyItemSet: no item ids, or none of them exists.
            OrderTotalTooLarge: the items add up to more than a total can hold.
            InvalidTransition: the status move is not allowed.
        """
        order = self._lock_order(order_id)
        log = logger.bind(order_id=str(order.id), current_status=order.status)

        item_ids = list(dto.items) if dto.items else [
            snapshot.item_id for snapshot in order.items.all()
        ]
        if not item_ids:
            log.warning("order.empty_item_set")
            raise EmptyItemSet()

        new_status = self._resolve_status(order, dto.status)
        log = log.bind(new_status=new_status)
        try:
            check_transition(order.status, new_status, upper=ORDER_STATUS_TERMINAL)
        except InvalidTransition:
            log.warning("order.invalid_transition")
            raise

        items = self._item_repo.list_by_ids(item_ids)
        if not items:
            log.warning("order.empty_item_set", requested_items=len(item_ids))
            raise EmptyItemSet("None of the requested items exists.")

        attached = self._attach(items, log)
        order = self._order_repo.replace_items(order, new_status, attached)

        log.info(
            "order.updated",
            item_count=len(attached.items),
            total_price=str(attached.total_price),
        )
        return order

    @transaction.atomic
    def update_item_status(
        self, order_id: str, item_id: str, dto: UpdateItemStatusDTO
    ) -> Order:
        """Advance the status of one item inside an order.

        Only the matching snapshot changes; other snapshots, the order
        status and ``total_price`` are left as they are.  An ``item_id``
        that is not part of the order changes nothing.

        Raises:
            MissingStatus: ``dto.status`` was not supplied.
            InvalidOrderId / InvalidItemId: an id is malformed.
            OrderNotFound: the order does not exist.
            InvalidTransition: the status move is not allowed.
        """
        if dto.status is None:
            raise MissingStatus()

        target = parse_id(item_id, InvalidItemId)
        order = self._lock_order(order_id)
        log = logger.bind(
            order_id=str(order.id), item_id=str(target), new_status=dto.status
        )

        statuses: Dict[UUID, int] = {}
        for snapshot in order.items.all():
            if snapshot.item_id != target:
                continue
            try:
                check_transition(
                    snapshot.current_status, dto.status, upper=ITEM_STATUS_TERMINAL
                )
            except InvalidTransition:
                log.warning(
                    "order.item_invalid_transition",
                    current_status=snapshot.current_status,
                )
                raise
            statuses[snapshot.item_id] = dto.status

        if not statuses:
            log.warning("order.item_not_in_order")
            return self.get_order(str(order.id))

        self._order_repo.update_item_statuses(order, statuses)
        log.info("order.item_status_updated")
        return self.get_order(str(order.id))

    @transaction.atomic
    def delete_order(self, order_id: str) -> None:
        """Delete an order and its snapshots.

        Raises:
            InvalidOrderId: the id is malformed.
            OrderNotFound: the order does not exist.
        """
        order = self.get_order(order_id)
        self._order_repo.delete(str(order.id))
        logger.info("order.deleted", order_id=str(order.id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> Order:
        """Retrieve a single order by ID.

        Raises:
            InvalidOrderId: the id is malformed.
            OrderNotFound: the order does not exist.
        """
        parsed = parse_id(order_id, InvalidOrderId)
        order = self._order_repo.get_by_id(str(parsed))
        if not order:
            raise OrderNotFound(f"Order {parsed} not found.")
        return order

    def list_orders(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
    ) -> List[Order]:
        """Return orders, optionally filtered, sorted and capped."""
        return self._order_repo.list(filters, ordering=ordering, limit=limit)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _lock_order(self, order_id: str) -> Order:
        parsed = parse_id(order_id, InvalidOrderId)
        order = self._order_repo.get_for_update(str(parsed))
        if not order:
            raise OrderNotFound(f"Order {parsed} not found.")
        return order

    def _attach(self, items: Sequence[Item], log: Any) -> AttachedItems:
        attached = attach_items(items)
        if attached.total_price > ORDER_TOTAL_MAX:
            log.warning("order.total_too_large", total_price=str(attached.total_price))
            raise OrderTotalTooLarge()
        return attached

    def _resolve_status(self, order: Order, proposed: Optional[int]) -> int:
        if proposed is None:
            return order.status
        if self._falsy_status_is_absent and not proposed:
            return order.status
        return proposed
