"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
All write operations are wrapped in ``transaction.atomic()`` so the
Order aggregate (Order + OrderItem snapshots) is persisted atomically.

Concurrency control on updates uses ``select_for_update()`` (see
``get_for_update``) instead of a version field.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from modules.orders.aggregation import AttachedItems
from modules.orders.constants import OrderStatus
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create (aggregate root + children)
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its item snapshots atomically.

        ``data`` keys:
        - ``number`` (required)
        - ``attached`` (required): ``AttachedItems`` from ``attach_items``
        - ``status`` (optional, defaults to pending)
        """
        attached: AttachedItems = data["attached"]
        order = Order.objects.create(
            number=data["number"],
            status=data.get("status", OrderStatus.PENDING),
            total_price=attached.total_price,
        )
        self._write_snapshots(order, attached)

        logger.info(
            "order.persisted",
            order_id=str(order.id),
            item_count=len(attached.items),
        )
        return self.get_by_id(str(order.id)) or order

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    @transaction.atomic
    def replace_items(
        self, order: Order, status: int, attached: AttachedItems
    ) -> Order:
        """Swap the order's snapshots for ``attached`` and store status/total."""
        OrderItem.objects.filter(order=order).delete()
        self._write_snapshots(order, attached)

        order.status = status
        order.total_price = attached.total_price
        order.save(update_fields=["status", "total_price"])

        logger.info(
            "order.items_replaced",
            order_id=str(order.id),
            item_count=len(attached.items),
        )
        return self.get_by_id(str(order.id)) or order

    @transaction.atomic
    def update_item_statuses(
        self, order: Order, statuses: Mapping[UUID, int]
    ) -> Order:
        now = timezone.now()
        for item_id, status in statuses.items():
            OrderItem.objects.filter(order=order, item_id=item_id).update(
                status=status, updated_at=now
            )
        logger.info(
            "order.item_statuses_updated",
            order_id=str(order.id),
            item_count=len(statuses),
        )
        return order

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with its snapshots prefetched.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Order.objects.prefetch_related("items").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_for_update(self, id: str) -> Optional[Order]:
        """Retrieve an order with a row-level lock (SELECT FOR UPDATE).

        Must be called inside a transaction.  Returns ``None`` for
        non-existent or invalid IDs.
        """
        try:
            return (
                Order.objects.select_for_update()
                .prefetch_related("items")
                .filter(id=id)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def get_latest(self) -> Optional[Order]:
        """UUIDv7 ids sort by insertion time, so the greatest id is the latest."""
        return Order.objects.order_by("-id").first()

    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        ordering: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
    ) -> List[Order]:
        """List orders with optional filters, ordering and limit.

        Supported filter keys are any Django look-ups on ``Order``, e.g.
        ``status__exact`` or ``total_price__gte``.
        """
        queryset = Order.objects.prefetch_related("items")
        if filters:
            queryset = queryset.filter(**filters)
        if ordering:
            queryset = queryset.order_by(*ordering)
        if limit is not None:
            queryset = queryset[:limit]
        return list(queryset)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Delete an order and its snapshots."""
        deleted, _ = Order.objects.filter(id=id).delete()
        return bool(deleted)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _write_snapshots(order: Order, attached: AttachedItems) -> None:
        OrderItem.objects.bulk_create(
            [
                OrderItem(
                    order=order,
                    item_id=snapshot.item_id,
                    name=snapshot.name,
                    picture_url=snapshot.picture_url,
                    price=snapshot.price,
                    status=snapshot.status,
                    position=position,
                )
                for position, snapshot in enumerate(attached.items)
            ]
        )
