"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.
Domain exceptions and DTO validation errors propagate to
``modules.core.handlers.DomainExceptionHandler``, which maps them to
400 / 403 / 404 responses.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.filters import lookups_from_request, ordering_from_request
from modules.items.repositories.django_repository import ItemDjangoRepository
from modules.orders.dtos import CreateOrderDTO, UpdateItemStatusDTO, UpdateOrderDTO
from modules.orders.filters import OrderFilter
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import OrderSerializer
from modules.orders.services import OrderService


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with injected repositories (DIP).
    Reads and writes go through the service and repository layer, never
    through the ORM directly.
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    ordering_fields = ["number", "status", "total_price", "created_at"]
    ordering = ["-created_at", "-id"]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            item_repository=ItemDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/?status=1&sort=number"""
        orders = self._service.list_orders(
            filters=lookups_from_request(OrderFilter, request),
            ordering=ordering_from_request(request, self),
        )
        return Response(OrderSerializer(orders, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        order = self._service.get_order(pk)
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/

        Body: ``{"items": [<item id>, ...]}``.
        """
        dto = CreateOrderDTO.model_validate(request.data)
        order = self._service.create_order(dto)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/orders/{pk}/

        Body: ``{"items": [...], "status": N}``, both optional.
        """
        dto = UpdateOrderDTO.model_validate(request.data)
        order = self._service.update_order(pk, dto)
        return Response(OrderSerializer(order).data)

    @action(
        detail=True,
        methods=["put"],
        url_path=r"items/(?P<item_id>[^/.]+)",
        url_name="item-status",
    )
    def update_item_status(
        self, request: Request, pk: str | None = None, item_id: str | None = None
    ) -> Response:
        """PUT /api/v1/orders/{pk}/items/{item_id}/

        Body: ``{"status": N}`` (required).
        """
        dto = UpdateItemStatusDTO.model_validate(request.data)
        order = self._service.update_item_status(pk, item_id, dto)
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Destroy
    # ------------------------------------------------------------------

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/orders/{pk}/"""
        self._service.delete_order(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
