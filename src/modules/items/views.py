"""Item API views.

Exposes the ``ItemService`` via HTTP using a DRF ViewSet.
Domain exceptions and DTO validation errors propagate to
``modules.core.handlers.DomainExceptionHandler``, which renders them.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.filters import lookups_from_request, ordering_from_request
from modules.items.dtos import CreateItemDTO, UpdateItemDTO
from modules.items.filters import ItemFilter
from modules.items.models import Item
from modules.items.repositories.django_repository import ItemDjangoRepository
from modules.items.serializers import ItemSerializer
from modules.items.services import ItemService


class ItemViewSet(GenericViewSet):
    """ViewSet for the item catalogue.

    Uses ``ItemService`` with ``ItemDjangoRepository`` (DIP).
    Reads and writes go through the service and repository layer, never
    through the ORM directly.
    """

    queryset = Item.objects.all()
    serializer_class = ItemSerializer
    filterset_class = ItemFilter
    ordering_fields = ["name", "price", "status", "created_at"]
    ordering = ["created_at", "id"]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ItemService(repository=ItemDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/items/?sort=-price,name"""
        items = self._service.list_items(
            filters=lookups_from_request(ItemFilter, request),
            ordering=ordering_from_request(request, self),
        )
        return Response(ItemSerializer(items, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/items/{pk}/"""
        item = self._service.get_item(pk)
        return Response(ItemSerializer(item).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/items/"""
        dto = CreateItemDTO.model_validate(request.data)
        item = self._service.create_item(dto)
        return Response(ItemSerializer(item).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/items/{pk}/"""
        dto = UpdateItemDTO.model_validate(request.data)
        item = self._service.update_item(pk, dto)
        return Response(ItemSerializer(item).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/items/{pk}/"""
        self._service.delete_item(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
