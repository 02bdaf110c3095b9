"""Order DRF serializers for API output.

Input is validated by the Pydantic DTOs in ``dtos.py``; these
serializers only render orders and their item snapshots.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import Order, OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    """Read serializer for an item snapshot.

    ``id`` is the catalogue item id, which is what clients use to
    address the item inside the order.
    """

    id = serializers.UUIDField(source="item_id", read_only=True)
    status = serializers.IntegerField(source="current_status", read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "name",
            "picture_url",
            "price",
            "status",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for orders with their item snapshots."""

    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "number",
            "status",
            "total_price",
            "items",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
