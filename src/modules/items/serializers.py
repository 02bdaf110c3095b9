"""Item DRF serializers for API output.

Input is validated by the Pydantic DTOs in ``dtos.py``; these
serializers only render items.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.items.models import Item


class ItemSerializer(serializers.ModelSerializer):
    """Read serializer for the Item resource."""

    class Meta:
        model = Item
        fields = [
            "id",
            "name",
            "picture_url",
            "price",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
