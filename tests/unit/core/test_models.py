"""Unit tests for BaseModel, exercised through the concrete ``Item`` model."""

from __future__ import annotations

import uuid
from datetime import timedelta

import pytest
from freezegun import freeze_time

from django.utils import timezone

from modules.items.models import Item

pytestmark = pytest.mark.unit


class TestBaseModel:
    """Tests for UUIDv7 PK and timestamp behaviour."""

    def test_id_is_uuid_version_7(self, make_item):
        item = make_item()
        assert isinstance(item.id, uuid.UUID)
        assert item.id.version == 7

    def test_ids_are_time_ordered(self, make_item):
        """UUIDv7 encodes timestamp, so sequential creates yield ordered IDs."""
        first = make_item(name="first")
        second = make_item(name="second")
        assert first.id < second.id
        assert Item.objects.order_by("-id").first() == second

    def test_timestamps_set_on_create(self, make_item):
        item = make_item()
        assert item.created_at is not None
        assert item.updated_at is not None

    def test_updated_at_changes_on_save(self, make_item):
        item = make_item()
        created = item.created_at
        with freeze_time(timezone.now() + timedelta(minutes=5)):
            item.name = "Renamed"
            item.save()
        item.refresh_from_db()
        assert item.updated_at > created
        assert item.created_at == created

    def test_save_with_update_fields_includes_updated_at(self, make_item):
        """The save() guard must inject updated_at into update_fields."""
        item = make_item()
        original = item.updated_at
        with freeze_time(timezone.now() + timedelta(minutes=5)):
            item.name = "Renamed"
            item.save(update_fields=["name"])
        item.refresh_from_db()
        assert item.name == "Renamed"
        assert item.updated_at > original

    def test_id_is_not_editable(self):
        assert Item._meta.get_field("id").editable is False
