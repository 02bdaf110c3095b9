from __future__ import annotations

from decimal import Decimal

import pytest
from django.db import IntegrityError
from django.db.models import Q

from modules.items.models import Item

pytestmark = pytest.mark.unit


class TestItem:
    def test_status_defaults_to_pending(self, make_item):
        assert make_item().status == 0

    def test_price_constraint_uses_condition(self):
        (constraint,) = Item._meta.constraints
        assert constraint.condition == Q(price__gte=0)

    def test_negative_price_rejected_by_database(self):
        with pytest.raises(IntegrityError):
            Item.objects.create(
                name="Mug",
                picture_url="https://cdn.example.com/mug.png",
                price=Decimal("-1.00"),
            )

    def test_str(self):
        assert str(Item(name="Mug", price=Decimal("3.50"))) == "Mug (3.50)"
