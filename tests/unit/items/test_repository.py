"""Unit tests for ItemDjangoRepository."""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest

from modules.items.models import Item
from modules.items.repositories.django_repository import ItemDjangoRepository
from modules.orders.models import Order, OrderItem

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return ItemDjangoRepository()


class TestItemRepository:
    def test_create(self, repo):
        item = repo.create(
            {
                "name": "Mug",
                "picture_url": "https://cdn.example.com/mug.png",
                "price": Decimal("4.00"),
            }
        )
        assert Item.objects.get(id=item.id).name == "Mug"

    def test_get_by_id(self, repo, make_item):
        item = make_item()
        assert repo.get_by_id(str(item.id)) == item

    def test_get_by_id_missing_or_invalid(self, repo):
        assert repo.get_by_id(str(uuid4())) is None
        assert repo.get_by_id("nope") is None

    def test_list_by_ids_skips_unknown(self, repo, make_item):
        mug = make_item(name="Mug")
        make_item(name="Plate")
        assert repo.list_by_ids([mug.id, uuid4()]) == [mug]

    def test_list_filters_and_orders(self, repo, make_item):
        make_item(name="Cheap mug", price=Decimal("2.00"))
        make_item(name="Fancy mug", price=Decimal("20.00"))
        make_item(name="Plate", price=Decimal("5.00"))

        result = repo.list({"name__icontains": "mug"}, ordering=["-price"])

        assert [item.name for item in result] == ["Fancy mug", "Cheap mug"]

    def test_save(self, repo, make_item):
        item = make_item()
        item.price = Decimal("99.99")
        repo.save(item)
        item.refresh_from_db()
        assert item.price == Decimal("99.99")

    def test_delete_keeps_order_snapshots(self, repo, make_item):
        item = make_item()
        order = Order.objects.create(number=1)
        OrderItem.objects.create(
            order=order,
            item_id=item.id,
            name=item.name,
            picture_url=item.picture_url,
            price=item.price,
        )

        assert repo.delete(str(item.id)) is True

        assert not Item.objects.filter(id=item.id).exists()
        assert OrderItem.objects.filter(item_id=item.id).count() == 1

    def test_delete_missing(self, repo):
        assert repo.delete(str(uuid4())) is False
