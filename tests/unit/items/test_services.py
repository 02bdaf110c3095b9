"""Unit tests for ItemService.

Covers:
- create_item: payload passed to the repository.
- update_item: field replacement, status moves, not found.
- get_item: malformed and unknown ids.
- delete_item / list_items: delegation to the repository.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from modules.core.transitions import InvalidTransition
from modules.items.constants import ItemStatus
from modules.items.dtos import CreateItemDTO, UpdateItemDTO
from modules.items.exceptions import InvalidItemId, ItemNotFound
from modules.items.models import Item
from modules.items.services import ItemService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda item: item
    return repo


@pytest.fixture()
def service(mock_repo):
    return ItemService(repository=mock_repo)


def _update_dto(**overrides) -> UpdateItemDTO:
    data = {
        "name": "Stoneware mug",
        "picture_url": "https://cdn.example.com/stoneware.png",
        "price": Decimal("12.50"),
    }
    data.update(overrides)
    return UpdateItemDTO(**data)


# ---------------------------------------------------------------------------
# create_item
# ---------------------------------------------------------------------------


class TestCreateItem:
    def test_passes_fields_to_repository(self, service, mock_repo):
        mock_repo.create.return_value = Item(name="Mug")
        dto = CreateItemDTO(
            name="  Mug ",
            picture_url="https://cdn.example.com/mug.png",
            price=Decimal("0"),
        )

        service.create_item(dto)

        mock_repo.create.assert_called_once_with(
            {
                "name": "Mug",
                "picture_url": "https://cdn.example.com/mug.png",
                "price": Decimal("0"),
            }
        )


# ---------------------------------------------------------------------------
# update_item
# ---------------------------------------------------------------------------


class TestUpdateItem:
    def test_replaces_fields(self, service, mock_repo):
        item = Item(name="Mug", price=Decimal("10.00"))
        mock_repo.get_by_id.return_value = item

        result = service.update_item(str(item.id), _update_dto())

        assert result.name == "Stoneware mug"
        assert result.price == Decimal("12.50")
        assert result.status == ItemStatus.PENDING
        mock_repo.save.assert_called_once_with(item)

    def test_advances_status(self, service, mock_repo):
        item = Item(name="Mug", status=ItemStatus.IN_PRODUCTION)
        mock_repo.get_by_id.return_value = item

        result = service.update_item(str(item.id), _update_dto(status=2))

        assert result.status == ItemStatus.DONE

    def test_backwards_status_rejected(self, service, mock_repo):
        item = Item(name="Mug", status=ItemStatus.DONE)
        mock_repo.get_by_id.return_value = item

        with pytest.raises(InvalidTransition):
            service.update_item(str(item.id), _update_dto(status=1))
        mock_repo.save.assert_not_called()

    def test_past_done_rejected(self, service, mock_repo):
        item = Item(name="Mug", status=ItemStatus.DONE)
        mock_repo.get_by_id.return_value = item

        with pytest.raises(InvalidTransition):
            service.update_item(str(item.id), _update_dto(status=3))

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ItemNotFound):
            service.update_item(str(uuid4()), _update_dto())


# ---------------------------------------------------------------------------
# get_item / delete_item / list_items
# ---------------------------------------------------------------------------


class TestQueries:
    def test_get_item(self, service, mock_repo):
        item = Item(name="Mug")
        mock_repo.get_by_id.return_value = item
        assert service.get_item(str(item.id)) is item
        mock_repo.get_by_id.assert_called_once_with(str(item.id))

    def test_get_item_malformed_id(self, service, mock_repo):
        with pytest.raises(InvalidItemId):
            service.get_item("mug")
        mock_repo.get_by_id.assert_not_called()

    def test_get_item_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ItemNotFound):
            service.get_item(str(uuid4()))

    def test_delete_item(self, service, mock_repo):
        item = Item(name="Mug")
        mock_repo.get_by_id.return_value = item

        service.delete_item(str(item.id))

        mock_repo.delete.assert_called_once_with(str(item.id))

    def test_delete_missing_item(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ItemNotFound):
            service.delete_item(str(uuid4()))
        mock_repo.delete.assert_not_called()

    def test_list_items(self, service, mock_repo):
        mock_repo.list.return_value = []
        assert service.list_items({"status": 1}, ordering=["-price"]) == []
        mock_repo.list.assert_called_once_with({"status": 1}, ordering=["-price"])
