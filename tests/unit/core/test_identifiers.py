from __future__ import annotations

from uuid import UUID

import pytest

from modules.core.exceptions import InvalidIdentifier
from modules.core.identifiers import parse_id
from modules.orders.exceptions import InvalidOrderId

pytestmark = pytest.mark.unit


class TestParseId:
    def test_accepts_uuid_string(self):
        value = "0190a0f2-8e4c-7b4a-9b1e-3c5d7e9f1a2b"
        assert parse_id(value) == UUID(value)

    def test_passes_uuid_through(self):
        value = UUID("0190a0f2-8e4c-7b4a-9b1e-3c5d7e9f1a2b")
        assert parse_id(value) is value

    @pytest.mark.parametrize("value", ["", "abc", "123", None])
    def test_rejects_malformed(self, value):
        with pytest.raises(InvalidIdentifier):
            parse_id(value)

    def test_raises_requested_error(self):
        with pytest.raises(InvalidOrderId) as exc_info:
            parse_id("nope", InvalidOrderId)
        assert exc_info.value.status_code == 400
