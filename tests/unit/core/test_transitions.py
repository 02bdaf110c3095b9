"""Unit tests for the shared status transition rule."""

from __future__ import annotations

import pytest

from modules.core.transitions import (
    InvalidTransition,
    can_transition,
    check_transition,
)
from modules.items.constants import ITEM_STATUS_TERMINAL
from modules.orders.constants import ORDER_STATUS_TERMINAL

pytestmark = pytest.mark.unit

STATUSES = range(-2, 6)


# ---------------------------------------------------------------------------
# can_transition
# ---------------------------------------------------------------------------


class TestCanTransition:
    @pytest.mark.parametrize("current", STATUSES)
    @pytest.mark.parametrize("proposed", STATUSES)
    def test_only_stay_or_advance_by_one(self, current, proposed):
        expected = proposed in (current, current + 1)
        assert can_transition(current, proposed) is expected

    def test_same_status_is_allowed(self):
        assert can_transition(2, 2) is True

    def test_next_status_is_allowed(self):
        assert can_transition(0, 1) is True

    def test_skip_is_rejected(self):
        assert can_transition(1, 3) is False

    def test_backwards_is_rejected(self):
        assert can_transition(1, 0) is False

    def test_no_upper_bound_by_default(self):
        assert can_transition(99, 100) is True


class TestUpperBound:
    def test_terminal_order_status_stays(self):
        assert can_transition(
            ORDER_STATUS_TERMINAL, ORDER_STATUS_TERMINAL, upper=ORDER_STATUS_TERMINAL
        )

    def test_cannot_leave_terminal_order_status(self):
        assert not can_transition(
            ORDER_STATUS_TERMINAL,
            ORDER_STATUS_TERMINAL + 1,
            upper=ORDER_STATUS_TERMINAL,
        )

    def test_reaching_terminal_item_status(self):
        assert can_transition(
            ITEM_STATUS_TERMINAL - 1, ITEM_STATUS_TERMINAL, upper=ITEM_STATUS_TERMINAL
        )

    def test_cannot_leave_terminal_item_status(self):
        assert not can_transition(
            ITEM_STATUS_TERMINAL, ITEM_STATUS_TERMINAL + 1, upper=ITEM_STATUS_TERMINAL
        )


# ---------------------------------------------------------------------------
# check_transition
# ---------------------------------------------------------------------------


class TestCheckTransition:
    def test_legal_move_returns_none(self):
        assert check_transition(0, 1) is None

    def test_illegal_move_raises(self):
        with pytest.raises(InvalidTransition, match="from 1 to 3"):
            check_transition(1, 3)

    def test_error_maps_to_forbidden(self):
        with pytest.raises(InvalidTransition) as exc_info:
            check_transition(2, 1)
        assert exc_info.value.status_code == 403
        assert exc_info.value.default_code == "invalid_transition"
