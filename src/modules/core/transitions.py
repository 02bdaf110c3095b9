"""Status transition rule shared by orders, order items and catalogue items.

Every status in the system lives on a linear scale starting at 0.  A
status may stay where it is or advance by exactly one step; it never
moves backwards and never skips a step.  When the scale has a terminal
value (``upper``), nothing may go past it.
"""

from __future__ import annotations

from typing import Optional

from modules.core.exceptions import Forbidden


class InvalidTransition(Forbidden):
    """A status move went backwards, skipped a step or left the terminal state."""

    default_code = "invalid_transition"
    default_detail = "Invalid status transition."


def can_transition(current: int, proposed: int, upper: Optional[int] = None) -> bool:
    """Return ``True`` if moving from ``current`` to ``proposed`` is legal."""
    if upper is not None and proposed > upper:
        return False
    return current <= proposed <= current + 1


def check_transition(
    current: int, proposed: int, upper: Optional[int] = None
) -> None:
    """Raise ``InvalidTransition`` unless ``current -> proposed`` is legal."""
    if not can_transition(current, proposed, upper):
        raise InvalidTransition(
            f"Cannot transition status from {current} to {proposed}."
        )
