"""
Tests for `domain/sale_status.py`.

Covers:
- Only the four known statuses are accepted.
- Every state may move to every state, including itself.
- Final states are informational and never block a transition.
"""

from __future__ import annotations

import pytest

from domain.sale_status import (
    INITIAL_STATUS,
    TRANSITIONS,
    InvalidStatus,
    SaleStatus,
    apply_transition,
    can_transition,
    is_final,
)


def test_initial_status_is_pending() -> None:
    assert INITIAL_STATUS is SaleStatus.PENDING


def test_pending_to_confirmed() -> None:
    assert apply_transition("pending", "confirmed") is SaleStatus.CONFIRMED


def test_unknown_requested_status_is_rejected() -> None:
    with pytest.raises(InvalidStatus) as exc_info:
        apply_transition("delivered", "bogus")

    assert exc_info.value.value == "bogus"
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize("requested", ["", "Pending", "CONFIRMED", " delivered"])
def test_requested_status_must_match_exactly(requested: str) -> None:
    with pytest.raises(InvalidStatus):
        apply_transition("pending", requested)


def test_self_transition_succeeds() -> None:
    assert apply_transition("cancelled", "cancelled") is SaleStatus.CANCELLED


def test_every_state_reaches_every_state() -> None:
    for current in SaleStatus:
        assert TRANSITIONS[current] == frozenset(SaleStatus)
        for requested in SaleStatus:
            assert apply_transition(current, requested.value) is requested


def test_final_states_do_not_block_transitions() -> None:
    assert is_final("delivered")
    assert is_final(SaleStatus.CANCELLED)
    assert not is_final("pending")
    assert not is_final("bogus")

    assert apply_transition("cancelled", "pending") is SaleStatus.PENDING
    assert apply_transition("delivered", "confirmed") is SaleStatus.CONFIRMED


def test_unknown_current_status_can_still_be_reassigned() -> None:
    assert can_transition("legacy_value", "confirmed")
    assert apply_transition("legacy_value", "confirmed") is SaleStatus.CONFIRMED


def test_can_transition_rejects_unknown_target() -> None:
    assert not can_transition("pending", "shipped")
