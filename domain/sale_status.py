"""
Domain: Sale status lifecycle.

States: pending, confirmed, delivered, cancelled. New sales start as pending
(the surrounding application creates them; this module only validates
transitions).

The transition table is unrestricted: every state may move to every other
state, including itself. `delivered` and `cancelled` are treated as final for
display purposes only; they do not block a transition.

No side effects are performed here (no stock adjustment, no notification).
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Mapping, Union


class SaleStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @staticmethod
    def parse(value: Union[str, "SaleStatus"]) -> "SaleStatus":
        """
        Resolve a status literal.

        Raises InvalidStatus for anything outside the four known values.
        """

        if isinstance(value, SaleStatus):
            return value
        try:
            return SaleStatus(value)
        except ValueError:
            raise InvalidStatus(value) from None


class InvalidStatus(ValueError):
    """Raised when a requested status is not one of the known sale statuses."""

    def __init__(self, value: object) -> None:
        self.value = value
        allowed = ", ".join(s.value for s in SaleStatus)
        super().__init__(f"Invalid sale status {value!r} (expected one of: {allowed})")


INITIAL_STATUS = SaleStatus.PENDING

FINAL_STATUSES: FrozenSet[SaleStatus] = frozenset({SaleStatus.DELIVERED, SaleStatus.CANCELLED})

TRANSITIONS: Mapping[SaleStatus, FrozenSet[SaleStatus]] = {
    status: frozenset(SaleStatus) for status in SaleStatus
}


def is_final(status: Union[str, SaleStatus]) -> bool:
    """True for the practical end states of a normal workflow."""

    try:
        return SaleStatus.parse(status) in FINAL_STATUSES
    except InvalidStatus:
        return False


def can_transition(current: Union[str, SaleStatus], requested: Union[str, SaleStatus]) -> bool:
    try:
        target = SaleStatus.parse(requested)
    except InvalidStatus:
        return False
    try:
        source = SaleStatus.parse(current)
    except InvalidStatus:
        # A stored value outside the enumeration may still be reassigned.
        return True
    return target in TRANSITIONS[source]


def apply_transition(current: Union[str, SaleStatus], requested: Union[str, SaleStatus]) -> SaleStatus:
    """
    Validate a requested status change and return the status to persist.

    Raises:
        InvalidStatus: `requested` is not a known sale status.
    """

    target = SaleStatus.parse(requested)
    if not can_transition(current, target):
        raise InvalidStatus(requested)
    return target
