"""
Domain: Sale records and their line items.

A SaleRecord is a read-only snapshot of one point-of-sale transaction as stored
by the persistence layer. The reporting and status modules only ever receive
these snapshots by value; they never create or mutate sales.

Invariants:
- sold_at is a UTC timestamp.
- total_amount is a non-negative Decimal.
- Line item quantity is >= 1 and unit price is >= 0.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple

from .sale_status import INITIAL_STATUS
from .time import require_utc_timestamp


@dataclass(frozen=True, slots=True)
class LineItem:
    """One product/quantity/price entry within a sale."""

    product_id: Optional[int]
    quantity: int
    unit_price: Decimal
    product_name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("quantity must be >= 1")
        if self.unit_price < 0:
            raise ValueError("unit_price must be >= 0")

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True, slots=True)
class SaleRecord:
    """
    Immutable snapshot of a sale.

    `status` is kept as the literal stored in the database so that status
    bucketing can report values outside the known enumeration as they are.
    """

    sale_id: int
    sold_at: datetime
    total_amount: Decimal
    status: str = INITIAL_STATUS.value
    client_id: Optional[int] = None
    items: Tuple[LineItem, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        require_utc_timestamp("sold_at", self.sold_at)
        if self.total_amount < 0:
            raise ValueError("total_amount must be >= 0")
