"""
Tests for `domain/sale.py`.

Covers:
- SaleRecord.sold_at must be a UTC timestamp.
- SaleRecord is immutable (frozen) and rejects negative totals.
- LineItem validates quantity / unit price and computes its subtotal.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from domain.sale import LineItem, SaleRecord


def test_sale_record_sold_at_must_be_utc() -> None:
    """Verify sold_at enforces UTC timezone-aware timestamp."""

    with pytest.raises(ValueError):
        SaleRecord(sale_id=1, sold_at=datetime(2025, 1, 1, 0, 0, 0), total_amount=Decimal("10"))

    with pytest.raises(ValueError):
        SaleRecord(
            sale_id=1,
            sold_at=datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone(timedelta(hours=2))),
            total_amount=Decimal("10"),
        )


def test_sale_record_is_immutable() -> None:
    """Verify SaleRecord cannot be mutated after creation (frozen entity)."""

    sale = SaleRecord(
        sale_id=1,
        sold_at=datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone.utc),
        total_amount=Decimal("10"),
    )

    with pytest.raises(FrozenInstanceError):
        sale.status = "confirmed"  # type: ignore[misc]


def test_sale_record_defaults_to_pending_without_items() -> None:
    sale = SaleRecord(sale_id=7, sold_at=datetime(2025, 1, 1, tzinfo=timezone.utc), total_amount=Decimal("0"))

    assert sale.status == "pending"
    assert sale.items == ()


def test_sale_record_rejects_negative_total() -> None:
    with pytest.raises(ValueError):
        SaleRecord(sale_id=1, sold_at=datetime(2025, 1, 1, tzinfo=timezone.utc), total_amount=Decimal("-1"))


def test_line_item_subtotal_is_quantity_times_unit_price() -> None:
    item = LineItem(product_id=3, quantity=4, unit_price=Decimal("12.50"), product_name="Paracetamol 500mg")

    assert item.subtotal == Decimal("50.00")


def test_line_item_validation() -> None:
    with pytest.raises(ValueError):
        LineItem(product_id=3, quantity=0, unit_price=Decimal("1"))

    with pytest.raises(ValueError):
        LineItem(product_id=3, quantity=1, unit_price=Decimal("-0.01"))
