"""
Tests for `services/sale_admin_service.py`.
"""

from __future__ import annotations

import pytest

from domain.sale_status import InvalidStatus, SaleStatus
from services.sale_admin_service import change_sale_status, delete_sale


def test_change_sale_status_persists_the_new_status(sales_store) -> None:
    result = change_sale_status(sales_store, 12, "pending", "confirmed")

    assert result is SaleStatus.CONFIRMED
    assert sales_store.persisted == {12: SaleStatus.CONFIRMED}


def test_invalid_status_never_reaches_the_writer(sales_store) -> None:
    with pytest.raises(InvalidStatus):
        change_sale_status(sales_store, 12, "delivered", "bogus")

    assert sales_store.calls == []
    assert sales_store.persisted == {}


def test_self_transition_is_persisted(sales_store) -> None:
    assert change_sale_status(sales_store, 3, "cancelled", "cancelled") is SaleStatus.CANCELLED
    assert sales_store.persisted[3] is SaleStatus.CANCELLED


def test_writer_failure_propagates(sales_store) -> None:
    sales_store.fail_on = "persist_status"

    with pytest.raises(RuntimeError):
        change_sale_status(sales_store, 3, "pending", "confirmed")


def test_delete_removes_line_items_before_the_sale(sales_store) -> None:
    delete_sale(sales_store, 44)

    assert sales_store.calls == [("delete_line_items", 44), ("delete_sale", 44)]


def test_delete_has_no_status_precondition(sales_store) -> None:
    change_sale_status(sales_store, 5, "pending", "delivered")
    delete_sale(sales_store, 5)

    assert ("delete_sale", 5) in sales_store.calls


def test_delete_stops_when_line_items_cannot_be_removed(sales_store) -> None:
    sales_store.fail_on = "delete_line_items"

    with pytest.raises(RuntimeError):
        delete_sale(sales_store, 44)

    assert ("delete_sale", 44) not in sales_store.calls
