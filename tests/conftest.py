"""
Pytest configuration.

This file adds the project root to the Python path so that tests can import
from the domain, repositories and services packages.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
# so tests can import domain, repositories, etc.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from typing import Dict, List, Optional, Tuple

import pytest

from domain.client import Client
from domain.product import Product, count_low_stock
from domain.sale import SaleRecord
from domain.sale_status import SaleStatus
from domain.time import PeriodBounds
from domain.user import User
from services.ports import (
    ClientReader,
    ProductReader,
    RecordWriter,
    SaleQueryFilters,
    SaleReader,
    SaleWriter,
    UserReader,
)


class InMemorySales(SaleReader, SaleWriter):
    """Sale store backed by a list; records every write call."""

    def __init__(self, records: Optional[List[SaleRecord]] = None) -> None:
        self.records: List[SaleRecord] = list(records or [])
        self.calls: List[Tuple[str, int]] = []
        self.persisted: Dict[int, SaleStatus] = {}
        self.fail_on: Optional[str] = None
        self.requested_bounds: List[PeriodBounds] = []

    def _maybe_fail(self, name: str) -> None:
        if self.fail_on == name:
            raise RuntimeError(f"Failed to {name}: simulated outage")

    def fetch_recent_sales(self, limit: int, filters: Optional[SaleQueryFilters] = None) -> List[SaleRecord]:
        self._maybe_fail("fetch_recent_sales")
        ordered = sorted(self.records, key=lambda r: r.sold_at, reverse=True)
        return ordered[:limit]

    def fetch_sales_between(self, bounds: PeriodBounds) -> List[SaleRecord]:
        self._maybe_fail("fetch_sales_between")
        self.requested_bounds.append(bounds)
        return [r for r in self.records if bounds.contains(r.sold_at)]

    def persist_status(self, sale_id: int, status: SaleStatus) -> None:
        self._maybe_fail("persist_status")
        self.calls.append(("persist_status", sale_id))
        self.persisted[sale_id] = status

    def delete_line_items(self, sale_id: int) -> None:
        self._maybe_fail("delete_line_items")
        self.calls.append(("delete_line_items", sale_id))

    def delete_sale(self, sale_id: int) -> None:
        self._maybe_fail("delete_sale")
        self.calls.append(("delete_sale", sale_id))
        self.records = [r for r in self.records if r.sale_id != sale_id]


class InMemoryProducts(ProductReader):

    def __init__(self, products: Optional[List[Product]] = None, sold: Optional[List[Tuple[int, str, int]]] = None) -> None:
        self.products = list(products or [])
        self.sold = list(sold or [])

    def fetch_recent_products(self, limit: int) -> List[Product]:
        return self.products[:limit]

    def count_low_stock(self, threshold: int) -> int:
        return count_low_stock(self.products, threshold)

    def fetch_sold_quantities(self) -> List[Tuple[int, str, int]]:
        return list(self.sold)


class InMemoryUsers(UserReader):

    def __init__(self, users: Optional[List[User]] = None) -> None:
        self.users = list(users or [])

    def fetch_recent_users(self, limit: int) -> List[User]:
        return self.users[:limit]


class InMemoryClients(ClientReader):

    def __init__(self, clients: Optional[List[Client]] = None) -> None:
        self.clients = list(clients or [])

    def fetch_recent_clients(self, limit: int) -> List[Client]:
        return self.clients[:limit]


class RecordingWriter(RecordWriter):

    def __init__(self) -> None:
        self.deleted: List[Tuple[str, int]] = []
        self.flags: List[Tuple[str, int, bool]] = []

    def delete_row(self, table: str, row_id: int) -> None:
        self.deleted.append((table, row_id))

    def set_active(self, table: str, row_id: int, active: bool) -> None:
        self.flags.append((table, row_id, active))


@pytest.fixture
def sales_store() -> InMemorySales:
    return InMemorySales()


@pytest.fixture
def record_writer() -> RecordingWriter:
    return RecordingWriter()
