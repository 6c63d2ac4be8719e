"""
Data-access interfaces consumed by the dashboard services.

Services receive implementations of these explicitly. The Supabase-backed
implementations live in `repositories/`; tests use in-memory ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Tuple

from domain.client import Client
from domain.product import Product
from domain.sale import SaleRecord
from domain.sale_status import SaleStatus
from domain.time import PeriodBounds
from domain.user import User


@dataclass(frozen=True, slots=True)
class SaleQueryFilters:
    """Filter criteria for sale listings."""
    statuses: Optional[Sequence[SaleStatus]] = None
    client_id: Optional[int] = None
    period: Optional[PeriodBounds] = None


class SaleReader(ABC):
    """Read access to sales. Ordering by sold_at descending is the reader's job."""

    @abstractmethod
    def fetch_recent_sales(self, limit: int, filters: Optional[SaleQueryFilters] = None) -> List[SaleRecord]:
        """Most recent sales first, at most `limit`."""

    @abstractmethod
    def fetch_sales_between(self, bounds: PeriodBounds) -> List[SaleRecord]:
        """Every sale whose sold_at lies within `bounds` (inclusive)."""


class SaleWriter(ABC):
    """Write access to sales. Every method raises on failure."""

    @abstractmethod
    def persist_status(self, sale_id: int, status: SaleStatus) -> None:
        pass

    @abstractmethod
    def delete_sale(self, sale_id: int) -> None:
        pass

    @abstractmethod
    def delete_line_items(self, sale_id: int) -> None:
        pass


class ProductReader(ABC):

    @abstractmethod
    def fetch_recent_products(self, limit: int) -> List[Product]:
        pass

    @abstractmethod
    def count_low_stock(self, threshold: int) -> int:
        """Active products whose quantity is strictly below `threshold`."""

    @abstractmethod
    def fetch_sold_quantities(self) -> List[Tuple[int, str, int]]:
        """(product_id, product_name, quantity) for every line item sold."""


class UserReader(ABC):

    @abstractmethod
    def fetch_recent_users(self, limit: int) -> List[User]:
        """Most recently logged-in users first."""


class ClientReader(ABC):

    @abstractmethod
    def fetch_recent_clients(self, limit: int) -> List[Client]:
        pass


# Tables the dashboard row actions may target; the table name arrives from a
# form post and must never reach the database unchecked.
DELETABLE_TABLES: FrozenSet[str] = frozenset({"clientes", "produtos", "vendas", "usuarios"})

# Tables with a boolean `status` column.
TOGGLEABLE_TABLES: FrozenSet[str] = frozenset({"produtos", "usuarios"})


class RecordWriter(ABC):
    """Generic row mutations used by the dashboard row actions."""

    @abstractmethod
    def delete_row(self, table: str, row_id: int) -> None:
        pass

    @abstractmethod
    def set_active(self, table: str, row_id: int, active: bool) -> None:
        pass


__all__ = [
    "SaleQueryFilters",
    "SaleReader",
    "SaleWriter",
    "ProductReader",
    "UserReader",
    "ClientReader",
    "RecordWriter",
    "DELETABLE_TABLES",
    "TOGGLEABLE_TABLES",
]
