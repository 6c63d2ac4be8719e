"""
Domain: Products and stock indicators.

Rules:
- A product is "low stock" when it is active and its quantity is strictly
  below the threshold (10 by default).
- Best sellers are ranked by total quantity sold across all line items.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .time import require_utc_timestamp

DEFAULT_LOW_STOCK_THRESHOLD = 10


@dataclass(frozen=True, slots=True)
class Product:
    """Catalogue entry with current stock level and active flag."""

    product_id: int
    name: str
    price: Decimal
    quantity: int
    status: bool = True  # active / inactive
    category: Optional[str] = None
    manufacturer: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.created_at is not None:
            require_utc_timestamp("created_at", self.created_at)

    def is_low_stock(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        return self.status and self.quantity < threshold


@dataclass(frozen=True, slots=True)
class ProductSales:
    product_id: int
    name: str
    quantity_sold: int


def count_low_stock(products: Iterable[Product], threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> int:
    return sum(1 for product in products if product.is_low_stock(threshold))


def top_selling_products(
    sold_quantities: Iterable[Tuple[int, int]],
    names: Mapping[int, str],
    limit: int = 3,
) -> List[ProductSales]:
    """
    Rank products by quantity sold.

    Args:
        sold_quantities: (product_id, quantity) pairs, one per line item
        names: product_id -> display name
        limit: how many products to return

    Ties keep the order in which products were first seen.
    """

    totals: Dict[int, int] = {}
    for product_id, quantity in sold_quantities:
        totals[product_id] = totals.get(product_id, 0) + quantity

    ranked = sorted(totals.items(), key=lambda pair: pair[1], reverse=True)
    return [
        ProductSales(product_id=product_id, name=names.get(product_id, ""), quantity_sold=quantity)
        for product_id, quantity in ranked[:limit]
    ]
