"""
Dashboard service.

Assembles everything the dashboard page shows in one call:
- today's / this month's sales figures and the status buckets
- the low-stock product count and the best sellers
- the most recent products, sales, users and clients

Either a complete DashboardSnapshot is returned or the collaborator's error
propagates; no partially filled snapshot is ever produced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional

from domain.client import Client
from domain.product import Product, ProductSales, top_selling_products
from domain.sale import SaleRecord
from domain.sales_stats import PeriodStats, compute_stats, compute_status_counts, fill_known_statuses
from domain.time import month_bounds
from domain.user import User
from services.ports import ClientReader, ProductReader, SaleReader, UserReader
from services.settings import DashboardSettings

logger = logging.getLogger(__name__)

TOP_SELLERS_LIMIT = 3


@dataclass(frozen=True, slots=True)
class DashboardSnapshot:
    generated_at: datetime
    stats: PeriodStats
    status_counts: Dict[str, int]
    low_stock_count: int
    top_sellers: List[ProductSales]
    recent_products: List[Product]
    recent_sales: List[SaleRecord]
    recent_users: List[User]
    recent_clients: List[Client]


def build_sales_overview(
    sales: SaleReader,
    settings: DashboardSettings,
    now: Optional[datetime] = None,
) -> tuple[PeriodStats, Dict[str, int]]:
    """
    Compute the month-scoped sales figures and status buckets.

    Only this month's sales are loaded, so total_count (and the average ticket
    derived from it) covers the current month.
    """

    now = now or datetime.now(timezone.utc)
    month = month_bounds(now, settings.reporting_timezone)
    records = sales.fetch_sales_between(month)

    stats = compute_stats(records, now, settings.reporting_timezone)
    status_counts = fill_known_statuses(compute_status_counts(records))
    return stats, status_counts


def build_dashboard(
    sales: SaleReader,
    products: ProductReader,
    users: UserReader,
    clients: ClientReader,
    settings: DashboardSettings,
    now: Optional[datetime] = None,
) -> DashboardSnapshot:
    """
    Load and compute the full dashboard.

    Args:
        sales, products, users, clients: data-access collaborators
        settings: reporting timezone, low-stock threshold, list sizes
        now: reference instant (UTC); defaults to the current time

    Raises:
        RuntimeError: propagated from any collaborator
    """

    now = now or datetime.now(timezone.utc)
    limit = settings.recent_limit

    stats, status_counts = build_sales_overview(sales, settings, now)

    low_stock_count = products.count_low_stock(settings.low_stock_threshold)

    sold = products.fetch_sold_quantities()
    names = {product_id: name for product_id, name, _ in sold}
    top_sellers = top_selling_products(
        ((product_id, quantity) for product_id, _, quantity in sold),
        names,
        limit=TOP_SELLERS_LIMIT,
    )

    snapshot = DashboardSnapshot(
        generated_at=now,
        stats=stats,
        status_counts=status_counts,
        low_stock_count=low_stock_count,
        top_sellers=top_sellers,
        recent_products=products.fetch_recent_products(limit),
        recent_sales=sales.fetch_recent_sales(limit),
        recent_users=users.fetch_recent_users(limit),
        recent_clients=clients.fetch_recent_clients(limit),
    )

    logger.debug(
        "Dashboard built: %d sales this month, %d today, %d low-stock products",
        stats.total_count,
        stats.today_count,
        low_stock_count,
    )
    return snapshot


__all__ = ["DashboardSnapshot", "build_sales_overview", "build_dashboard"]
