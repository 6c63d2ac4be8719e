"""
Sales report - today's and this month's figures plus status buckets.

Usage:
    python scripts/sales_report.py
    python scripts/sales_report.py --recent 10
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from repositories.client import get_supabase_client
from repositories.product_repository import SupabaseProductRepository
from repositories.sale_repository import SupabaseSaleRepository
from services.dashboard_service import build_sales_overview
from services.settings import load_settings


def print_sales_report(recent: int) -> None:
    """Print the dashboard sales figures for the configured database."""

    settings = load_settings()
    client = get_supabase_client()
    sales = SupabaseSaleRepository(client)
    products = SupabaseProductRepository(client)

    stats, status_counts = build_sales_overview(sales, settings)
    low_stock = products.count_low_stock(settings.low_stock_threshold)

    print("=" * 50)
    print(f"SALES REPORT ({settings.reporting_timezone.key})")
    print("=" * 50)
    print(f"Sales this month:          {stats.total_count}")
    print(f"Sales today:               {stats.today_count}")
    print(f"Revenue today:             {stats.today_revenue:.2f}")
    print(f"Revenue this month:        {stats.month_revenue:.2f}")
    print(f"Average ticket:            {stats.average_ticket:.2f}")
    print(f"Low-stock products (<{settings.low_stock_threshold}): {low_stock}")
    print("=" * 50)

    print("\nSales by status (this month):")
    print("-" * 50)
    for status, count in sorted(status_counts.items()):
        print(f"  {status:<12} {count:>6}")

    print(f"\nLast {recent} sales:")
    print("-" * 50)
    for sale in sales.fetch_recent_sales(recent):
        local_time = sale.sold_at.astimezone(settings.reporting_timezone)
        print(f"  #{sale.sale_id:<6} {local_time:%Y-%m-%d %H:%M}  {sale.total_amount:>10.2f}  {sale.status}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Print dashboard sales figures")
    parser.add_argument("--recent", type=int, default=5, help="How many recent sales to list")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        print_sales_report(args.recent)
    except (RuntimeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
