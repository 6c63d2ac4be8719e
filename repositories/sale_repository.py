"""
Sale repository (persistence).

This module provides *only* persistence operations for sales and their line
items. It does not enforce business rules (status validation happens in
domain.sale_status before anything reaches this layer).

Tables:
- vendas: id, cliente_id, data_venda, valor_total, status
- itens_venda: id, venda_id, produto_id, produto_nome, quantidade, preco_unitario
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from supabase import Client  # type: ignore[import-not-found]

from domain.sale import LineItem, SaleRecord
from domain.sale_status import INITIAL_STATUS, SaleStatus
from domain.time import PeriodBounds
from repositories.row_parsing import parse_amount, parse_utc_datetime, to_iso_utc
from services.ports import SaleQueryFilters, SaleReader, SaleWriter

logger = logging.getLogger(__name__)

# Supabase table names. Keep these aligned with the database schema.
_SALES_TABLE: str = "vendas"
_LINE_ITEMS_TABLE: str = "itens_venda"

# PostgREST caps responses; page through larger result sets.
_PAGE_SIZE: int = 1000

_SALE_COLUMNS: str = (
    "id, cliente_id, data_venda, valor_total, status, "
    "itens_venda(produto_id, produto_nome, quantidade, preco_unitario)"
)


def _row_to_line_item(row: Mapping[str, Any], sale_id: Any) -> Optional[LineItem]:
    """Convert an itens_venda row, or None if the row cannot form a valid line item."""

    try:
        quantity = int(row.get("quantidade") or 0)
    except (TypeError, ValueError):
        quantity = 0
    if quantity < 1:
        logger.warning("Skipping line item with quantity %r on sale %s", row.get("quantidade"), sale_id)
        return None

    product_id = row.get("produto_id")
    return LineItem(
        product_id=int(product_id) if product_id is not None else None,
        quantity=quantity,
        unit_price=parse_amount(row.get("preco_unitario"), field_name="preco_unitario", row_id=sale_id),
        product_name=row.get("produto_nome"),
    )


def _row_to_sale(row: Mapping[str, Any]) -> Optional[SaleRecord]:
    """
    Convert a Supabase row (optionally with embedded itens_venda) into a SaleRecord.

    Returns None, with a warning, when the row has no usable data_venda.
    """

    sale_id = row["id"]
    try:
        sold_at = parse_utc_datetime(row.get("data_venda"))
    except (TypeError, ValueError):
        logger.warning("Skipping sale %s with unusable data_venda %r", sale_id, row.get("data_venda"))
        return None

    item_rows = row.get("itens_venda") or []
    items = tuple(
        item for item in (_row_to_line_item(item_row, sale_id) for item_row in item_rows)
        if item is not None
    )
    client_id = row.get("cliente_id")

    return SaleRecord(
        sale_id=int(sale_id),
        sold_at=sold_at,
        total_amount=parse_amount(row.get("valor_total"), field_name="valor_total", row_id=sale_id),
        status=str(row.get("status") or INITIAL_STATUS.value),
        client_id=int(client_id) if client_id is not None else None,
        items=items,
    )


def _rows_to_sales(rows: List[Mapping[str, Any]]) -> List[SaleRecord]:
    return [sale for sale in (_row_to_sale(row) for row in rows) if sale is not None]


def _rows(response: Any, action: str) -> List[Mapping[str, Any]]:
    error = getattr(response, "error", None)
    if error:
        raise RuntimeError(f"Failed to {action}: {error}")
    return getattr(response, "data", None) or []


class SupabaseSaleRepository(SaleReader, SaleWriter):
    """Sales stored in Supabase."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def fetch_recent_sales(self, limit: int, filters: Optional[SaleQueryFilters] = None) -> List[SaleRecord]:
        """
        Retrieve the most recent sales, newest first.

        Args:
            limit: maximum number of sales
            filters: optional status / client / period filters

        Returns:
            List[SaleRecord] (possibly empty)
        """

        query = self._client.table(_SALES_TABLE).select(_SALE_COLUMNS)

        if filters is not None:
            if filters.statuses:
                query = query.in_("status", [s.value for s in filters.statuses])
            if filters.client_id is not None:
                query = query.eq("cliente_id", filters.client_id)
            if filters.period is not None:
                query = (
                    query.gte("data_venda", to_iso_utc(filters.period.start, name="period.start"))
                    .lte("data_venda", to_iso_utc(filters.period.end, name="period.end"))
                )

        response = query.order("data_venda", desc=True).limit(limit).execute()
        return _rows_to_sales(_rows(response, "list sales"))

    def fetch_sales_between(self, bounds: PeriodBounds) -> List[SaleRecord]:
        """
        Retrieve every sale with data_venda inside `bounds` (both ends inclusive).

        Pages until an empty page comes back, so the period is returned in full
        whatever row cap the server applies to a single response.
        """

        start = to_iso_utc(bounds.start, name="bounds.start")
        end = to_iso_utc(bounds.end, name="bounds.end")

        all_rows: List[Mapping[str, Any]] = []
        offset = 0

        while True:
            response = (
                self._client.table(_SALES_TABLE)
                .select(_SALE_COLUMNS)
                .gte("data_venda", start)
                .lte("data_venda", end)
                .order("data_venda", desc=True)
                .order("id", desc=True)
                .range(offset, offset + _PAGE_SIZE - 1)
                .execute()
            )
            page_rows = _rows(response, "list sales for period")
            if not page_rows:
                break

            all_rows.extend(page_rows)
            offset += len(page_rows)

        return _rows_to_sales(all_rows)

    def persist_status(self, sale_id: int, status: SaleStatus) -> None:
        response = (
            self._client.table(_SALES_TABLE)
            .update({"status": status.value})
            .eq("id", sale_id)
            .execute()
        )
        _rows(response, "update sale status")

    def delete_line_items(self, sale_id: int) -> None:
        response = self._client.table(_LINE_ITEMS_TABLE).delete().eq("venda_id", sale_id).execute()
        _rows(response, "delete sale line items")

    def delete_sale(self, sale_id: int) -> None:
        response = self._client.table(_SALES_TABLE).delete().eq("id", sale_id).execute()
        _rows(response, "delete sale")


__all__ = ["SupabaseSaleRepository"]
