"""
Product repository (persistence).

Read access to the product catalogue and to sold quantities used for the
best-seller ranking.

Tables:
- produtos: id, nome, descricao, preco, quantidade, fabricante, categoria, status, created_at
- itens_venda: produto_id, produto_nome, quantidade
"""

from __future__ import annotations

from typing import Any, List, Mapping, Tuple

from supabase import Client  # type: ignore[import-not-found]

from domain.product import Product
from repositories.row_parsing import parse_amount, parse_flag, parse_optional_utc_datetime
from services.ports import ProductReader

_PRODUCTS_TABLE: str = "produtos"
_LINE_ITEMS_TABLE: str = "itens_venda"

# PostgREST caps responses; page through larger result sets.
_PAGE_SIZE: int = 1000


def _row_to_product(row: Mapping[str, Any]) -> Product:
    """Convert a Supabase row into a Product."""

    product_id = row["id"]
    return Product(
        product_id=int(product_id),
        name=str(row.get("nome") or ""),
        price=parse_amount(row.get("preco"), field_name="preco", row_id=product_id),
        quantity=int(row.get("quantidade") or 0),
        status=parse_flag(row.get("status")),
        category=row.get("categoria"),
        manufacturer=row.get("fabricante"),
        description=row.get("descricao"),
        created_at=parse_optional_utc_datetime(row.get("created_at")),
    )


class SupabaseProductRepository(ProductReader):

    def __init__(self, client: Client) -> None:
        self._client = client

    def fetch_recent_products(self, limit: int) -> List[Product]:
        """Newest products first."""

        response = (
            self._client.table(_PRODUCTS_TABLE)
            .select("*")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        error = getattr(response, "error", None)
        if error:
            raise RuntimeError(f"Failed to list products: {error}")

        rows = getattr(response, "data", None) or []
        return [_row_to_product(row) for row in rows]

    def count_low_stock(self, threshold: int) -> int:
        """Count active products with quantidade < threshold (server-side count)."""

        response = (
            self._client.table(_PRODUCTS_TABLE)
            .select("id", count="exact")
            .lt("quantidade", threshold)
            .eq("status", True)
            .execute()
        )
        error = getattr(response, "error", None)
        if error:
            raise RuntimeError(f"Failed to count low-stock products: {error}")

        return getattr(response, "count", 0) or 0

    def fetch_sold_quantities(self) -> List[Tuple[int, str, int]]:
        """
        Fetch (product_id, product_name, quantity) for every sold line item.

        Line items without a product reference are skipped.
        """

        sold: List[Tuple[int, str, int]] = []
        offset = 0

        while True:
            response = (
                self._client.table(_LINE_ITEMS_TABLE)
                .select("produto_id, produto_nome, quantidade")
                .range(offset, offset + _PAGE_SIZE - 1)
                .execute()
            )
            error = getattr(response, "error", None)
            if error:
                raise RuntimeError(f"Failed to list sold quantities: {error}")

            page_rows = getattr(response, "data", None) or []
            for row in page_rows:
                if row.get("produto_id") is None:
                    continue
                sold.append((int(row["produto_id"]), str(row.get("produto_nome") or ""), int(row.get("quantidade") or 0)))

            if len(page_rows) < _PAGE_SIZE:
                break
            offset += len(page_rows)

        return sold


__all__ = ["SupabaseProductRepository"]
