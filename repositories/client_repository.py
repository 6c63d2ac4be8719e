"""
Client repository for customer records.

Table:
- clientes: id, nome, nuit, telefone, endereco, created_at
"""

from __future__ import annotations

from typing import Any, List, Mapping

from supabase import Client as SupabaseClient  # type: ignore[import-not-found]

from domain.client import Client
from repositories.row_parsing import parse_optional_utc_datetime
from services.ports import ClientReader

_CLIENTS_TABLE: str = "clientes"


def _row_to_client(row: Mapping[str, Any]) -> Client:
    """Convert a Supabase row into a Client domain object."""

    return Client(
        client_id=int(row["id"]),
        name=str(row.get("nome") or ""),
        nuit=row.get("nuit"),
        phone=row.get("telefone"),
        address=row.get("endereco"),
        created_at=parse_optional_utc_datetime(row.get("created_at")),
    )


class SupabaseClientRepository(ClientReader):

    def __init__(self, client: SupabaseClient) -> None:
        self._client = client

    def fetch_recent_clients(self, limit: int) -> List[Client]:
        """Newest clients first."""

        response = (
            self._client.table(_CLIENTS_TABLE)
            .select("*")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        error = getattr(response, "error", None)
        if error:
            raise RuntimeError(f"Failed to list clients: {error}")

        rows = getattr(response, "data", None) or []
        return [_row_to_client(row) for row in rows]


__all__ = ["SupabaseClientRepository"]
