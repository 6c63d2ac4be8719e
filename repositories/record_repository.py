"""
Generic row mutations for the dashboard tables.

Backs the dashboard's per-row actions (delete, activate/deactivate). Only the
tables in services.ports.DELETABLE_TABLES / TOGGLEABLE_TABLES can be targeted.
"""

from __future__ import annotations

from supabase import Client  # type: ignore[import-not-found]

from services.ports import DELETABLE_TABLES, TOGGLEABLE_TABLES, RecordWriter


class SupabaseRecordRepository(RecordWriter):

    def __init__(self, client: Client) -> None:
        self._client = client

    def delete_row(self, table: str, row_id: int) -> None:
        if table not in DELETABLE_TABLES:
            raise ValueError(f"Table {table!r} does not allow row deletion")

        response = self._client.table(table).delete().eq("id", row_id).execute()
        error = getattr(response, "error", None)
        if error:
            raise RuntimeError(f"Failed to delete {table} row {row_id}: {error}")

    def set_active(self, table: str, row_id: int, active: bool) -> None:
        if table not in TOGGLEABLE_TABLES:
            raise ValueError(f"Table {table!r} has no status flag")

        response = self._client.table(table).update({"status": active}).eq("id", row_id).execute()
        error = getattr(response, "error", None)
        if error:
            raise RuntimeError(f"Failed to update {table} row {row_id} status: {error}")


__all__ = ["SupabaseRecordRepository"]
