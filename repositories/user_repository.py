"""
User repository (persistence).

Table:
- usuarios: id, username, email, role, status, last_login, created_at
"""

from __future__ import annotations

from typing import Any, List, Mapping

from supabase import Client  # type: ignore[import-not-found]

from domain.user import User
from repositories.row_parsing import parse_flag, parse_optional_utc_datetime
from services.ports import UserReader

_USERS_TABLE: str = "usuarios"


def _row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        user_id=int(row["id"]),
        username=str(row.get("username") or ""),
        role=str(row.get("role") or ""),
        status=parse_flag(row.get("status")),
        email=row.get("email"),
        last_login=parse_optional_utc_datetime(row.get("last_login")),
        created_at=parse_optional_utc_datetime(row.get("created_at")),
    )


class SupabaseUserRepository(UserReader):

    def __init__(self, client: Client) -> None:
        self._client = client

    def fetch_recent_users(self, limit: int) -> List[User]:
        """Most recently logged-in users first."""

        response = (
            self._client.table(_USERS_TABLE)
            .select("*")
            .order("last_login", desc=True)
            .limit(limit)
            .execute()
        )
        error = getattr(response, "error", None)
        if error:
            raise RuntimeError(f"Failed to list users: {error}")

        rows = getattr(response, "data", None) or []
        return [_row_to_user(row) for row in rows]


__all__ = ["SupabaseUserRepository"]
