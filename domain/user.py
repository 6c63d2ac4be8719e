"""
Domain: Back-office user accounts.

Users are listed on the dashboard and can be activated or deactivated; the
role string is stored as-is (e.g. admin, vendedor).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .time import require_utc_timestamp


@dataclass(frozen=True, slots=True)
class User:

    user_id: int
    username: str
    role: str
    status: bool = True
    email: Optional[str] = None
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.last_login is not None:
            require_utc_timestamp("last_login", self.last_login)
        if self.created_at is not None:
            require_utc_timestamp("created_at", self.created_at)

    def is_active(self) -> bool:
        return self.status
