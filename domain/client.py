"""
Domain: Client (customer) records.

Clients are the customers a sale is made to. `nuit` is the tax identification
number printed on invoices; it is optional because walk-in customers are
often recorded by name only.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .time import require_utc_timestamp


@dataclass(frozen=True, slots=True)
class Client:
    """Customer of the shop."""

    client_id: int
    name: str

    # Optional contact details
    nuit: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Validate timestamps are UTC-aware."""
        if self.created_at is not None:
            require_utc_timestamp("created_at", self.created_at)
