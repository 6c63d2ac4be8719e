"""
Dashboard settings.

Values are read from the environment, after loading the `.env` file at the
project root (same file the Supabase client reads its credentials from).

Environment variables (all optional):
- REPORTING_TIMEZONE: IANA zone used to decide "today" and "this month"
  (default: Africa/Maputo)
- LOW_STOCK_THRESHOLD: quantity below which an active product counts as low stock (default: 10)
- RECENT_LIMIT: how many rows each "recent" list shows (default: 5)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from domain.product import DEFAULT_LOW_STOCK_THRESHOLD

DEFAULT_TIMEZONE = "Africa/Maputo"
DEFAULT_RECENT_LIMIT = 5

env_path = Path(__file__).parent.parent / ".env"


@dataclass(frozen=True, slots=True)
class DashboardSettings:
    reporting_timezone: ZoneInfo
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    recent_limit: int = DEFAULT_RECENT_LIMIT


def _positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> DashboardSettings:
    """
    Build DashboardSettings from `environ` (defaults to os.environ after loading .env).

    Raises:
        ValueError: a variable is set to an unusable value
    """

    if environ is None:
        load_dotenv(dotenv_path=env_path)
        environ = os.environ

    zone_name = environ.get("REPORTING_TIMEZONE") or DEFAULT_TIMEZONE
    try:
        zone = ZoneInfo(zone_name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"REPORTING_TIMEZONE is not a known timezone: {zone_name!r}") from None

    return DashboardSettings(
        reporting_timezone=zone,
        low_stock_threshold=_positive_int(environ, "LOW_STOCK_THRESHOLD", DEFAULT_LOW_STOCK_THRESHOLD),
        recent_limit=_positive_int(environ, "RECENT_LIMIT", DEFAULT_RECENT_LIMIT),
    )


__all__ = ["DashboardSettings", "load_settings"]
