"""
Helpers for turning Supabase row values into domain values.

Supabase returns timestamps as ISO-8601 strings (sometimes with a trailing
'Z', sometimes without any offset) and numerics as JSON numbers or strings.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")


def to_iso_utc(dt: datetime, *, name: str) -> str:
    """Serialize an aware datetime to ISO-8601 in UTC."""

    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware")
    return dt.astimezone(timezone.utc).isoformat()


def parse_utc_datetime(value: Any) -> datetime:
    """
    Parse a Supabase timestamp into a timezone-aware UTC datetime.

    Values without an offset are taken to be UTC.
    """

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    else:
        raise TypeError(f"Unsupported timestamp type: {type(value)!r}")

    if dt.tzinfo is None or dt.utcoffset() is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_optional_utc_datetime(value: Any) -> Optional[datetime]:
    return parse_utc_datetime(value) if value else None


def parse_amount(value: Any, *, field_name: str, row_id: Any = None) -> Decimal:
    """
    Parse a non-negative money amount.

    Missing values count as zero. Malformed or negative values also count as
    zero and are logged so the bad row can be found.
    """

    if value is None or value == "":
        return _ZERO

    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        logger.warning("Unparseable %s %r on row %s; counting it as 0", field_name, value, row_id)
        return _ZERO

    if not amount.is_finite() or amount < 0:
        logger.warning("Invalid %s %r on row %s; counting it as 0", field_name, value, row_id)
        return _ZERO

    return amount


def parse_flag(value: Any) -> bool:
    """Interpret a boolean column; PostgREST sends JSON booleans but older rows may hold strings."""

    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


__all__ = [
    "to_iso_utc",
    "parse_utc_datetime",
    "parse_optional_utc_datetime",
    "parse_amount",
    "parse_flag",
]
