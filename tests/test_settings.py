"""
Tests for `services/settings.py`.
"""

from __future__ import annotations

import pytest

from services.settings import DEFAULT_RECENT_LIMIT, DEFAULT_TIMEZONE, load_settings


def test_defaults() -> None:
    settings = load_settings({})

    assert settings.reporting_timezone.key == DEFAULT_TIMEZONE
    assert settings.low_stock_threshold == 10
    assert settings.recent_limit == DEFAULT_RECENT_LIMIT


def test_values_from_environment() -> None:
    settings = load_settings(
        {
            "REPORTING_TIMEZONE": "Europe/Lisbon",
            "LOW_STOCK_THRESHOLD": "25",
            "RECENT_LIMIT": "8",
        }
    )

    assert settings.reporting_timezone.key == "Europe/Lisbon"
    assert settings.low_stock_threshold == 25
    assert settings.recent_limit == 8


@pytest.mark.parametrize(
    "environ",
    [
        {"REPORTING_TIMEZONE": "Mars/Olympus_Mons"},
        {"LOW_STOCK_THRESHOLD": "ten"},
        {"LOW_STOCK_THRESHOLD": "0"},
        {"RECENT_LIMIT": "-3"},
    ],
)
def test_invalid_values_raise(environ) -> None:
    with pytest.raises(ValueError):
        load_settings(environ)
