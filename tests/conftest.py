"""
Root Pytest Fixtures.

Shared fixtures available to all test types.
"""

from typing import Any

import pytest

from rpadmin.core.config import get_app_config, get_settings


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


@pytest.fixture
def rp_payloads() -> list[dict[str, Any]]:
    """RP list as returned by GET /rps."""
    return [
        {"title": "Moonlit Tavern", "rpid": "rp-moon", "timestamp": "2024-01-07T18:30:00Z"},
        {"title": "Alpha Quest", "rpid": "rp-alpha", "timestamp": "2023-11-21T09:00:00.000Z"},
    ]


@pytest.fixture
def url_payloads() -> dict[str, list[dict[str, str]]]:
    """URL lists as returned by GET /rps/{rpid}."""
    return {
        "rp-moon": [
            {"url": "moon-write", "access": "normal"},
            {"url": "moon-read", "access": "read"},
        ],
        "rp-alpha": [
            {"url": "alpha-write", "access": "normal"},
        ],
    }
