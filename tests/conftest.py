"""
Root Pytest Fixtures.

Shared fixtures available to all test types.
"""

import pytest

from ntc_booking.core.config import get_app_config, get_settings


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Drop environment overrides and cached config so every test starts fresh."""
    monkeypatch.delenv("NTC_BOOKING_API_BASE_URL", raising=False)
    monkeypatch.delenv("NTC_BOOKING_HOME", raising=False)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()
