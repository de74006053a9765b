# tests/conftest.py
from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from loguru import logger

from dtrange.core.clock import FixedClock
from dtrange.core.timezones import TimezoneRegistry
from dtrange.picker import RangePicker

UTC = ZoneInfo("UTC")


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for key in ("DTRANGE_LOCAL_TIMEZONE", "DTRANGE_DEFAULT_TIMEZONE", "DTRANGE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def now_utc() -> datetime:
    # 2026-06-15 14:00 UTC, a Monday
    return datetime(2026, 6, 15, 14, 0, tzinfo=UTC)


@pytest.fixture
def make_picker():
    """
    Factory fixture for RangePicker with a frozen clock.

    Usage:
        picker = make_picker(now)
        picker = make_picker(now, local_tz=NY, initial_timezone="Asia/Kolkata")
    """

    def _make(now: datetime, local_tz=UTC, **kwargs) -> RangePicker:
        return RangePicker(
            registry=kwargs.pop("registry", TimezoneRegistry()),
            clock=FixedClock(now),
            local_tz=local_tz,
            **kwargs,
        )

    return _make
