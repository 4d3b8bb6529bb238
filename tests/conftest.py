from __future__ import annotations

from datetime import datetime, timezone

import pytest

from pickerdates.adapters import DatetimeAdapter

FROZEN_NOW = datetime(2024, 6, 1, 15, 30, 45, tzinfo=timezone.utc)


@pytest.fixture
def adapter() -> DatetimeAdapter:
    return DatetimeAdapter("UTC", now_factory=lambda: FROZEN_NOW)


@pytest.fixture
def day(adapter: DatetimeAdapter):
    def _day(iso_date: str) -> datetime:
        return adapter.date(iso_date)

    return _day
