from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..domain.models import InvalidDate
from .base import DateAdapterError

DateValue = datetime | InvalidDate


def _add_months(value: datetime, amount: int) -> datetime:
    month_index = value.month - 1 + amount
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return value.replace(year=year, month=month, day=min(value.day, last_day))


class DatetimeAdapter:
    """Adapter over timezone-aware ``datetime`` values.

    Naive datetimes are read as wall-clock time in the adapter's timezone.
    Anything that cannot be turned into a datetime becomes an ``InvalidDate``,
    which compares as neither before, after nor equal to anything.
    """

    def __init__(
        self,
        timezone_name: str = "UTC",
        *,
        now_factory: Callable[[], datetime] | None = None,
    ) -> None:
        try:
            self._timezone = ZoneInfo(timezone_name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise DateAdapterError(f"Unknown timezone for date adapter: {timezone_name}") from exc
        self._now_factory = now_factory

    @property
    def timezone(self) -> ZoneInfo:
        return self._timezone

    def _localize(self, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=self._timezone)
        return value

    def _now(self) -> datetime:
        if self._now_factory is None:
            return datetime.now(self._timezone)
        return self._localize(self._now_factory())

    def date(self, value: Any = None) -> DateValue:
        if value is None:
            return self._now()
        if isinstance(value, InvalidDate):
            return value
        if isinstance(value, datetime):
            return self._localize(value)
        if isinstance(value, date):
            return datetime.combine(value, time.min, tzinfo=self._timezone)
        if isinstance(value, str):
            text = value.strip()
            try:
                parsed = datetime.fromisoformat(text)
            except ValueError:
                return InvalidDate(raw=text)
            return self._localize(parsed)
        return InvalidDate(raw=repr(value))

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, datetime)

    def _instant(self, value: datetime) -> datetime:
        # Same-zone comparisons ignore fold, so compare in UTC.
        return self._localize(value).astimezone(timezone.utc)

    def is_equal(self, value: DateValue | None, comparing: DateValue | None) -> bool:
        if value is None and comparing is None:
            return True
        if not self.is_valid(value) or not self.is_valid(comparing):
            return False
        return self._instant(value) == self._instant(comparing)

    def is_before(self, value: DateValue, comparing: DateValue) -> bool:
        if not self.is_valid(value) or not self.is_valid(comparing):
            return False
        return self._instant(value) < self._instant(comparing)

    def is_after(self, value: DateValue, comparing: DateValue) -> bool:
        if not self.is_valid(value) or not self.is_valid(comparing):
            return False
        return self._instant(value) > self._instant(comparing)

    def add_days(self, value: DateValue, amount: int) -> DateValue:
        if not self.is_valid(value):
            return value
        return value + timedelta(days=amount)

    def add_months(self, value: DateValue, amount: int) -> DateValue:
        if not self.is_valid(value):
            return value
        return _add_months(value, amount)

    def start_of_day(self, value: DateValue) -> DateValue:
        if not self.is_valid(value):
            return value
        return value.replace(hour=0, minute=0, second=0, microsecond=0)

    def start_of_year(self, value: DateValue) -> DateValue:
        if not self.is_valid(value):
            return value
        return value.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)

    # Getters return None for an invalid value; setters turn a None field into an invalid result.
    def get_hours(self, value: DateValue) -> int | None:
        return value.hour if self.is_valid(value) else None

    def get_minutes(self, value: DateValue) -> int | None:
        return value.minute if self.is_valid(value) else None

    def get_seconds(self, value: DateValue) -> int | None:
        return value.second if self.is_valid(value) else None

    # Setters overflow into the neighbouring fields, e.g. set_hours(d, 25) is 01:00 the next day.
    def set_hours(self, value: DateValue, hours: int | None) -> DateValue:
        if not self.is_valid(value):
            return value
        if hours is None:
            return InvalidDate(raw=value.isoformat())
        return value.replace(hour=0) + timedelta(hours=hours)

    def set_minutes(self, value: DateValue, minutes: int | None) -> DateValue:
        if not self.is_valid(value):
            return value
        if minutes is None:
            return InvalidDate(raw=value.isoformat())
        return value.replace(minute=0) + timedelta(minutes=minutes)

    def set_seconds(self, value: DateValue, seconds: int | None) -> DateValue:
        if not self.is_valid(value):
            return value
        if seconds is None:
            return InvalidDate(raw=value.isoformat())
        return value.replace(second=0) + timedelta(seconds=seconds)
