from __future__ import annotations

from .adapters.base import DateAdapter, TDate
from .domain.models import FieldValueType


def clamp(adapter: DateAdapter[TDate], value: TDate, min_date: TDate, max_date: TDate) -> TDate:
    """Return ``value`` pinned into ``[min_date, max_date]``; in-range values come back as-is."""
    if adapter.is_before(value, min_date):
        return min_date
    if adapter.is_after(value, max_date):
        return max_date
    return value


def replace_invalid_date_by_null(adapter: DateAdapter[TDate], value: TDate | None) -> TDate | None:
    if value is None or not adapter.is_valid(value):
        return None
    return value


def apply_default_date(adapter: DateAdapter[TDate], value: TDate | None, default_value: TDate) -> TDate:
    if value is None or not adapter.is_valid(value):
        return default_value
    return value


def are_dates_equal(adapter: DateAdapter[TDate], a: TDate | None, b: TDate | None) -> bool:
    """Compare two dates, treating two present-but-invalid values as equal.

    A single invalid value is left to the adapter, which reports it unequal
    to anything.
    """
    if a is not None and b is not None and not adapter.is_valid(a) and not adapter.is_valid(b):
        return True
    return adapter.is_equal(a, b)


def get_months_in_year(adapter: DateAdapter[TDate], year: TDate) -> list[TDate]:
    first_month = adapter.start_of_year(year)
    months = [first_month]
    while len(months) < 12:
        months.append(adapter.add_months(months[-1], 1))
    return months


def merge_date_and_time(adapter: DateAdapter[TDate], date_part: TDate, time_part: TDate) -> TDate:
    # Order matters when a setter overflows into the next field.
    merged = date_part
    merged = adapter.set_hours(merged, adapter.get_hours(time_part))
    merged = adapter.set_minutes(merged, adapter.get_minutes(time_part))
    merged = adapter.set_seconds(merged, adapter.get_seconds(time_part))
    return merged


def get_today_date(adapter: DateAdapter[TDate], value_type: FieldValueType) -> TDate:
    now = adapter.date()
    if value_type == "date":
        return adapter.start_of_day(now)
    return now
