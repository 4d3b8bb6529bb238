"""Date helpers for date pickers, parameterized over a calendar adapter."""

from .adapters import DateAdapter, DateAdapterError, DatetimeAdapter
from .domain.models import FieldValueType, InvalidDate, is_date_picker_view
from .normalize import (
    apply_default_date,
    are_dates_equal,
    clamp,
    get_months_in_year,
    get_today_date,
    merge_date_and_time,
    replace_invalid_date_by_null,
)
from .reference import resolve_reference_date, resolve_reference_date_for_settings
from .search import find_closest_enabled_date

__all__ = [
    "DateAdapter",
    "DateAdapterError",
    "DatetimeAdapter",
    "FieldValueType",
    "InvalidDate",
    "apply_default_date",
    "are_dates_equal",
    "clamp",
    "find_closest_enabled_date",
    "get_months_in_year",
    "get_today_date",
    "is_date_picker_view",
    "merge_date_and_time",
    "replace_invalid_date_by_null",
    "resolve_reference_date",
    "resolve_reference_date_for_settings",
]
