from __future__ import annotations

import logging
from typing import Any, Callable

from .adapters.base import DateAdapter, TDate
from .adapters.python_datetime import DatetimeAdapter
from .domain.models import FieldValueType
from .normalize import clamp, get_today_date
from .search import find_closest_enabled_date
from .settings import AppSettings

LOGGER = logging.getLogger(__name__)


def _never_disabled(_value: object) -> bool:
    return False


def resolve_reference_date(
    adapter: DateAdapter[TDate],
    value: TDate | None,
    *,
    min_date: TDate,
    max_date: TDate,
    disable_past: bool = False,
    disable_future: bool = False,
    is_date_disabled: Callable[[TDate], bool] | None = None,
    value_type: FieldValueType = "date",
) -> TDate:
    """Pick the date a picker should open on.

    A valid ``value`` wins. Otherwise the enabled date closest to today is
    used, falling back to today clamped into range when nothing is enabled.
    """
    if value is not None and adapter.is_valid(value):
        return value

    today = get_today_date(adapter, value_type)
    closest = find_closest_enabled_date(
        adapter,
        date=today,
        min_date=min_date,
        max_date=max_date,
        is_date_disabled=is_date_disabled or _never_disabled,
        disable_past=disable_past,
        disable_future=disable_future,
    )
    if closest is None:
        LOGGER.warning("No enabled date between %s and %s, clamping today instead", min_date, max_date)
        return clamp(adapter, today, min_date, max_date)

    LOGGER.debug("Resolved reference date %s from today %s", closest, today)
    return closest


def resolve_reference_date_for_settings(
    settings: AppSettings,
    value: Any = None,
    *,
    is_date_disabled: Callable[[Any], bool] | None = None,
    adapter: DateAdapter[Any] | None = None,
) -> Any:
    if adapter is None:
        adapter = DatetimeAdapter(timezone_name=settings.env.picker_timezone)
    return resolve_reference_date(
        adapter,
        value,
        min_date=adapter.date(settings.min_date),
        max_date=adapter.date(settings.max_date),
        disable_past=settings.yaml.policy.disable_past,
        disable_future=settings.yaml.policy.disable_future,
        is_date_disabled=is_date_disabled,
        value_type=settings.yaml.value_type,
    )
