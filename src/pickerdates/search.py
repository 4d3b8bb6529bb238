from __future__ import annotations

import logging
from typing import Callable

from .adapters.base import DateAdapter, TDate

LOGGER = logging.getLogger(__name__)


def find_closest_enabled_date(
    adapter: DateAdapter[TDate],
    *,
    date: TDate,
    min_date: TDate,
    max_date: TDate,
    is_date_disabled: Callable[[TDate], bool],
    disable_past: bool = False,
    disable_future: bool = False,
) -> TDate | None:
    """Return the enabled date nearest to ``date`` within the effective range.

    Two cursors walk outward from ``date`` one calendar day at a time. The
    forward cursor is checked first on every round, so at equal distance the
    later date wins. Returns None when every date in range is disabled.
    """
    today = adapter.start_of_day(adapter.date())

    if disable_past and adapter.is_before(min_date, today):
        min_date = today

    if disable_future and adapter.is_after(max_date, today):
        max_date = today

    forward: TDate | None = date
    backward: TDate | None = date
    if adapter.is_before(date, min_date):
        forward = min_date
        backward = None

    if adapter.is_after(date, max_date):
        if backward is not None:
            backward = max_date
        forward = None

    while forward is not None or backward is not None:
        # An invalid cursor never moves, so it is dropped like an out-of-range one.
        if forward is not None and (not adapter.is_valid(forward) or adapter.is_after(forward, max_date)):
            forward = None
        if backward is not None and (not adapter.is_valid(backward) or adapter.is_before(backward, min_date)):
            backward = None

        if forward is not None:
            if not is_date_disabled(forward):
                return forward
            forward = adapter.add_days(forward, 1)

        if backward is not None:
            if not is_date_disabled(backward):
                return backward
            backward = adapter.add_days(backward, -1)

    LOGGER.debug("No enabled date between %s and %s", min_date, max_date)
    return None
