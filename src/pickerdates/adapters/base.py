from __future__ import annotations

from typing import Any, Protocol, TypeVar

TDate = TypeVar("TDate")


class DateAdapterError(RuntimeError):
    """Raised when a date adapter cannot be configured."""


class DateAdapter(Protocol[TDate]):
    """Calendar operations over an opaque date type.

    Helpers never look inside ``TDate``; every comparison, arithmetic step and
    field access goes through an adapter. Invalid values must flow through every
    method without raising: getters report None for them and setters given None
    produce an invalid value.
    """

    def date(self, value: Any = None) -> TDate:
        """Return the current instant when ``value`` is None, else the parsed value."""

    def is_valid(self, value: Any) -> bool: ...

    def is_equal(self, value: TDate | None, comparing: TDate | None) -> bool: ...

    def is_before(self, value: TDate, comparing: TDate) -> bool: ...

    def is_after(self, value: TDate, comparing: TDate) -> bool: ...

    def add_days(self, value: TDate, amount: int) -> TDate: ...

    def add_months(self, value: TDate, amount: int) -> TDate: ...

    def start_of_day(self, value: TDate) -> TDate: ...

    def start_of_year(self, value: TDate) -> TDate: ...

    def get_hours(self, value: TDate) -> int | None: ...

    def get_minutes(self, value: TDate) -> int | None: ...

    def get_seconds(self, value: TDate) -> int | None: ...

    def set_hours(self, value: TDate, hours: int | None) -> TDate: ...

    def set_minutes(self, value: TDate, minutes: int | None) -> TDate: ...

    def set_seconds(self, value: TDate, seconds: int | None) -> TDate: ...
