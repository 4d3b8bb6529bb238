from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeGuard

FieldValueType = Literal["date", "time", "date-time"]
DateView = Literal["year", "month", "day"]
TimeView = Literal["hours", "minutes", "seconds"]
DateOrTimeViewWithMeridiem = DateView | TimeView | Literal["meridiem"]

DATE_VIEWS: tuple[DateView, ...] = ("year", "month", "day")


@dataclass(frozen=True, slots=True)
class InvalidDate:
    """A date value that could not be parsed or lies outside the calendar domain."""

    raw: str = ""

    def __str__(self) -> str:
        return "Invalid Date"


def is_date_picker_view(view: DateOrTimeViewWithMeridiem) -> TypeGuard[DateView]:
    return view in DATE_VIEWS
