from .models import (
    DATE_VIEWS,
    DateOrTimeViewWithMeridiem,
    DateView,
    FieldValueType,
    InvalidDate,
    TimeView,
    is_date_picker_view,
)

__all__ = [
    "DATE_VIEWS",
    "DateOrTimeViewWithMeridiem",
    "DateView",
    "FieldValueType",
    "InvalidDate",
    "TimeView",
    "is_date_picker_view",
]
