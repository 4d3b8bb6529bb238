from .base import DateAdapter, DateAdapterError, TDate
from .python_datetime import DatetimeAdapter

__all__ = [
    "DateAdapter",
    "DateAdapterError",
    "DatetimeAdapter",
    "TDate",
]
