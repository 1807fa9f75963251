"""Date and time formatting helpers."""

from utilkit.timeutil.iso8601 import (
    IsoWeekday,
    WeekDate,
    to_iso8601_string,
    to_sortable_date,
    to_sortable_datetime,
)

__all__ = [
    "IsoWeekday",
    "WeekDate",
    "to_iso8601_string",
    "to_sortable_date",
    "to_sortable_datetime",
]
