"""ISO 8601 date/time formatting and ISO week dates."""

from __future__ import annotations

import datetime
import re
from enum import IntEnum
from zoneinfo import ZoneInfo

_ISO_FORMAT = "%Y-%m-%dT%H:%M:%S"
_WEEK_DATE_RE = re.compile(r"^(\d{4})-W(\d{2})-([1-7])$")


class IsoWeekday(IntEnum):
    """ISO 8601 day numbers, Monday first."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


def _resolve_zone(tz: str | datetime.tzinfo | None) -> datetime.tzinfo | None:
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def _format_offset(offset: datetime.timedelta | None) -> str:
    total = int(offset.total_seconds()) if offset is not None else 0
    sign = "-" if total < 0 else "+"
    hours, rem = divmod(abs(total), 3600)
    return f"{sign}{hours:02d}:{rem // 60:02d}"


def to_iso8601_string(
    value: datetime.datetime,
    *,
    zulu: bool = False,
    to_utc: bool = False,
    show_timezone: bool = False,
    tz: str | datetime.tzinfo | None = None,
) -> str:
    """Format *value* as ``YYYY-MM-DDTHH:MM:SS`` with an optional zone suffix.

    A naive *value* is taken to be wall-clock time in *tz* (a zone name or
    ``tzinfo``; the system local zone when omitted). Aware values keep their
    own zone.

    - ``zulu``: convert to UTC and append ``Z``.
    - ``to_utc``: convert to UTC; with ``show_timezone`` append ``+00:00``.
    - ``show_timezone``: append the zone offset as ``+HH:MM``.
    """
    if value.tzinfo is None:
        zone = _resolve_zone(tz)
        zoned = value.replace(tzinfo=zone) if zone is not None else value.astimezone()
    else:
        zoned = value

    output = zoned.astimezone(datetime.UTC) if (to_utc or zulu) else zoned

    suffix = ""
    if zulu:
        suffix = "Z"
    elif show_timezone:
        suffix = "+00:00" if to_utc else _format_offset(zoned.utcoffset())

    return output.strftime(_ISO_FORMAT) + suffix


class WeekDate:
    """ISO 8601 week date (``YYYY-Www-D``) of a calendar day.

    The week-numbering year differs from the calendar year around New Year:
    2021-01-01 is ``2020-W53-5``.
    """

    __slots__ = ("_date", "_year", "_week", "_day")

    def __init__(self, value: datetime.date) -> None:
        if isinstance(value, datetime.datetime):
            value = value.date()
        self._date = value
        self._year, self._week, self._day = value.isocalendar()

    @classmethod
    def parse(cls, text: str) -> WeekDate:
        """Parse ``YYYY-Www-D``.

        Raises:
            ValueError: If *text* is not a valid ISO week date.
        """
        m = _WEEK_DATE_RE.match(text.strip())
        if not m:
            raise ValueError(f"Not an ISO week date: {text!r}")
        year, week, day = (int(g) for g in m.groups())
        return cls(datetime.date.fromisocalendar(year, week, day))

    @property
    def date(self) -> datetime.date:
        return self._date

    @property
    def year(self) -> int:
        return self._year

    @property
    def week(self) -> int:
        return self._week

    @property
    def day(self) -> int:
        return self._day

    @property
    def day_of_week(self) -> IsoWeekday:
        return IsoWeekday(self._day)

    def first_day_of_week(self) -> datetime.date:
        """Return the Monday of this week."""
        return self._date - datetime.timedelta(days=self._day - 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeekDate):
            return NotImplemented
        return self._date == other._date

    def __hash__(self) -> int:
        return hash(self._date)

    def __repr__(self) -> str:
        return f"WeekDate({self._date.isoformat()!r})"

    def __str__(self) -> str:
        return f"{self._year:04d}-W{self._week:02d}-{self._day}"


def to_sortable_datetime(value: datetime.datetime) -> str:
    """``YYYYMMDDHHMMSS``."""
    return value.strftime("%Y%m%d%H%M%S")


def to_sortable_date(value: datetime.date) -> str:
    """``YYYYMMDD``."""
    return value.strftime("%Y%m%d")
