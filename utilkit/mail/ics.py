"""iCalendar (RFC 5545) invitation builder."""

from __future__ import annotations

import datetime
import uuid

from utilkit.config import settings

_CRLF = "\r\n"


def to_ics_datetime(value: datetime.datetime) -> str:
    """Format *value* as an iCalendar local date-time (``YYYYMMDDTHHMMSS``)."""
    return value.strftime("%Y%m%dT%H%M%S")


def _escape_text(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def create_ics(
    start: datetime.datetime,
    end: datetime.datetime,
    summary: str,
    location: str,
    description: str,
    *,
    notification: str | None = None,
    tzid: str | None = None,
    uid: str | None = None,
    now: datetime.datetime | None = None,
) -> str:
    """Build a single-event VCALENDAR document.

    *notification* is an iCal duration for a display alarm, e.g. ``-PT30M``
    (30 minutes before), ``-PT1H`` or ``-P1D``. Times are written as local
    times in *tzid* (``settings.ics_timezone`` by default).
    """
    tzid = tzid or settings.ics_timezone
    uid = uid or str(uuid.uuid4())
    if now is None:
        now = datetime.datetime.now()

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//utilkit//NONSGML v1.0//EN",
        "BEGIN:VEVENT",
        f"UID:{uid}",
        f"DTSTAMP;TZID={tzid}:{to_ics_datetime(now)}",
        f"DTSTART;TZID={tzid}:{to_ics_datetime(start)}",
        f"DTEND;TZID={tzid}:{to_ics_datetime(end)}",
        f"SUMMARY:{_escape_text(summary)}",
        f"LOCATION:{_escape_text(location)}",
        f"DESCRIPTION:{_escape_text(description)}",
    ]
    if notification is not None:
        lines += [
            "BEGIN:VALARM",
            "DESCRIPTION:REMINDER",
            f"TRIGGER:{notification}",
            "ACTION:DISPLAY",
            "END:VALARM",
        ]
    lines += ["END:VEVENT", "END:VCALENDAR"]

    return _CRLF.join(lines) + _CRLF
