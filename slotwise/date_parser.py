"""
Tool: Date Parser
Purpose: Resolve natural language dates into datetimes for the scheduler

The scheduling engine never parses text. This adapter sits in front of it
and turns phrases like "tomorrow at 3pm", "next Friday" or
"2026-02-05T10:00" into datetime values.

Usage:
    from slotwise.date_parser import parse_datetime, parse_date_range

    start = parse_datetime("tomorrow at 9am")
    start, end = parse_date_range("monday 10am", "monday 11:30am")

Dependencies:
    - dateparser (natural language date parsing)
    - python-dateutil (month arithmetic)
"""

from datetime import datetime, time, timedelta

import dateparser
from dateutil.relativedelta import relativedelta

from slotwise.errors import DateParseError
from slotwise.models import match_clock


DEFAULT_EVENT_DURATION = timedelta(hours=1)

TimeArg = datetime | str

COMMON_PERIODS = ("today", "tomorrow", "this_week", "next_week", "this_month", "next_month")


def parse_datetime(text: str, reference: datetime | None = None) -> datetime:
    """
    Parse a natural language date/time string.

    Relative phrases resolve against reference (default: now). When the
    reference is timezone-aware, naive results take its timezone.

    Raises:
        DateParseError: If the text cannot be parsed
    """
    reference = reference or datetime.now()
    settings = {
        "PREFER_DATES_FROM": "future",
        "RELATIVE_BASE": reference.replace(tzinfo=None),
    }

    parsed = dateparser.parse(text, settings=settings) if text and text.strip() else None
    if parsed is None:
        raise DateParseError(f'Could not parse date: "{text}"')

    if parsed.tzinfo is None and reference.tzinfo is not None:
        parsed = parsed.replace(tzinfo=reference.tzinfo)
    return parsed


def parse_date_range(
    start: TimeArg,
    end: TimeArg | None = None,
    default_duration: timedelta = DEFAULT_EVENT_DURATION,
    reference: datetime | None = None,
) -> tuple[datetime, datetime]:
    """
    Resolve a start/end pair given as datetimes or text.

    Datetimes pass through unchanged, except that the end is put on the
    start's clock (naive or aware). A text end is resolved relative to
    the start, so "3pm" after "next monday 2pm" lands on the same Monday.
    Without an end the range lasts default_duration.

    Raises:
        DateParseError: If either side fails to parse or end <= start
    """
    start_dt = start if isinstance(start, datetime) else parse_datetime(start, reference)

    if isinstance(end, datetime):
        end_dt = end
    elif end:
        end_dt = parse_datetime(end, start_dt)
    else:
        end_dt = start_dt + default_duration

    # "9am" to "5pm UTC" must not mix naive and aware values
    end_dt = match_clock(end_dt, start_dt)

    if end_dt <= start_dt:
        raise DateParseError("End date must be after start date")

    return start_dt, end_dt


def get_common_date_range(period: str, now: datetime | None = None) -> tuple[datetime, datetime]:
    """
    Get the range covering a named period.

    Weeks run Sunday to Saturday. Ranges start at midnight and end at the
    last microsecond of their final day.

    Args:
        period: One of COMMON_PERIODS (case-insensitive)
        now: Reference time (default: now)

    Raises:
        DateParseError: For an unknown period name
    """
    now = now or datetime.now()
    today = datetime.combine(now.date(), time.min, tzinfo=now.tzinfo)
    key = period.lower()

    if key == "today":
        start = last_day = today
    elif key == "tomorrow":
        start = last_day = today + timedelta(days=1)
    elif key in ("this_week", "next_week"):
        days_since_sunday = (today.weekday() + 1) % 7
        start = today - timedelta(days=days_since_sunday)
        if key == "next_week":
            start += timedelta(days=7)
        last_day = start + timedelta(days=6)
    elif key in ("this_month", "next_month"):
        start = today.replace(day=1)
        if key == "next_month":
            start += relativedelta(months=1)
        last_day = start + relativedelta(months=1) - timedelta(days=1)
    else:
        raise DateParseError(f"Unknown period: {period}")

    return start, datetime.combine(last_day.date(), time.max, tzinfo=now.tzinfo)


__all__ = [
    "COMMON_PERIODS",
    "DEFAULT_EVENT_DURATION",
    "TimeArg",
    "get_common_date_range",
    "parse_date_range",
    "parse_datetime",
]
