"""Human-readable rendering of durations and slots for CLI messages."""

from datetime import datetime, timedelta

from slotwise.models import TimeSlot


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_duration(duration: timedelta) -> str:
    """Format as "45 minutes", "2 hours" or "1 hour 30 minutes"."""
    total_minutes = int(duration.total_seconds() // 60)
    hours, minutes = divmod(total_minutes, 60)

    if hours == 0:
        return _plural(minutes, "minute")
    if minutes == 0:
        return _plural(hours, "hour")
    return f"{_plural(hours, 'hour')} {_plural(minutes, 'minute')}"


def format_timestamp(moment: datetime) -> str:
    """Format like "Thu, Feb 5, 2026, 10:00 AM"."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{moment:%a, %b} {moment.day}, {moment.year}, {hour}:{moment:%M} {suffix}"


def format_slot(slot: TimeSlot) -> str:
    return f"{format_timestamp(slot.start)} - {format_timestamp(slot.end)} ({format_duration(slot.duration)})"
