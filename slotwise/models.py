"""
Tool: Scheduling Models
Purpose: Data structures shared by the scheduling engine and its callers

Usage:
    from slotwise.models import TimeSlot, Occurrence, RecurringEventDefinition

Occurrences and slots are derived per request and never persisted. Event
definitions come from an event source and are treated as read-only input.
"""

from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timedelta
from typing import Any


def _parse_timestamp(value: Any) -> datetime:
    """Accept a datetime or an ISO-8601 string (trailing 'Z' allowed)."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    raise TypeError(f"Expected datetime or ISO string, got {type(value).__name__}")


def match_clock(moment: datetime, reference: datetime) -> datetime:
    """
    Express moment as naive or aware to match reference.

    Naive datetimes are read as system local time. Values that already
    agree with reference are returned unchanged.
    """
    if (moment.tzinfo is None) == (reference.tzinfo is None):
        return moment
    if reference.tzinfo is None:
        return moment.astimezone().replace(tzinfo=None)
    return moment.astimezone(reference.tzinfo)


@dataclass(frozen=True)
class TimeSlot:
    """
    Half-open time interval [start, end).

    Producers guarantee start < end; the type does not enforce it.
    """

    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def overlaps(self, other: "TimeSlot") -> bool:
        """True iff the two half-open intervals share any instant."""
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TimeSlot":
        return cls(start=_parse_timestamp(data["start"]), end=_parse_timestamp(data["end"]))


@dataclass(frozen=True)
class Occurrence:
    """
    One concrete, non-recurring instance of an event.

    Recurring definitions expand into many occurrences that share uid,
    summary, location and description but carry their own start/end.
    """

    uid: str
    summary: str
    start: datetime
    end: datetime
    location: str | None = None
    description: str | None = None
    calendar_name: str | None = None

    @property
    def slot(self) -> TimeSlot:
        return TimeSlot(self.start, self.end)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        d = asdict(self)
        d["start"] = self.start.isoformat()
        d["end"] = self.end.isoformat()
        return d


@dataclass
class RecurringEventDefinition:
    """
    Raw event record as supplied by an event source.

    The base start/end define the canonical duration applied to every
    expanded occurrence. recurrence_rule holds RRULE text, e.g.
    "FREQ=WEEKLY;COUNT=4" or "RRULE:FREQ=DAILY"; None or blank means the
    event does not recur.
    """

    uid: str
    summary: str
    start: datetime
    end: datetime
    recurrence_rule: str | None = None
    location: str | None = None
    description: str | None = None
    calendar_name: str | None = None

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def is_recurring(self) -> bool:
        return bool(self.recurrence_rule and self.recurrence_rule.strip())

    def occurrence_at(self, start: datetime, end: datetime) -> Occurrence:
        """Build an occurrence of this definition with its own start/end."""
        return Occurrence(
            uid=self.uid,
            summary=self.summary,
            start=start,
            end=end,
            location=self.location or None,
            description=self.description or None,
            calendar_name=self.calendar_name,
        )

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["start"] = self.start.isoformat()
        d["end"] = self.end.isoformat()
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RecurringEventDefinition":
        """Create from dict, parsing ISO timestamps."""
        data = data.copy()
        for time_field in ["start", "end"]:
            data[time_field] = _parse_timestamp(data[time_field])
        return cls(**data)


@dataclass(frozen=True)
class ScoredSlot:
    """A free candidate slot with its preference score (0 or 1)."""

    slot: TimeSlot
    score: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {**self.slot.to_dict(), "score": self.score}


@dataclass
class DayBreakdown:
    """Per-day slice of a schedule analysis."""

    day: date
    event_count: int
    total_duration: timedelta

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.day.isoformat(),
            "event_count": self.event_count,
            "total_hours": round(self.total_duration.total_seconds() / 3600, 2),
        }


@dataclass
class ScheduleAnalysis:
    """
    Aggregate statistics over the occurrences of one period.

    total_duration counts overlapping occurrences separately, so
    double-booked time appears twice.
    """

    total_events: int
    total_duration: timedelta
    density: float
    days: list[DayBreakdown] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_events": self.total_events,
            "total_hours": round(self.total_duration.total_seconds() / 3600, 2),
            "average_events_per_day": round(self.density, 2),
            "days": [d.to_dict() for d in self.days],
        }


__all__ = [
    "DayBreakdown",
    "Occurrence",
    "RecurringEventDefinition",
    "ScheduleAnalysis",
    "ScoredSlot",
    "TimeSlot",
    "match_clock",
]
