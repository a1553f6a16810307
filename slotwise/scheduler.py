"""
Tool: Meeting Scheduler
Purpose: Caller-facing scheduling operations over an event source

This module is the layer that owns input checks. It resolves time
arguments (datetimes or natural language text), rejects inverted windows
and non-positive durations, fetches and expands events, then hands
explicit values to the pure engine functions. Results come back on the
clock of the requested window: an offset in the input ("...T09:00Z")
gives aware results even when the stored events are naive.

Every operation returns a JSON-serializable dict:
    {"success": True, ...} on success
    {"success": False, "error": str} on bad input

Event source failures are not caught here; they reach the caller as-is.

Usage:
    from slotwise.scheduler import find_free_time
    from slotwise.sources import JsonFileEventSource

    source = JsonFileEventSource("events.json")
    result = find_free_time(source, "tomorrow 9am", "tomorrow 5pm", duration_minutes=45)
"""

from datetime import timedelta
from typing import Any

from slotwise.config_models import SchedulingConfig, load_config
from slotwise.date_parser import TimeArg, parse_date_range
from slotwise.engine.analytics import analyze_schedule as analyze_occurrences
from slotwise.engine.conflicts import conflicts_with
from slotwise.engine.free_slots import find_free_slots
from slotwise.engine.optimal import find_optimal_slot, rank_slots
from slotwise.errors import DateParseError
from slotwise.formatters import format_duration, format_slot
from slotwise.logging_config import get_logger
from slotwise.models import TimeSlot
from slotwise.sources.base import EventSource, collect_occurrences


logger = get_logger(__name__)

MAX_ALTERNATIVES = 3


def _unknown_calendar(source: EventSource, calendar: str | None) -> dict[str, Any] | None:
    if calendar and not source.has_calendar(calendar):
        return {"success": False, "error": f'Calendar "{calendar}" not found'}
    return None


def find_free_time(
    source: EventSource,
    start_search: TimeArg,
    end_search: TimeArg,
    duration_minutes: int,
    business_hours_only: bool = False,
    config: SchedulingConfig | None = None,
) -> dict[str, Any]:
    """
    Find free slots of a given length across all calendars.

    Args:
        source: Event source to read busy time from
        start_search: Start of the search window
        end_search: End of the search window
        duration_minutes: Required slot length in minutes
        business_hours_only: Only consider slots starting in business hours
        config: Scheduling config (default: args/scheduling.yaml)

    Returns:
        {
            "success": bool,
            "slots": list[{"start": str, "end": str}],
            "total": int,
            "more": int,  # slots found beyond max_results
        }
    """
    config = config or load_config()

    if duration_minutes <= 0:
        return {"success": False, "error": "Duration must be a positive number"}

    try:
        start, end = parse_date_range(
            start_search, end_search, timedelta(minutes=config.defaults.event_duration_minutes)
        )
    except DateParseError as e:
        return {"success": False, "error": f"Date parsing failed: {e}"}

    duration = timedelta(minutes=duration_minutes)
    occurrences = collect_occurrences(source, start, end)
    slots = find_free_slots(
        start,
        end,
        duration,
        occurrences,
        business_hours_only,
        business_hours=config.search.business_hours,
        step=timedelta(minutes=config.search.step_minutes),
    )

    logger.info(f"find_free_time: {len(slots)} free slots of {duration_minutes}m between {start} and {end}")

    shown = slots[: config.search.max_results]
    if slots:
        message = f"Found {len(slots)} free time slot{'s' if len(slots) != 1 else ''}"
    else:
        message = "No free time slots found for the specified duration."

    return {
        "success": True,
        "message": message,
        "slots": [slot.to_dict() for slot in shown],
        "total": len(slots),
        "more": len(slots) - len(shown),
        "duration_minutes": duration_minutes,
        "business_hours_only": business_hours_only,
    }


def check_conflicts(
    source: EventSource,
    start: TimeArg,
    end: TimeArg | None = None,
    calendar: str | None = None,
    config: SchedulingConfig | None = None,
) -> dict[str, Any]:
    """
    Check whether a proposed time is free.

    Args:
        source: Event source
        start: Proposed start
        end: Proposed end (default: start + default event duration)
        calendar: Restrict the check to one calendar

    Returns:
        {
            "success": bool,
            "is_free": bool,
            "conflicts": list[dict],
        }
    """
    config = config or load_config()

    try:
        start_dt, end_dt = parse_date_range(
            start, end, timedelta(minutes=config.defaults.event_duration_minutes)
        )
    except DateParseError as e:
        return {"success": False, "error": f"Date parsing failed: {e}"}

    missing = _unknown_calendar(source, calendar)
    if missing:
        return missing

    slot = TimeSlot(start_dt, end_dt)
    occurrences = collect_occurrences(source, start_dt, end_dt, calendar)
    conflicts = conflicts_with(slot, occurrences)

    logger.info(f"check_conflicts: {len(conflicts)} conflicts for {start_dt} - {end_dt}")

    if conflicts:
        message = f"{len(conflicts)} conflict{'s' if len(conflicts) != 1 else ''} found"
    else:
        message = f"Time slot is FREE: {format_slot(slot)}"

    return {
        "success": True,
        "message": message,
        "is_free": not conflicts,
        "slot": slot.to_dict(),
        "duration": format_duration(slot.duration),
        "conflicts": [occ.to_dict() for occ in conflicts],
    }


def suggest_optimal_time(
    source: EventSource,
    start_search: TimeArg,
    end_search: TimeArg,
    duration_minutes: int,
    preferred_hours: list[int] | None = None,
    config: SchedulingConfig | None = None,
) -> dict[str, Any]:
    """
    Suggest the single best time for a meeting.

    Searches the whole window (business hours are not applied), then
    prefers slots starting in one of preferred_hours. Earlier slots win
    ties.

    Args:
        source: Event source
        start_search: Start of the search window
        end_search: End of the search window
        duration_minutes: Meeting length in minutes
        preferred_hours: Local hours to favour (default: config value)

    Returns:
        {
            "success": bool,
            "slot": {"start": str, "end": str} | None,
            "alternatives": list[{"start": str, "end": str, "score": int}],
        }
    """
    config = config or load_config()

    if not duration_minutes or duration_minutes <= 0:
        return {"success": False, "error": "Duration must be a positive number"}

    try:
        start, end = parse_date_range(
            start_search, end_search, timedelta(minutes=config.defaults.event_duration_minutes)
        )
    except DateParseError as e:
        return {"success": False, "error": f"Date parsing failed: {e}"}

    if preferred_hours is None:
        preferred_hours = config.defaults.preferred_hours

    duration = timedelta(minutes=duration_minutes)
    occurrences = collect_occurrences(source, start, end)
    candidates = find_free_slots(
        start,
        end,
        duration,
        occurrences,
        False,
        business_hours=config.search.business_hours,
        step=timedelta(minutes=config.search.step_minutes),
    )
    optimal = find_optimal_slot(candidates, occurrences, preferred_hours)

    if optimal is None:
        logger.info(f"suggest_optimal_time: nothing free between {start} and {end}")
        return {
            "success": True,
            "message": "No available time slots found for the specified duration.",
            "slot": None,
            "alternatives": [],
        }

    ranked = rank_slots(candidates, occurrences, preferred_hours)
    alternatives = [scored.to_dict() for scored in ranked[1 : MAX_ALTERNATIVES + 1]]

    logger.info(f"suggest_optimal_time: picked {optimal.start} from {len(candidates)} candidates")

    return {
        "success": True,
        "message": f"Suggested optimal time: {format_slot(optimal)}",
        "slot": optimal.to_dict(),
        "duration": format_duration(duration),
        "alternatives": alternatives,
    }


def analyze_schedule(
    source: EventSource,
    start: TimeArg,
    end: TimeArg,
    calendar: str | None = None,
    config: SchedulingConfig | None = None,
) -> dict[str, Any]:
    """
    Summarize how busy a period is.

    Args:
        source: Event source
        start: Start of the period
        end: End of the period
        calendar: Restrict the analysis to one calendar

    Returns:
        {
            "success": bool,
            "analysis": {
                "total_events": int,
                "total_hours": float,
                "average_events_per_day": float,
                "days": list[{"date": str, "event_count": int, "total_hours": float}],
            },
        }
    """
    config = config or load_config()

    try:
        start_dt, end_dt = parse_date_range(
            start, end, timedelta(minutes=config.defaults.event_duration_minutes)
        )
    except DateParseError as e:
        return {"success": False, "error": f"Date parsing failed: {e}"}

    missing = _unknown_calendar(source, calendar)
    if missing:
        return missing

    occurrences = collect_occurrences(source, start_dt, end_dt, calendar)
    analysis = analyze_occurrences(occurrences, start_dt, end_dt)

    logger.info(f"analyze_schedule: {analysis.total_events} events over {len(analysis.days)} days")

    return {
        "success": True,
        "period": {"start": start_dt.isoformat(), "end": end_dt.isoformat()},
        "analysis": analysis.to_dict(),
    }


__all__ = [
    "analyze_schedule",
    "check_conflicts",
    "find_free_time",
    "suggest_optimal_time",
]
