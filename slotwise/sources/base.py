"""
Tool: Event Source Base
Purpose: Abstract interface for anything that supplies event definitions

Sources pre-filter to a calendar scope but need not expand recurrence or
trim to the exact window; collect_occurrences() does both through the
recurrence expander.

Usage:
    from slotwise.sources import JsonFileEventSource, collect_occurrences

    source = JsonFileEventSource("events.json")
    occurrences = collect_occurrences(source, start, end)
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime

from slotwise.engine.recurrence import expand_definition
from slotwise.models import Occurrence, RecurringEventDefinition, match_clock


class EventSource(ABC):
    """
    Abstract base class for event sources.

    Implementations may block on I/O and may raise; errors reach the
    caller unchanged.
    """

    @abstractmethod
    def list_calendars(self) -> list[str]:
        """Return the names of calendars this source knows about."""
        pass

    @abstractmethod
    def list_occurrence_candidates(
        self,
        calendar_scope: str | None,
        window_start: datetime,
        window_end: datetime,
    ) -> list[RecurringEventDefinition]:
        """
        Get event definitions that may have occurrences in a window.

        Args:
            calendar_scope: Calendar name, or None for all calendars
            window_start: Start of the window of interest
            window_end: End of the window of interest

        Returns:
            Definitions in the scope, not yet expanded
        """
        pass

    def has_calendar(self, name: str) -> bool:
        return name in self.list_calendars()


def _on_clock_of(occurrence: Occurrence, reference: datetime) -> Occurrence:
    return replace(
        occurrence,
        start=match_clock(occurrence.start, reference),
        end=match_clock(occurrence.end, reference),
    )


def collect_occurrences(
    source: EventSource,
    window_start: datetime,
    window_end: datetime,
    calendar_scope: str | None = None,
) -> list[Occurrence]:
    """
    Fetch definitions from a source and expand them for the window.

    Each definition is expanded on its own clock (naive or aware) and the
    resulting occurrences are returned on the window's clock, so callers
    may query naive events with an aware window and the reverse.
    """
    definitions = source.list_occurrence_candidates(calendar_scope, window_start, window_end)

    occurrences: list[Occurrence] = []
    for definition in definitions:
        expanded = expand_definition(
            definition,
            match_clock(window_start, definition.start),
            match_clock(window_end, definition.start),
        )
        occurrences.extend(_on_clock_of(occ, window_start) for occ in expanded)
    return occurrences


__all__ = ["EventSource", "collect_occurrences"]
