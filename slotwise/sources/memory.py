"""In-memory event source, used by tests and embedding callers."""

from collections.abc import Iterable
from datetime import datetime

from slotwise.models import RecurringEventDefinition
from slotwise.sources.base import EventSource


class InMemoryEventSource(EventSource):
    """Serves a fixed list of definitions; copies are never mutated."""

    def __init__(self, definitions: Iterable[RecurringEventDefinition] = ()):
        self._definitions = list(definitions)

    def list_calendars(self) -> list[str]:
        names: list[str] = []
        for definition in self._definitions:
            if definition.calendar_name and definition.calendar_name not in names:
                names.append(definition.calendar_name)
        return names

    def list_occurrence_candidates(
        self,
        calendar_scope: str | None,
        window_start: datetime,
        window_end: datetime,
    ) -> list[RecurringEventDefinition]:
        if calendar_scope is None:
            return list(self._definitions)
        return [d for d in self._definitions if d.calendar_name == calendar_scope]
