"""
Tool: JSON File Event Source
Purpose: Load event definitions from a JSON document

Format:
    {
        "events": [
            {
                "uid": "standup-1",
                "summary": "Standup",
                "start": "2026-02-02T09:00:00",
                "end": "2026-02-02T09:15:00",
                "recurrence_rule": "FREQ=DAILY;BYDAY=MO,TU,WE,TH,FR",
                "location": "Room 4",
                "calendar_name": "Work"
            }
        ]
    }

The file is read on every call so edits are picked up without a restart.
"""

import json
from datetime import datetime
from pathlib import Path

from slotwise.errors import EventSourceError
from slotwise.models import RecurringEventDefinition
from slotwise.sources.base import EventSource
from slotwise.sources.memory import InMemoryEventSource


class JsonFileEventSource(EventSource):
    """Event source backed by a JSON file on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> list[RecurringEventDefinition]:
        """
        Read and parse every definition in the file.

        Raises:
            EventSourceError: File missing, not JSON, or a record is malformed
        """
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise EventSourceError(f"Events file not found: {self.path}") from e
        except json.JSONDecodeError as e:
            raise EventSourceError(f"Invalid JSON in {self.path}: {e}") from e

        records = raw.get("events", []) if isinstance(raw, dict) else raw
        if not isinstance(records, list):
            raise EventSourceError(f"Expected a list of events in {self.path}")

        definitions = []
        for index, record in enumerate(records):
            try:
                definitions.append(RecurringEventDefinition.from_dict(record))
            except (KeyError, TypeError, ValueError) as e:
                raise EventSourceError(f"Malformed event #{index} in {self.path}: {e}") from e
        return definitions

    def list_calendars(self) -> list[str]:
        return InMemoryEventSource(self.load()).list_calendars()

    def list_occurrence_candidates(
        self,
        calendar_scope: str | None,
        window_start: datetime,
        window_end: datetime,
    ) -> list[RecurringEventDefinition]:
        return InMemoryEventSource(self.load()).list_occurrence_candidates(
            calendar_scope, window_start, window_end
        )
