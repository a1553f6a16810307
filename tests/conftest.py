"""Shared test fixtures for Slotwise tests.

This module provides common fixtures used across all test modules:
- Fixed reference dates so results never depend on the clock
- Factories for occurrences and event definitions
- Event sources backed by memory or a temporary JSON file

Usage:
    def test_something(day_start, make_occurrence):
        busy = make_occurrence(day_start.replace(hour=10), hours=1)
        ...
"""

import json
from collections.abc import Callable
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from slotwise.config_models import SchedulingConfig
from slotwise.models import Occurrence, RecurringEventDefinition
from slotwise.sources import InMemoryEventSource, JsonFileEventSource


# ─────────────────────────────────────────────────────────────────────────────
# Time Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def day_start() -> datetime:
    """Midnight on Thursday 2026-02-05."""
    return datetime(2026, 2, 5, 0, 0)


@pytest.fixture
def day_end(day_start: datetime) -> datetime:
    """Midnight at the end of day_start's day."""
    return day_start + timedelta(days=1)


# ─────────────────────────────────────────────────────────────────────────────
# Event Factories
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def make_occurrence() -> Callable[..., Occurrence]:
    """Factory for occurrences.

    Returns:
        callable(start, hours=1.0, uid=None, **fields) -> Occurrence
    """
    counter = iter(range(1, 10_000))

    def _make(start: datetime, hours: float = 1.0, uid: str | None = None, **fields) -> Occurrence:
        return Occurrence(
            uid=uid or f"occ-{next(counter)}",
            summary=fields.pop("summary", "Meeting"),
            start=start,
            end=start + timedelta(hours=hours),
            **fields,
        )

    return _make


@pytest.fixture
def make_definition() -> Callable[..., RecurringEventDefinition]:
    """Factory for event definitions.

    Returns:
        callable(start, hours=1.0, rule=None, **fields) -> RecurringEventDefinition
    """

    def _make(start: datetime, hours: float = 1.0, rule: str | None = None, **fields) -> RecurringEventDefinition:
        return RecurringEventDefinition(
            uid=fields.pop("uid", "def-1"),
            summary=fields.pop("summary", "Team Sync"),
            start=start,
            end=start + timedelta(hours=hours),
            recurrence_rule=rule,
            **fields,
        )

    return _make


# ─────────────────────────────────────────────────────────────────────────────
# Source Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def sample_definitions() -> list[RecurringEventDefinition]:
    """A small work/personal calendar around 2026-02-05.

    - Work: daily standup 09:00-09:15 from Monday 2026-02-02, weekdays only
    - Work: design review 2026-02-05 14:00-15:30
    - Personal: dentist 2026-02-05 10:00-11:00
    """
    return [
        RecurringEventDefinition(
            uid="standup",
            summary="Standup",
            start=datetime(2026, 2, 2, 9, 0),
            end=datetime(2026, 2, 2, 9, 15),
            recurrence_rule="FREQ=DAILY;BYDAY=MO,TU,WE,TH,FR",
            calendar_name="Work",
        ),
        RecurringEventDefinition(
            uid="review",
            summary="Design review",
            start=datetime(2026, 2, 5, 14, 0),
            end=datetime(2026, 2, 5, 15, 30),
            location="Room 4",
            calendar_name="Work",
        ),
        RecurringEventDefinition(
            uid="dentist",
            summary="Dentist",
            start=datetime(2026, 2, 5, 10, 0),
            end=datetime(2026, 2, 5, 11, 0),
            calendar_name="Personal",
        ),
    ]


@pytest.fixture
def memory_source(sample_definitions) -> InMemoryEventSource:
    return InMemoryEventSource(sample_definitions)


@pytest.fixture
def events_file(tmp_path: Path, sample_definitions) -> Path:
    """Write sample_definitions to a temporary JSON events file."""
    path = tmp_path / "events.json"
    path.write_text(json.dumps({"events": [d.to_dict() for d in sample_definitions]}))
    return path


@pytest.fixture
def json_source(events_file: Path) -> JsonFileEventSource:
    return JsonFileEventSource(events_file)


@pytest.fixture
def default_config() -> SchedulingConfig:
    """Built-in defaults, independent of args/scheduling.yaml."""
    return SchedulingConfig()
