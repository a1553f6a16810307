"""Event Sources: where event definitions come from

Components:
    base.py: EventSource interface and collect_occurrences()
    memory.py: In-memory source
    json_file.py: Source backed by a JSON document on disk
"""

from slotwise.sources.base import EventSource, collect_occurrences
from slotwise.sources.json_file import JsonFileEventSource
from slotwise.sources.memory import InMemoryEventSource


__all__ = [
    "EventSource",
    "InMemoryEventSource",
    "JsonFileEventSource",
    "collect_occurrences",
]
