"""Exception types raised at the edges of the scheduling engine.

The engine itself is pure and raises nothing of its own. These types
belong to the collaborators around it: event sources and the date parser.
"""


class SlotwiseError(Exception):
    """Base class for slotwise errors."""


class EventSourceError(SlotwiseError):
    """An event source could not supply event definitions."""


class DateParseError(SlotwiseError, ValueError):
    """Free-form date text could not be resolved to a datetime."""


__all__ = ["DateParseError", "EventSourceError", "SlotwiseError"]
