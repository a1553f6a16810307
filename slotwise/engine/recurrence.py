"""
Tool: Recurrence Expander
Purpose: Turn event definitions into concrete occurrences for a query window

Rules:
    - Recurring definitions yield one occurrence per rule start inside
      [query_start, query_end], both ends inclusive.
    - Each occurrence keeps the definition's base duration; the rule only
      moves the start.
    - A rule that cannot be parsed or expanded yields the base event once,
      whether or not it falls inside the window.
    - Non-recurring definitions are kept only if their start lies inside
      the window.

No cap is placed on the number of occurrences; the window bounds it.

Dependencies:
    - python-dateutil (RFC 5545 RRULE parsing and expansion)
"""

from collections.abc import Iterable
from datetime import datetime

from dateutil.rrule import rrulestr

from slotwise.logging_config import get_logger
from slotwise.models import Occurrence, RecurringEventDefinition


logger = get_logger(__name__)

# What dateutil raises for bad syntax, naive/aware mixes and dates past datetime.max
_EXPANSION_ERRORS = (ValueError, TypeError, OverflowError)


def _rule_starts(
    definition: RecurringEventDefinition,
    query_start: datetime,
    query_end: datetime,
) -> list[datetime]:
    # A naive start reads a UTC UNTIL (trailing Z) as wall-clock time; dateutil rejects the mix otherwise
    rule = rrulestr(
        definition.recurrence_rule.strip(),
        dtstart=definition.start,
        ignoretz=definition.start.tzinfo is None,
    )
    return rule.between(query_start, query_end, inc=True)


def expand_definition(
    definition: RecurringEventDefinition,
    query_start: datetime,
    query_end: datetime,
) -> list[Occurrence]:
    """
    Expand one definition into the occurrences relevant to a query window.

    Args:
        definition: Event definition from an event source (not modified)
        query_start: Window start (inclusive)
        query_end: Window end (inclusive)

    Returns:
        Occurrences in chronological order of their starts
    """
    if not definition.is_recurring:
        if query_start <= definition.start <= query_end:
            return [definition.occurrence_at(definition.start, definition.end)]
        return []

    duration = definition.duration

    try:
        starts = _rule_starts(definition, query_start, query_end)
    except _EXPANSION_ERRORS as e:
        logger.warning(
            f"Failed to expand recurrence rule for {definition.uid!r} "
            f"({definition.recurrence_rule!r}): {e}; keeping base event"
        )
        return [definition.occurrence_at(definition.start, definition.end)]

    logger.debug(f"Expanded {definition.uid!r} into {len(starts)} occurrences")
    return [definition.occurrence_at(start, start + duration) for start in starts]


def expand_definitions(
    definitions: Iterable[RecurringEventDefinition],
    query_start: datetime,
    query_end: datetime,
) -> list[Occurrence]:
    """Expand every definition, keeping source order between definitions."""
    occurrences: list[Occurrence] = []
    for definition in definitions:
        occurrences.extend(expand_definition(definition, query_start, query_end))
    return occurrences


__all__ = ["expand_definition", "expand_definitions"]
