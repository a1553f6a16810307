"""
Tool: Optimal-Slot Selector
Purpose: Pick the best free slot according to preferred hours

A slot scores 1 when its start hour is one of the preferred hours and 0
otherwise. Ties keep candidate order, so the earliest top-scoring slot
wins. Candidates are re-checked against the occurrences first because
they may have been produced from a different event set.
"""

from collections.abc import Iterable, Sequence

from slotwise.engine.conflicts import is_free
from slotwise.models import Occurrence, ScoredSlot, TimeSlot


def rank_slots(
    candidates: Iterable[TimeSlot],
    occurrences: Sequence[Occurrence],
    preferred_hours: Iterable[int] | None = None,
) -> list[ScoredSlot]:
    """
    Score the still-free candidates and order them best first.

    Without preferred hours every slot scores 0 and candidate order is kept.
    """
    free = [slot for slot in candidates if is_free(slot, occurrences)]
    hours = set(preferred_hours or ())

    scored = [ScoredSlot(slot, 1 if slot.start.hour in hours else 0) for slot in free]
    # sorted() is stable, including with reverse=True
    return sorted(scored, key=lambda s: s.score, reverse=True)


def find_optimal_slot(
    candidates: Iterable[TimeSlot],
    occurrences: Sequence[Occurrence],
    preferred_hours: Iterable[int] | None = None,
) -> TimeSlot | None:
    """
    Choose the best free candidate.

    Args:
        candidates: Candidate slots, usually from find_free_slots
        occurrences: Busy occurrences
        preferred_hours: Local hours of day to favour (e.g. [9, 10, 11])

    Returns:
        The earliest top-scoring free slot, or None if none are free
    """
    ranked = rank_slots(candidates, occurrences, preferred_hours)
    if not ranked:
        return None
    return ranked[0].slot


__all__ = ["find_optimal_slot", "rank_slots"]
