"""Tests for slotwise/engine/free_slots.py

Free-slot search walks candidate starts in 30-minute steps:
- Every returned slot is free
- With no events, every step that fits is returned
- Business hours gate only the candidate's start hour
"""

from datetime import datetime, timedelta

import pytest

from slotwise.engine.conflicts import is_free
from slotwise.engine.free_slots import SLOT_STEP, find_free_slots


HOUR = timedelta(hours=1)


def _starts(slots) -> list[str]:
    return [slot.start.strftime("%H:%M") for slot in slots]


# ─────────────────────────────────────────────────────────────────────────────
# Search Around Existing Events
# ─────────────────────────────────────────────────────────────────────────────


class TestFindFreeSlots:
    """Tests for the fixed-step search."""

    def test_one_hour_slots_around_a_meeting(self, day_start, day_end, make_occurrence):
        """A 10:00-11:00 meeting blocks 09:30, 10:00 and 10:30 starts only."""
        busy = [make_occurrence(day_start.replace(hour=10), hours=1)]

        starts = _starts(find_free_slots(day_start, day_end, HOUR, busy))

        assert "09:00" in starts
        assert "09:30" not in starts
        assert "10:00" not in starts
        assert "10:30" not in starts
        assert "11:00" in starts
        assert starts[0] == "00:00"
        assert starts[-1] == "23:00"

    def test_every_slot_is_free_and_has_the_duration(self, day_start, day_end, make_occurrence):
        busy = [
            make_occurrence(day_start.replace(hour=9), hours=0.25),
            make_occurrence(day_start.replace(hour=13, minute=15), hours=2),
        ]

        slots = find_free_slots(day_start, day_end, timedelta(minutes=45), busy)

        assert slots
        for slot in slots:
            assert is_free(slot, busy)
            assert slot.end - slot.start == timedelta(minutes=45)

    def test_results_are_chronological(self, day_start, day_end):
        slots = find_free_slots(day_start, day_end, HOUR, [])

        assert slots == sorted(slots, key=lambda s: s.start)

    def test_adjacent_slots_are_not_merged(self, day_start):
        """Consecutive free steps each appear, even though they overlap."""
        slots = find_free_slots(day_start, day_start + 2 * HOUR, HOUR, [])

        assert _starts(slots) == ["00:00", "00:30", "01:00"]

    def test_last_slot_may_end_exactly_at_window_end(self, day_start):
        slots = find_free_slots(day_start, day_start + HOUR, HOUR, [])

        assert len(slots) == 1
        assert slots[0].end == day_start + HOUR

    def test_nothing_fits(self, day_start):
        """A duration longer than the window gives an empty list, not an error."""
        assert find_free_slots(day_start, day_start + HOUR, 2 * HOUR, []) == []

    def test_fully_booked_window(self, day_start, make_occurrence):
        busy = [make_occurrence(day_start, hours=8)]

        assert find_free_slots(day_start, day_start + 8 * HOUR, HOUR, busy) == []


class TestCompleteness:
    """With no events, the slot count follows from the window and duration."""

    @pytest.mark.parametrize(
        "window_hours, duration_minutes",
        [(8, 60), (8, 30), (24, 90), (3, 45), (1, 60)],
    )
    def test_slot_count_matches_step_arithmetic(self, window_hours, duration_minutes, day_start):
        window_end = day_start + timedelta(hours=window_hours)
        duration = timedelta(minutes=duration_minutes)

        slots = find_free_slots(day_start, window_end, duration, [])

        expected = (window_end - day_start - duration) // SLOT_STEP + 1
        assert len(slots) == expected


# ─────────────────────────────────────────────────────────────────────────────
# Business Hours
# ─────────────────────────────────────────────────────────────────────────────


class TestBusinessHours:
    """Tests for start-hour gating."""

    def test_only_starts_between_9_and_17(self, day_start, day_end):
        slots = find_free_slots(day_start, day_end, HOUR, [], business_hours_only=True)

        assert _starts(slots)[0] == "09:00"
        assert _starts(slots)[-1] == "16:30"
        assert len(slots) == 16
        assert all(9 <= slot.start.hour < 17 for slot in slots)

    def test_slot_may_run_past_closing(self, day_start, day_end):
        """Only the start hour is gated; 16:30-17:30 is accepted."""
        slots = find_free_slots(day_start, day_end, HOUR, [], business_hours_only=True)

        assert slots[-1].end == datetime(2026, 2, 5, 17, 30)

    def test_gate_is_off_by_default(self, day_start, day_end):
        slots = find_free_slots(day_start, day_end, HOUR, [])

        assert any(slot.start.hour < 9 for slot in slots)

    def test_business_hours_still_avoid_events(self, day_start, day_end, make_occurrence):
        busy = [make_occurrence(day_start.replace(hour=9), hours=7)]

        slots = find_free_slots(day_start, day_end, HOUR, busy, business_hours_only=True)

        assert _starts(slots) == ["16:00", "16:30"]

    def test_custom_hours_and_step(self, day_start, day_end):
        slots = find_free_slots(
            day_start,
            day_end,
            HOUR,
            [],
            business_hours_only=True,
            business_hours=(8, 10),
            step=timedelta(minutes=15),
        )

        assert _starts(slots) == [
            "08:00", "08:15", "08:30", "08:45", "09:00", "09:15", "09:30", "09:45",
        ]
