"""Slotwise Test Suite

Test organization:
- unit/: Unit tests for individual modules
  - engine/: Scheduling engine (conflicts, recurrence, free slots,
    optimal slot, analytics)
  - sources/: Event source adapters
  - service/: Scheduler service, date parser, config, CLI

Running tests:
    # All tests
    uv run pytest

    # Specific area
    uv run pytest tests/unit/engine/

    # With coverage
    uv run pytest --cov=slotwise --cov-report=term-missing
"""
