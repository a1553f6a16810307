"""Slotwise: calendar scheduling engine

Expands recurring events, detects conflicts, searches for free time and
summarizes schedules. Every call recomputes from the events handed to it.

Components:
    models.py: Data models (TimeSlot, Occurrence, RecurringEventDefinition)
    engine/: Pure scheduling functions (conflicts, recurrence, free slots,
        optimal slot, analytics)
    sources/: Event source adapters (in-memory, JSON file)
    date_parser.py: Natural language date parsing adapter
    scheduler.py: Caller-facing scheduling operations returning result dicts
    config_models.py: Validated configuration (args/scheduling.yaml)
    cli.py: `slotwise` command line interface
"""

from pathlib import Path


__version__ = "0.3.0"

# Path constants
PROJECT_ROOT = Path(__file__).parent.parent
ARGS_DIR = PROJECT_ROOT / "args"
CONFIG_PATH = ARGS_DIR / "scheduling.yaml"

__all__ = [
    "ARGS_DIR",
    "CONFIG_PATH",
    "PROJECT_ROOT",
    "__version__",
]
