#!/usr/bin/env python3
"""
Slotwise Command Line Interface

Main entry point for the `slotwise` command. Every subcommand reads event
definitions from a JSON file and prints a JSON result.

Usage:
    slotwise free --events events.json --start "tomorrow 9am" --end "tomorrow 6pm" --duration 30
    slotwise conflicts --events events.json --start "2026-02-05T10:00" --end "2026-02-05T11:00"
    slotwise suggest --events events.json --start "monday" --end "friday" --duration 60 --prefer 9 10
    slotwise analyze --events events.json --period this_week
    slotwise calendars --events events.json
    slotwise --version
"""

import argparse
import json
import sys

from slotwise import __version__
from slotwise.date_parser import COMMON_PERIODS, get_common_date_range
from slotwise.errors import SlotwiseError
from slotwise.logging_config import setup_logging
from slotwise.sources import JsonFileEventSource


def _print_result(result: dict) -> int:
    print(json.dumps(result, indent=2, default=str))
    return 0 if result.get("success") else 1


def cmd_version(args):
    """Print version information."""
    print(f"slotwise {__version__}")


def cmd_free(args):
    """Handle free subcommand."""
    from slotwise.scheduler import find_free_time

    return _print_result(find_free_time(
        JsonFileEventSource(args.events),
        args.start,
        args.end,
        duration_minutes=args.duration,
        business_hours_only=args.business_hours,
    ))


def cmd_conflicts(args):
    """Handle conflicts subcommand."""
    from slotwise.scheduler import check_conflicts

    return _print_result(check_conflicts(
        JsonFileEventSource(args.events),
        args.start,
        args.end,
        calendar=args.calendar,
    ))


def cmd_suggest(args):
    """Handle suggest subcommand."""
    from slotwise.scheduler import suggest_optimal_time

    return _print_result(suggest_optimal_time(
        JsonFileEventSource(args.events),
        args.start,
        args.end,
        duration_minutes=args.duration,
        preferred_hours=args.prefer,
    ))


def cmd_analyze(args):
    """Handle analyze subcommand.

    Either --period or both --start and --end must be given.
    """
    from slotwise.scheduler import analyze_schedule

    if args.period:
        start, end = get_common_date_range(args.period)
    elif args.start and args.end:
        start, end = args.start, args.end
    else:
        print("Error: --period or both --start and --end are required for analyze", file=sys.stderr)
        return 1

    return _print_result(analyze_schedule(
        JsonFileEventSource(args.events),
        start,
        end,
        calendar=args.calendar,
    ))


def cmd_calendars(args):
    """Handle calendars subcommand."""
    calendars = JsonFileEventSource(args.events).list_calendars()
    return _print_result({"success": True, "calendars": calendars, "total": len(calendars)})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slotwise",
        description="Slotwise - free time search and schedule analysis",
    )
    parser.add_argument(
        "--version", "-V", action="store_true", help="Show version and exit"
    )
    parser.add_argument(
        "--log-level", default=None, help="Log level (default: $SLOTWISE_LOG_LEVEL or INFO)"
    )

    # Shared by every subcommand
    events_parent = argparse.ArgumentParser(add_help=False)
    events_parent.add_argument(
        "--events", required=True, help="Path to the JSON events file"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # free
    free_parser = subparsers.add_parser(
        "free", parents=[events_parent], help="Find free time slots"
    )
    free_parser.add_argument("--start", required=True, help="Search window start")
    free_parser.add_argument("--end", required=True, help="Search window end")
    free_parser.add_argument(
        "--duration", type=int, default=30, help="Slot length in minutes (default: 30)"
    )
    free_parser.add_argument(
        "--business-hours", action="store_true", help="Only slots starting 9:00-17:00"
    )
    free_parser.set_defaults(func=cmd_free)

    # conflicts
    conflicts_parser = subparsers.add_parser(
        "conflicts", parents=[events_parent], help="Check a time slot for conflicts"
    )
    conflicts_parser.add_argument("--start", required=True, help="Slot start")
    conflicts_parser.add_argument("--end", default=None, help="Slot end (default: start + 1 hour)")
    conflicts_parser.add_argument("--calendar", default=None, help="Only check this calendar")
    conflicts_parser.set_defaults(func=cmd_conflicts)

    # suggest
    suggest_parser = subparsers.add_parser(
        "suggest", parents=[events_parent], help="Suggest the best meeting time"
    )
    suggest_parser.add_argument("--start", required=True, help="Search window start")
    suggest_parser.add_argument("--end", required=True, help="Search window end")
    suggest_parser.add_argument(
        "--duration", type=int, required=True, help="Meeting length in minutes"
    )
    suggest_parser.add_argument(
        "--prefer", type=int, nargs="*", default=None, metavar="HOUR",
        help="Preferred start hours, e.g. --prefer 9 10 11",
    )
    suggest_parser.set_defaults(func=cmd_suggest)

    # analyze
    analyze_parser = subparsers.add_parser(
        "analyze", parents=[events_parent], help="Analyze schedule density and busy time"
    )
    analyze_parser.add_argument("--start", default=None, help="Period start")
    analyze_parser.add_argument("--end", default=None, help="Period end")
    analyze_parser.add_argument(
        "--period", choices=COMMON_PERIODS, default=None, help="Named period instead of --start/--end"
    )
    analyze_parser.add_argument("--calendar", default=None, help="Only analyze this calendar")
    analyze_parser.set_defaults(func=cmd_analyze)

    # calendars
    calendars_parser = subparsers.add_parser(
        "calendars", parents=[events_parent], help="List calendars in the events file"
    )
    calendars_parser.set_defaults(func=cmd_calendars)

    return parser


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Handle --version at top level
    if args.version:
        cmd_version(args)
        return

    # If no command given, show help
    if not args.command:
        parser.print_help()
        return

    setup_logging(level=args.log_level)

    try:
        result = args.func(args)
    except SlotwiseError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    # Commands may return an exit code
    if isinstance(result, int) and result != 0:
        sys.exit(result)


if __name__ == "__main__":
    main()
