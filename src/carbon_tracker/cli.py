"""Command-line interface for the carbon tracker."""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from carbon_tracker.app_logging import configure_logging
from carbon_tracker.config import Settings
from carbon_tracker.containers import AppContainer, build_container
from carbon_tracker.domain.entries import DailyActivity, Entry, top_contributor
from carbon_tracker.domain.errors import InvalidInputError, LogStorageError
from carbon_tracker.domain.stats import ExportSummary, HabitCounts, WindowStats
from carbon_tracker.services.insights import render_history_bars, suggestions_for

APP_TITLE = "Carbon Tracker"

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="carbon-tracker",
        description=f"{APP_TITLE}: log daily activities and review your footprint.",
    )
    parser.add_argument("--log-path", type=Path, help="Entry log file to use")
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("init", help="Create the entry log if it is missing")

    add = commands.add_parser("add", help="Record a day of activity")
    add.add_argument(
        "--date", type=date.fromisoformat, help="YYYY-MM-DD, default today"
    )
    add.add_argument("--car-km", type=float, default=0.0)
    add.add_argument("--bus-km", type=float, default=0.0)
    add.add_argument("--train-km", type=float, default=0.0)
    add.add_argument("--flight-km", type=float, default=0.0)
    add.add_argument("--electricity-kwh", type=float, default=0.0)
    add.add_argument("--plastic-kg", type=float, default=0.0)
    add.add_argument("--meat-meals", type=int, default=0)
    add.add_argument("--veg-meals", type=int, default=0)
    add.add_argument("--fish-meals", type=int, default=0)
    add.add_argument("--recycled", action="store_true")
    add.add_argument("--public-transport-count", type=int, default=0)
    add.add_argument("--saved-electricity-actions", type=int, default=0)

    summary = commands.add_parser("summary", help="Show weekly and monthly totals")
    summary.add_argument("--days", type=int, help="Custom window length in days")

    history = commands.add_parser("history", help="Show recent entries")
    history.add_argument("--limit", type=int, help="Entries to show, 0 for all")
    history.add_argument("--bars", action="store_true", help="Draw ASCII bars")

    commands.add_parser("habits", help="Show habit counts for the last 30 days")
    commands.add_parser("tips", help="Show suggestions for the latest entry")

    export = commands.add_parser("export", help="Write a text report")
    export.add_argument("destination", help="Report file to write")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return an exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        print(APP_TITLE)
        parser.print_help()
        return 0

    try:
        settings = Settings(log_path=args.log_path) if args.log_path else Settings()
    except ValidationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1
    configure_logging(settings.log_level)
    container = build_container(settings)
    try:
        return _dispatch(container, args)
    except (InvalidInputError, LogStorageError) as exc:
        _logger.debug("Command failed: command=%s", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _dispatch(  # noqa: PLR0911
    container: AppContainer, args: argparse.Namespace
) -> int:
    if args.command == "init":
        container.repository.ensure_initialized()
        print(f"Entry log ready at {container.settings.log_path}")
        return 0
    if args.command == "add":
        entry = container.entry_service.add_entry(_activity_from_args(container, args))
        print(_format_entry_saved(entry))
        return 0
    if args.command == "summary":
        return _show_summary(container, args.days)
    if args.command == "history":
        limit = args.limit
        if limit is None:
            limit = container.settings.history_limit
        history = container.stats_service.get_history(limit)
        if args.bars:
            print(_format_history_bars(history, container.settings.bar_width))
        else:
            print(_format_history(history))
        return 0
    if args.command == "habits":
        print(_format_habits(container.stats_service.get_habits()))
        return 0
    if args.command == "tips":
        latest = container.stats_service.get_latest()
        if latest is None:
            print("No entries logged yet.")
            return 0
        print(_format_tips(latest))
        return 0
    if args.command == "export":
        summary = container.report_service.export(args.destination)
        print(_format_export(args.destination, summary))
        return 0
    return 2


def _activity_from_args(
    container: AppContainer, args: argparse.Namespace
) -> DailyActivity:
    return DailyActivity(
        day=args.date or container.stats_service.today(),
        car_km=args.car_km,
        bus_km=args.bus_km,
        train_km=args.train_km,
        flight_km=args.flight_km,
        electricity_kwh=args.electricity_kwh,
        plastic_kg=args.plastic_kg,
        meat_meals=args.meat_meals,
        veg_meals=args.veg_meals,
        fish_meals=args.fish_meals,
        recycled=args.recycled,
        public_transport_count=args.public_transport_count,
        saved_electricity_actions=args.saved_electricity_actions,
    )


def _show_summary(container: AppContainer, days: int | None) -> int:
    if not container.entry_service.is_initialized():
        print("No entry log yet. Run 'carbon-tracker init' or add an entry.")
        return 0
    stats = container.stats_service
    if days is not None:
        print(_format_window(f"Last {days} days", stats.get_window(days)))
        return 0
    print(_format_window("Last 7 days", stats.get_week()))
    print(_format_window("Last 30 days", stats.get_month()))
    return 0


def _format_entry_saved(entry: Entry) -> str:
    return (
        f"Entry saved for {entry.date}: {entry.footprint_kg:.2f} kg CO2\n"
        f"Top contributor: {top_contributor(entry)}"
    )


def _format_window(label: str, stats: WindowStats) -> str:
    """Format windowed totals and averages."""
    return "\n".join(
        [
            f"{label}:",
            f"Total: {stats.sum_kg:.2f} kg CO2",
            f"Days recorded: {stats.days_with_entries}",
            f"Average per recorded day: {stats.avg_kg_per_recorded_day:.2f} kg CO2",
        ]
    )


def _format_history(history: list[Entry]) -> str:
    """Format recent entries, newest first."""
    if not history:
        return "No entries logged yet."
    lines = ["Recent entries:"]
    for entry in history:
        lines.append(f"- {entry.date}: {entry.footprint_kg:.2f} kg CO2")
    return "\n".join(lines)


def _format_history_bars(history: list[Entry], width: int) -> str:
    if not history:
        return "No entries logged yet."
    return "\n".join(render_history_bars(history, width))


def _format_habits(habits: HabitCounts) -> str:
    """Format habit counters for the last 30 days."""
    return "\n".join(
        [
            "Habits over the last 30 days:",
            f"Recycled on {habits.recycle_days} of {habits.days} recorded days",
            f"Public transport rides: {habits.public_transport_rides}",
            f"Electricity-saving actions: {habits.saved_electricity_actions}",
        ]
    )


def _format_tips(entry: Entry) -> str:
    lines = [f"Suggestions for {entry.date}:"]
    lines.extend(f"- {tip}" for tip in suggestions_for(entry))
    return "\n".join(lines)


def _format_export(destination: str, summary: ExportSummary) -> str:
    return (
        f"Exported {len(summary.lines)} entries to {destination} "
        f"(total {summary.total_kg:.2f} kg CO2)"
    )


if __name__ == "__main__":
    raise SystemExit(main())
