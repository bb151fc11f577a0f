"""Statistics and reporting over the entry log."""

from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

from carbon_tracker.domain.entries import Entry
from carbon_tracker.domain.stats import ExportSummary, HabitCounts, WindowStats
from carbon_tracker.services.entries import EntryLogRepository

WEEK_DAYS = 7
MONTH_DAYS = 30
DATE_FORMAT = "%Y-%m-%d"


@dataclass
class StatsService:
    """Service for windowed summaries of the entry log."""

    repository: EntryLogRepository
    timezone_name: str | None = None

    def today(self) -> date:
        """Return the current date in the configured timezone."""
        tz = ZoneInfo(self.timezone_name) if self.timezone_name else None
        return datetime.now(tz=tz).date()

    def get_window(self, n_days: int, today: date | None = None) -> WindowStats:
        """Return stats for the last ``n_days`` days, today included."""
        reference = today or self.today()
        return window_stats(self.repository.read_all(), reference, n_days)

    def get_week(self, today: date | None = None) -> WindowStats:
        """Return stats for the last 7 days."""
        return self.get_window(WEEK_DAYS, today)

    def get_month(self, today: date | None = None) -> WindowStats:
        """Return stats for the last 30 days."""
        return self.get_window(MONTH_DAYS, today)

    def get_habits(self, today: date | None = None) -> HabitCounts:
        """Return habit counters over the last 30 days."""
        return habit_counts(self.get_month(today))

    def get_history(self, limit: int = 7) -> list[Entry]:
        """Return the most recently appended entries first."""
        return recent_history(self.repository.read_all(), limit)

    def get_latest(self) -> Entry | None:
        """Return the last appended entry, if any."""
        history = recent_history(self.repository.read_all(), 1)
        return history[0] if history else None

    def get_export(self) -> ExportSummary:
        """Return every entry's footprint and the grand total."""
        return export_summary(self.repository.read_all())


def parse_entry_date(value: str) -> date | None:
    """Parse a stored ``YYYY-MM-DD`` date, returning None when malformed."""
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def window_stats(
    entries: list[Entry], reference_date: date, n_days: int
) -> WindowStats:
    """Aggregate entries dated within ``n_days`` days ending on ``reference_date``.

    The window is half-open: an entry ``n_days`` days old is excluded, as are
    future-dated entries and entries whose date does not parse. Rows sharing a
    date are counted separately.
    """
    sum_kg = 0.0
    days_with_entries = 0
    recycle_day_count = 0
    public_transport_total = 0
    saved_electricity_total = 0
    for entry in entries:
        entry_date = parse_entry_date(entry.date)
        if entry_date is None:
            continue
        age = (reference_date - entry_date).days
        if not 0 <= age < n_days:
            continue
        sum_kg += entry.footprint_kg
        days_with_entries += 1
        recycle_day_count += 1 if entry.recycled else 0
        public_transport_total += entry.public_transport_count
        saved_electricity_total += entry.saved_electricity_actions

    avg = sum_kg / days_with_entries if days_with_entries > 0 else 0.0
    return WindowStats(
        sum_kg=sum_kg,
        days_with_entries=days_with_entries,
        avg_kg_per_recorded_day=avg,
        recycle_day_count=recycle_day_count,
        public_transport_total=public_transport_total,
        saved_electricity_total=saved_electricity_total,
    )


def habit_counts(stats: WindowStats) -> HabitCounts:
    """Extract habit counters from window stats."""
    return HabitCounts(
        days=stats.days_with_entries,
        recycle_days=stats.recycle_day_count,
        public_transport_rides=stats.public_transport_total,
        saved_electricity_actions=stats.saved_electricity_total,
    )


def recent_history(entries: list[Entry], limit: int) -> list[Entry]:
    """Return the last ``limit`` entries, most recently appended first.

    A non-positive limit returns every entry.
    """
    selected = entries if limit <= 0 else entries[-limit:]
    return list(reversed(selected))


def export_summary(entries: list[Entry]) -> ExportSummary:
    """Return ``(date, footprint_kg)`` pairs in storage order and their sum."""
    lines = [(entry.date, entry.footprint_kg) for entry in entries]
    return ExportSummary(lines=lines, total_kg=sum((kg for _, kg in lines), 0.0))
