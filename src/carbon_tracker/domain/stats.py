"""Domain models for statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WindowStats:
    """Aggregates over a window of days ending on a reference date."""

    sum_kg: float
    days_with_entries: int
    avg_kg_per_recorded_day: float
    recycle_day_count: int
    public_transport_total: int
    saved_electricity_total: int


@dataclass(frozen=True)
class HabitCounts:
    """Habit counters for a window."""

    days: int
    recycle_days: int
    public_transport_rides: int
    saved_electricity_actions: int


@dataclass(frozen=True)
class ExportSummary:
    """Per-entry footprints in storage order with their total."""

    lines: list[tuple[str, float]]
    total_kg: float
