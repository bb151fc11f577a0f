"""Domain models and footprint math for daily entries."""

import math
from dataclasses import dataclass, fields
from datetime import date

from carbon_tracker.domain.errors import InvalidInputError

CAR_KG_PER_KM = 0.21
BUS_KG_PER_KM = 0.05
TRAIN_KG_PER_KM = 0.04
FLIGHT_KG_PER_KM = 0.15
ELECTRICITY_KG_PER_KWH = 0.85
PLASTIC_KG_PER_KG = 6.00
MEAT_MEAL_KG = 5.0
VEG_MEAL_KG = 1.5
FISH_MEAL_KG = 3.0

CAR_LABEL = "Car travel"
TRANSIT_LABEL = "Public transport"
FLIGHTS_LABEL = "Flights"
ELECTRICITY_LABEL = "Electricity"
PLASTIC_LABEL = "Plastic"
FOOD_LABEL = "Food (meals)"

ENTRY_FIELDS = (
    "date",
    "car_km",
    "bus_km",
    "train_km",
    "flight_km",
    "electricity_kwh",
    "plastic_kg",
    "meat_meals",
    "veg_meals",
    "fish_meals",
    "recycled",
    "public_transport_count",
    "saved_electricity_actions",
    "footprint_kg",
)


@dataclass(frozen=True)
class DailyActivity:
    """Validated user input for one day of activity."""

    day: date
    car_km: float = 0.0
    bus_km: float = 0.0
    train_km: float = 0.0
    flight_km: float = 0.0
    electricity_kwh: float = 0.0
    plastic_kg: float = 0.0
    meat_meals: int = 0
    veg_meals: int = 0
    fish_meals: int = 0
    recycled: bool = False
    public_transport_count: int = 0
    saved_electricity_actions: int = 0

    def __post_init__(self) -> None:
        for item in fields(self):
            if item.name in {"day", "recycled"}:
                continue
            value = getattr(self, item.name)
            if not math.isfinite(value) or value < 0:
                raise InvalidInputError(item.name, value)


@dataclass(frozen=True)
class Entry:
    """A persisted day of activity with its stored footprint.

    Entries read back from storage are reconstructed as-is, so the date is
    kept as text and values are not re-validated.
    """

    date: str
    car_km: float = 0.0
    bus_km: float = 0.0
    train_km: float = 0.0
    flight_km: float = 0.0
    electricity_kwh: float = 0.0
    plastic_kg: float = 0.0
    meat_meals: int = 0
    veg_meals: int = 0
    fish_meals: int = 0
    recycled: bool = False
    public_transport_count: int = 0
    saved_electricity_actions: int = 0
    footprint_kg: float = 0.0


@dataclass(frozen=True)
class FootprintBreakdown:
    """Per-category emissions in kg CO2e."""

    car: float
    bus: float
    train: float
    flight: float
    electricity: float
    plastic: float
    food: float

    @property
    def total(self) -> float:
        return (
            self.car
            + self.bus
            + self.train
            + self.flight
            + self.electricity
            + self.plastic
            + self.food
        )

    def buckets(self) -> list[tuple[str, float]]:
        """Return display buckets in their fixed priority order."""
        return [
            (CAR_LABEL, self.car),
            (TRANSIT_LABEL, self.bus + self.train),
            (FLIGHTS_LABEL, self.flight),
            (ELECTRICITY_LABEL, self.electricity),
            (PLASTIC_LABEL, self.plastic),
            (FOOD_LABEL, self.food),
        ]


def compute_footprint(
    activity: DailyActivity | Entry,
) -> tuple[float, FootprintBreakdown]:
    """Compute the daily footprint and its per-category breakdown."""
    breakdown = FootprintBreakdown(
        car=activity.car_km * CAR_KG_PER_KM,
        bus=activity.bus_km * BUS_KG_PER_KM,
        train=activity.train_km * TRAIN_KG_PER_KM,
        flight=activity.flight_km * FLIGHT_KG_PER_KM,
        electricity=activity.electricity_kwh * ELECTRICITY_KG_PER_KWH,
        plastic=activity.plastic_kg * PLASTIC_KG_PER_KG,
        food=(
            activity.meat_meals * MEAT_MEAL_KG
            + activity.veg_meals * VEG_MEAL_KG
            + activity.fish_meals * FISH_MEAL_KG
        ),
    )
    return breakdown.total, breakdown


def top_contributor(entry: DailyActivity | Entry) -> str:
    """Return the label of the largest emission bucket.

    Ties go to the bucket listed first.
    """
    _, breakdown = compute_footprint(entry)
    buckets = breakdown.buckets()
    best_label, best_value = buckets[0]
    for label, value in buckets[1:]:
        if value > best_value:
            best_label, best_value = label, value
    return best_label


def build_entry(activity: DailyActivity) -> Entry:
    """Create the persisted entry for an activity, computing its footprint once."""
    footprint_kg, _ = compute_footprint(activity)
    return Entry(
        date=activity.day.isoformat(),
        car_km=activity.car_km,
        bus_km=activity.bus_km,
        train_km=activity.train_km,
        flight_km=activity.flight_km,
        electricity_kwh=activity.electricity_kwh,
        plastic_kg=activity.plastic_kg,
        meat_meals=activity.meat_meals,
        veg_meals=activity.veg_meals,
        fish_meals=activity.fish_meals,
        recycled=activity.recycled,
        public_transport_count=activity.public_transport_count,
        saved_electricity_actions=activity.saved_electricity_actions,
        footprint_kg=footprint_kg,
    )
