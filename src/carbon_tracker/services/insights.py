"""Suggestions and ASCII charts for entries."""

from carbon_tracker.domain.entries import (
    CAR_LABEL,
    ELECTRICITY_LABEL,
    FLIGHTS_LABEL,
    FOOD_LABEL,
    PLASTIC_LABEL,
    TRANSIT_LABEL,
    Entry,
    top_contributor,
)

BAR_CHAR = "#"
LONG_CAR_TRIP_KM = 20.0
HIGH_ELECTRICITY_KWH = 10.0
HIGH_PLASTIC_KG = 0.5
MEAT_HEAVY_MEALS = 2

CONTRIBUTOR_TIPS = {
    CAR_LABEL: "Car travel was your largest source today. Try car-pooling or "
    "combining errands into one trip.",
    TRANSIT_LABEL: "Public transport led today, which is already a good choice. "
    "Walking or cycling short legs cuts it further.",
    FLIGHTS_LABEL: "Flights dominated today. Consider trains for short routes "
    "and offsetting unavoidable trips.",
    ELECTRICITY_LABEL: "Electricity was your largest source. Switch off standby "
    "devices and prefer efficient appliances.",
    PLASTIC_LABEL: "Plastic was your largest source. Carry a reusable bag and "
    "bottle.",
    FOOD_LABEL: "Meals were your largest source. Swapping one meat meal for a "
    "vegetarian one saves about 3.5 kg CO2.",
}


def render_bar(value: float, max_value: float, width: int = 40) -> str:
    """Return a bar of ``#`` scaled so ``max_value`` fills ``width``."""
    if max_value <= 0 or value <= 0 or width <= 0:
        return ""
    length = round(value / max_value * width)
    return BAR_CHAR * min(length, width)


def render_history_bars(entries: list[Entry], width: int = 40) -> list[str]:
    """Render one ``date | bar | value`` line per entry."""
    if not entries:
        return []
    max_value = max(entry.footprint_kg for entry in entries)
    date_width = max(len(entry.date) for entry in entries)
    return [
        f"{entry.date:<{date_width}} | "
        f"{render_bar(entry.footprint_kg, max_value, width):<{width}} | "
        f"{entry.footprint_kg:.2f} kg"
        for entry in entries
    ]


def suggestions_for(entry: Entry) -> list[str]:
    """Return textual tips for a day's entry."""
    tips = []
    if entry.car_km > LONG_CAR_TRIP_KM:
        tips.append(
            f"You drove {entry.car_km:.1f} km. Public transport for part of the "
            "trip would lower your footprint."
        )
    if entry.flight_km > 0:
        tips.append("Flights are carbon intensive. Prefer rail where it is an option.")
    if entry.electricity_kwh > HIGH_ELECTRICITY_KWH:
        tips.append(
            f"Electricity use of {entry.electricity_kwh:.1f} kWh is high. "
            "Unplug idle chargers and use LED lighting."
        )
    if entry.plastic_kg > HIGH_PLASTIC_KG:
        tips.append("Reduce single-use plastic by buying loose produce.")
    if entry.meat_meals >= MEAT_HEAVY_MEALS:
        tips.append("Try a meat-free day. Vegetarian meals emit far less.")
    if not entry.recycled:
        tips.append("Remember to recycle today.")
    if entry.footprint_kg > 0:
        tips.append(CONTRIBUTOR_TIPS[top_contributor(entry)])
    if not tips:
        tips.append("Great job! Your footprint today is already low.")
    return tips
