"""Glycemic load arithmetic over catalog foods.

Pure functions, no state. Quantities are grams, or millilitres for foods
that carry a density.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from nutrion.models.catalog import CatalogRecord
from nutrion.models.nutrition import FoodEntry, GaugeReading, NutritionalSummary, UserProfile

DEFAULT_WEIGHT_KG = 70.0

# (low upper bound, medium upper bound, gauge max)
_GAUGE_THRESHOLDS: dict[str, tuple[float, float, float]] = {
    "cg": (20, 50, 100),
    "ire": (0.7, 1.2, 2),
    "vg": (10, 25, 50),
}


def calculate_food_entry(record: CatalogRecord, quantity: float) -> FoodEntry:
    grams = quantity * record.density_g_per_ml if record.is_liquid else quantity

    carbs_g = grams * record.carbs_per_100 / 100
    glycemic_load = record.glycemic_index * carbs_g / 100
    kcal = grams * record.kcal_per_100 / 100

    return FoodEntry(
        name=record.name,
        quantity=quantity,
        glycemic_index=record.glycemic_index,
        carbs_g=round(carbs_g, 2),
        glycemic_load=round(glycemic_load, 2),
        kcal=round(kcal, 1),
    )


def calculate_summary(
    entries: Iterable[FoodEntry], profile: UserProfile | None = None
) -> NutritionalSummary:
    total_load = 0.0
    total_kcal = 0.0
    total_carbs = 0.0
    gi_numerator = 0.0

    for entry in entries:
        total_load += entry.glycemic_load
        total_kcal += entry.kcal
        total_carbs += entry.carbs_g
        gi_numerator += entry.glycemic_index * entry.carbs_g

    weighted_gi = gi_numerator / total_carbs if total_carbs > 0 else 0.0
    weight = profile.weight_kg if profile is not None else DEFAULT_WEIGHT_KG
    ire = total_load / weight
    vg = total_load / total_kcal * 100 if total_kcal > 0 else 0.0

    return NutritionalSummary(
        total_glycemic_load=round(total_load, 2),
        total_kcal=round(total_kcal),
        total_carbs=round(total_carbs, 2),
        weighted_glycemic_index=round(weighted_gi, 1),
        ire=round(ire, 2),
        vg=round(vg, 2),
    )


def gauge(value: float, kind: Literal["cg", "ire", "vg"]) -> GaugeReading:
    """Classify a summary metric as low/medium/high and scale it for display."""
    low, medium, maximum = _GAUGE_THRESHOLDS[kind]
    if value < low:
        level = "low"
    elif value < medium:
        level = "medium"
    else:
        level = "high"
    return GaugeReading(
        value=value,
        max=maximum,
        percentage=min(100.0, value / maximum * 100),
        level=level,
    )


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    if weight_kg <= 0 or height_cm <= 0:
        return 0.0
    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 1)


def calculate_bmr(profile: UserProfile) -> int:
    """Basal metabolic rate, Harris-Benedict (revised)."""
    if profile.sex == "M":
        bmr = 88.362 + 13.397 * profile.weight_kg + 4.799 * profile.height_cm - 5.677 * profile.age
    else:
        bmr = 447.593 + 9.247 * profile.weight_kg + 3.098 * profile.height_cm - 4.330 * profile.age
    return round(bmr)
