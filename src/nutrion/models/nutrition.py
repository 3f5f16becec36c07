from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class FoodEntry(BaseModel):
    """A catalog food scaled to the quantity actually eaten."""

    name: str
    quantity: float  # grams, or ml for liquids
    glycemic_index: float
    carbs_g: float
    glycemic_load: float
    kcal: float


class UserProfile(BaseModel):
    name: str
    sex: Literal["M", "F"]
    age: int = Field(gt=0)
    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)


class NutritionalSummary(BaseModel):
    total_glycemic_load: float
    total_kcal: float
    total_carbs: float
    weighted_glycemic_index: float
    ire: float  # Estimated response index: load per kg of body weight
    vg: float  # Glycemic value: load per 100 kcal


class GaugeReading(BaseModel):
    value: float
    max: float
    percentage: float
    level: Literal["low", "medium", "high"]
