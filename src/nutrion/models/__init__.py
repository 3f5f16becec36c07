from __future__ import annotations

from nutrion.models.catalog import CatalogRecord, IndexStats
from nutrion.models.nutrition import FoodEntry, GaugeReading, NutritionalSummary, UserProfile
from nutrion.models.provider import ExternalFood, ExternalSearchPage

__all__ = [
    # catalog
    "CatalogRecord",
    "IndexStats",
    # nutrition
    "FoodEntry",
    "UserProfile",
    "NutritionalSummary",
    "GaugeReading",
    # provider
    "ExternalFood",
    "ExternalSearchPage",
]
