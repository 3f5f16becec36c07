from __future__ import annotations

from pydantic import BaseModel


class ExternalFood(BaseModel):
    """A product returned by the external food database (values per 100 g)."""

    code: str
    name: str
    brand: str | None = None
    kcal: float = 0.0
    carbs: float = 0.0
    sugars: float | None = None
    fat: float | None = None
    protein: float | None = None
    fiber: float | None = None
    categories: str | None = None
    image_url: str | None = None


class ExternalSearchPage(BaseModel):
    foods: list[ExternalFood]
    total: int
    page: int
