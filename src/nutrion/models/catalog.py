from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CatalogRecord(BaseModel):
    """Single food in the catalog. Nutritional values are per 100 g."""

    model_config = ConfigDict(frozen=True)

    name: str
    glycemic_index: float = Field(ge=0, le=100)
    carbs_per_100: float = Field(ge=0)
    kcal_per_100: float = Field(ge=0)
    density_g_per_ml: float | None = Field(default=None, gt=0)  # Liquids only

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        if len(v) > 200:
            raise ValueError("name must not exceed 200 characters")
        return v

    @property
    def is_liquid(self) -> bool:
        return self.density_g_per_ml is not None


class IndexStats(BaseModel):
    """Diagnostic snapshot of a NameSearchIndex.

    ``total_records`` sums every node's record list, so one record is
    counted once per node on its path. Treat it as a size metric, not a
    cardinality. ``max_records_per_node`` is the cap past which prefix
    lookups stop being exhaustive.
    """

    total_nodes: int
    total_records: int
    max_depth: int
    max_records_per_node: int
