"""Shared fixtures: catalog records and a populated name index."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from nutrion.models.catalog import CatalogRecord
from nutrion.search_index import NameSearchIndex


def _make_record(
    name: str,
    glycemic_index: float = 50,
    carbs_per_100: float = 20,
    kcal_per_100: float = 100,
    density_g_per_ml: float | None = None,
) -> CatalogRecord:
    return CatalogRecord(
        name=name,
        glycemic_index=glycemic_index,
        carbs_per_100=carbs_per_100,
        kcal_per_100=kcal_per_100,
        density_g_per_ml=density_g_per_ml,
    )


@pytest.fixture()
def make_record() -> Callable[..., CatalogRecord]:
    return _make_record


@pytest.fixture()
def sample_records() -> list[CatalogRecord]:
    return [
        _make_record("Pan blanco", 75, 49, 265),
        _make_record("Pan integral", 65, 41, 247),
        _make_record("Patata cocida", 78, 17, 87),
        _make_record("Manzana", 36, 14, 52),
        _make_record("Mermelada de manzana", 55, 65, 250),
        _make_record("Plátano", 51, 23, 96),
        _make_record("Leche entera", 41, 5, 61, density_g_per_ml=1.03),
    ]


@pytest.fixture()
def index(sample_records: list[CatalogRecord]) -> NameSearchIndex:
    idx = NameSearchIndex()
    for record in sample_records:
        idx.insert(record.name, record)
    return idx
