"""Unit tests for nutrion.nutrition."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from nutrion.models.nutrition import UserProfile
from nutrion.nutrition import (
    calculate_bmi,
    calculate_bmr,
    calculate_food_entry,
    calculate_summary,
    gauge,
)

if TYPE_CHECKING:
    from collections.abc import Callable


def _profile(**overrides) -> UserProfile:
    values = {"name": "Ana", "sex": "F", "age": 30, "weight_kg": 60, "height_cm": 165}
    values.update(overrides)
    return UserProfile(**values)


class TestFoodEntry:
    def test_solid_food(self, make_record: Callable) -> None:
        manzana = make_record("Manzana", 36, 14, 52)
        entry = calculate_food_entry(manzana, 150)
        assert entry.name == "Manzana"
        assert entry.quantity == 150
        assert entry.carbs_g == pytest.approx(21.0)
        assert entry.glycemic_load == pytest.approx(7.56)
        assert entry.kcal == pytest.approx(78.0)

    def test_liquid_uses_density(self, make_record: Callable) -> None:
        leche = make_record("Leche entera", 41, 5, 61, density_g_per_ml=1.03)
        entry = calculate_food_entry(leche, 200)
        assert entry.carbs_g == pytest.approx(10.3)
        assert entry.glycemic_load == pytest.approx(4.22)
        assert entry.kcal == pytest.approx(125.7)

    def test_zero_gi_food_has_no_load(self, make_record: Callable) -> None:
        pollo = make_record("Pollo", 0, 0, 165)
        entry = calculate_food_entry(pollo, 120)
        assert entry.glycemic_load == 0
        assert entry.kcal == pytest.approx(198.0)


class TestSummary:
    def test_totals_and_weighted_gi(self, make_record: Callable) -> None:
        entries = [
            calculate_food_entry(make_record("Manzana", 36, 14, 52), 150),
            calculate_food_entry(make_record("Pan", 70, 50, 250), 40),
        ]
        summary = calculate_summary(entries, _profile(weight_kg=60))

        # Pan: 20 g carbs, load 14.0, 100 kcal
        assert summary.total_carbs == pytest.approx(41.0)
        assert summary.total_glycemic_load == pytest.approx(21.56)
        assert summary.total_kcal == 178
        assert summary.weighted_glycemic_index == pytest.approx(52.6)
        assert summary.ire == pytest.approx(0.36)
        assert summary.vg == pytest.approx(12.11)

    def test_default_weight_without_profile(self, make_record: Callable) -> None:
        entries = [calculate_food_entry(make_record("Pan", 70, 50, 250), 100)]
        summary = calculate_summary(entries)
        # load 35.0 over the 70 kg default
        assert summary.ire == pytest.approx(0.5)

    def test_empty_meal(self) -> None:
        summary = calculate_summary([])
        assert summary.total_glycemic_load == 0
        assert summary.weighted_glycemic_index == 0
        assert summary.vg == 0


class TestGauge:
    @pytest.mark.parametrize(
        ("value", "kind", "level"),
        [
            (10, "cg", "low"),
            (30, "cg", "medium"),
            (60, "cg", "high"),
            (0.5, "ire", "low"),
            (1.0, "ire", "medium"),
            (1.5, "ire", "high"),
            (5, "vg", "low"),
            (15, "vg", "medium"),
            (30, "vg", "high"),
        ],
    )
    def test_levels(self, value: float, kind: str, level: str) -> None:
        assert gauge(value, kind).level == level  # type: ignore[arg-type]

    def test_percentage_capped(self) -> None:
        reading = gauge(3.0, "ire")
        assert reading.max == 2
        assert reading.percentage == 100

    def test_percentage_scaled(self) -> None:
        assert gauge(25, "cg").percentage == pytest.approx(25.0)


class TestBodyMetrics:
    def test_bmi(self) -> None:
        assert calculate_bmi(70, 175) == pytest.approx(22.9)

    def test_bmi_invalid_inputs(self) -> None:
        assert calculate_bmi(0, 175) == 0
        assert calculate_bmi(70, 0) == 0

    def test_bmr_male(self) -> None:
        profile = _profile(sex="M", age=30, weight_kg=70, height_cm=175)
        assert calculate_bmr(profile) == 1696

    def test_bmr_female(self) -> None:
        profile = _profile(sex="F", age=30, weight_kg=60, height_cm=165)
        # 447.593 + 554.82 + 511.17 - 129.9
        assert calculate_bmr(profile) == 1384
