"""Unit tests for nutrion.normalize."""

from __future__ import annotations

import pytest

from nutrion.normalize import normalize


class TestNormalize:
    def test_lowercases(self) -> None:
        assert normalize("PAN Blanco") == "pan blanco"

    def test_strips_accents(self) -> None:
        assert normalize("Plátano") == "platano"
        assert normalize("Crème brûlée") == "creme brulee"
        assert normalize("Ñoquis") == "noquis"

    def test_removes_punctuation(self) -> None:
        assert normalize("Piña, en almíbar!") == "pina en almibar"

    def test_keeps_digits(self) -> None:
        assert normalize("Yogur 0%") == "yogur 0"

    def test_trims_but_keeps_inner_whitespace(self) -> None:
        assert normalize("  pan  blanco  ") == "pan  blanco"

    def test_empty_string(self) -> None:
        assert normalize("") == ""

    def test_whitespace_only(self) -> None:
        assert normalize(" \t\n ") == ""

    def test_emoji_is_stripped(self) -> None:
        assert normalize("🍎 Manzana") == "manzana"
        assert normalize("🍎🍐") == ""

    def test_non_latin_scripts_are_stripped(self) -> None:
        assert normalize("Ψωμί bread") == "bread"
        assert normalize("寿司") == ""

    def test_dotted_capital_i(self) -> None:
        assert normalize("İstanbul") == "istanbul"

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "Plátano",
            "Crème brûlée",
            "🍎 Manzana 🍐",
            "Ψωμί bread",
            "İstanbul",
            "Straße",
            "pan blanco",
            "  Café  con  leche! ",
        ],
    )
    def test_idempotent(self, text: str) -> None:
        once = normalize(text)
        assert normalize(once) == once
