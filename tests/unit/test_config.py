"""Unit tests for configuration defaults and validation."""

from __future__ import annotations

from pathlib import Path

import platformdirs
import pytest
from pydantic import ValidationError

from nutrion.config import (
    _DEFAULT_DATA_DIR,
    _DEFAULT_DB_PATH,
    SearchSettings,
    Settings,
    StoreSettings,
)


class TestPlatformDefaults:
    """Verify config defaults use platformdirs instead of hardcoded Unix paths."""

    def test_default_data_dir_matches_platformdirs(self) -> None:
        expected = platformdirs.user_data_dir("nutrion")
        assert expected == _DEFAULT_DATA_DIR

    def test_default_db_path_under_data_dir(self) -> None:
        assert _DEFAULT_DB_PATH.startswith(_DEFAULT_DATA_DIR)
        assert _DEFAULT_DB_PATH.endswith("foods.db")

    def test_store_settings_uses_platform_default(self) -> None:
        assert StoreSettings().db_path == _DEFAULT_DB_PATH

    def test_search_defaults(self) -> None:
        settings = SearchSettings()
        assert settings.default_limit == 50
        assert settings.suggestion_limit == 10


class TestEnvironmentOverrides:
    def test_nested_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NUTRION__SEARCH__DEFAULT_LIMIT", "20")
        assert Settings().search.default_limit == 20

    def test_init_args_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NUTRION__LOGGING__LEVEL", "DEBUG")
        settings = Settings(logging={"level": "ERROR"})
        assert settings.logging.level == "ERROR"


class TestDataDir:
    def test_default_settings_keep_platform_db_path(self) -> None:
        assert Settings().store.db_path == _DEFAULT_DB_PATH

    def test_data_dir_moves_default_db_path(self, tmp_path: Path) -> None:
        settings = Settings(data_dir=str(tmp_path))
        assert settings.store.db_path == str(tmp_path / "foods.db")

    def test_data_dir_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("NUTRION__DATA_DIR", str(tmp_path))
        assert Settings().store.db_path == str(tmp_path / "foods.db")

    def test_explicit_db_path_wins(self, tmp_path: Path) -> None:
        explicit = str(tmp_path / "elsewhere" / "mine.db")
        settings = Settings(data_dir=str(tmp_path), store={"db_path": explicit})
        assert settings.store.db_path == explicit

    def test_other_store_fields_still_derive_db_path(self, tmp_path: Path) -> None:
        settings = Settings(data_dir=str(tmp_path), store={"seed_on_empty": False})
        assert settings.store.db_path == str(tmp_path / "foods.db")
        assert settings.store.seed_on_empty is False


class TestConfigValidation:
    def test_wrong_type_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            Settings(search={"default_limit": "not-a-number"})  # type: ignore[arg-type]

    def test_limit_below_one_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SearchSettings(default_limit=0)

    def test_unknown_top_level_field_raises_validation_error(self) -> None:
        """A YAML typo at the top level (e.g. 'serch:' instead of 'search:') is caught."""
        with pytest.raises(ValidationError):
            Settings(completely_unknown_field="oops")  # type: ignore[call-arg]

    def test_unknown_nested_field_raises_validation_error(self) -> None:
        """A typo like 'db_paht' is caught rather than silently using the default."""
        with pytest.raises(ValidationError):
            StoreSettings(db_paht="/intended/path/foods.db")  # type: ignore[call-arg]

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(logging={"level": "TRACE"})
