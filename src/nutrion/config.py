"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (NUTRION__SEARCH__DEFAULT_LIMIT=20)
  2. nutrion.yaml           (searched in cwd, then the platform config dir)
  3. Hardcoded defaults

The config file is optional — all fields have sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_DEFAULT_DATA_DIR = platformdirs.user_data_dir("nutrion")
_DEFAULT_DB_PATH = str(Path(_DEFAULT_DATA_DIR) / "foods.db")


def _find_config_file() -> str | None:
    """Return the path of the first nutrion.yaml found, or None."""
    candidates = [
        Path("nutrion.yaml"),
        Path(platformdirs.user_config_dir("nutrion")) / "nutrion.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class SearchSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default_limit: int = Field(default=50, ge=1)
    suggestion_limit: int = Field(default=10, ge=1)


class StoreSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    db_path: str = _DEFAULT_DB_PATH
    seed_on_empty: bool = True


class ProviderSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_url: str = "https://world.openfoodfacts.org"
    user_agent: str = "Nutrion/0.1"
    timeout_seconds: float = Field(default=10.0, gt=0)
    page_size: int = Field(default=20, ge=1, le=100)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: NUTRION__STORE__DB_PATH=/tmp/foods.db
        env_prefix="NUTRION__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    data_dir: str = _DEFAULT_DATA_DIR
    search: SearchSettings = SearchSettings()
    store: StoreSettings = StoreSettings()
    provider: ProviderSettings = ProviderSettings()
    logging: LoggingSettings = LoggingSettings()

    @model_validator(mode="after")
    def _db_path_under_data_dir(self) -> Settings:
        # An explicit store.db_path wins; otherwise the database follows data_dir
        if "db_path" not in self.store.model_fields_set:
            db_path = str(Path(self.data_dir).expanduser() / "foods.db")
            self.store = self.store.model_copy(update={"db_path": db_path})
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
