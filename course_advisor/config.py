# === config.py ===
import codecs
import json
import os

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_ENV = "COURSE_ADVISOR_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    pass


class AdvisorConfig(BaseSettings):
    """Loader and menu settings.

    Each field can also come from a COURSE_ADVISOR_<FIELD> environment
    variable; values from a config file take precedence.
    """

    model_config = SettingsConfigDict(env_prefix="COURSE_ADVISOR_", extra="forbid", frozen=True)

    delimiter: str = Field(default=",", min_length=1, max_length=1, description="Field separator")
    encoding: str = Field(default="utf-8", description="Text encoding of course files")
    sort_threshold: int = Field(default=50, ge=0, description="Below this size listings use insertion sort")
    duckdb_path: str = Field(default="data/catalog.duckdb", min_length=1, description="DuckDB export target")
    log_level: str = Field(default="WARNING", description="Logging level for the menu")

    @field_validator("delimiter")
    @classmethod
    def _delimiter_not_space(cls, value):
        if value.isspace():
            raise ValueError("delimiter must not be whitespace")
        return value

    @field_validator("sort_threshold", mode="before")
    @classmethod
    def _threshold_not_bool(cls, value):
        if isinstance(value, bool):
            raise ValueError("sort_threshold must be an integer")
        return value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value):
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding {value!r}") from e
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value):
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_config(path=None):
    """Reads a JSON config file into an AdvisorConfig.

    Without ``path`` the COURSE_ADVISOR_CONFIG environment variable is used;
    if that is unset too, only defaults and field env vars apply.
    """
    path = path or os.environ.get(CONFIG_ENV)
    data = {}
    if path:
        try:
            with open(path) as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError(f"cannot read config {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"config {path} must hold a JSON object")

    try:
        return AdvisorConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"invalid config {path or '(defaults)'}: {e}") from e
