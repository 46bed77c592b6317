"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _check_output_format(value: str) -> str:
    if value.lower() not in ("text", "json"):
        raise ValueError("output_format must be either 'text' or 'json'")
    return value.lower()


def _check_top_operators(value: int) -> int:
    if value < 1:
        raise ValueError("top_operators must be at least 1")
    return value


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Data source configuration
    data_source: str = Field(
        default=".tmp/raw_data.json",
        description="Path to a JSON file or http(s) URL returning the station record array",
    )
    data_timeout_seconds: int = Field(
        default=30, description="Timeout for loading station data over HTTP in seconds"
    )

    # Output configuration
    output_format: str = Field(default="text", description="Output format: 'text' or 'json'")
    top_operators: int = Field(
        default=5, description="Number of operators shown in the operator share chart"
    )
    log_level: str = Field(default="INFO", description="Logging level name")

    # TOML config file path
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [data], [display] and [filters] sections",
    )

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format is either 'text' or 'json'."""
        return _check_output_format(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v.upper()

    @field_validator("top_operators")
    @classmethod
    def validate_top_operators(cls, v: int) -> int:
        """Validate at least one operator is shown."""
        return _check_top_operators(v)

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return logging.getLevelNamesMapping()[self.log_level]

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating data and display settings."""
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        # Update data source settings from TOML if present
        data = toml_data.get("data", {})
        if "source" in data:
            self.data_source = str(data["source"])
        if "timeout_seconds" in data:
            self.data_timeout_seconds = int(data["timeout_seconds"])

        # Update display settings from TOML if present
        display = toml_data.get("display", {})
        if "output_format" in display:
            self.output_format = _check_output_format(str(display["output_format"]))
        if "top_operators" in display:
            self.top_operators = _check_top_operators(int(display["top_operators"]))

        return toml_data

    def get_filters_config(self) -> dict[str, Any]:
        """Return the [filters] table of the TOML file, or an empty dict without a config file.

        Loading the file also applies its [data] and [display] settings.
        """
        if not self.config_file:
            return {}

        toml_data = self._load_toml_data()
        filters = toml_data.get("filters", {})
        if not isinstance(filters, dict):
            raise ValueError("TOML config 'filters' must be a table")
        return filters
