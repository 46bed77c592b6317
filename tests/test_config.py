"""Tests for configuration adapter."""

from pathlib import Path

import pytest

from ev_charging_insights.adapters.config import AppConfig, FilterCriteriaLoader
from ev_charging_insights.domain.models import ALL, FilterCriteria


@pytest.fixture(autouse=True)
def clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove configuration variables that could leak in from the environment."""
    for name in ("DATA_SOURCE", "OUTPUT_FORMAT", "LOG_LEVEL", "TOP_OPERATORS", "CONFIG_FILE"):
        monkeypatch.delenv(name, raising=False)


def _write_toml(tmp_path: Path, content: str) -> str:
    path = tmp_path / "config.toml"
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.data_source == ".tmp/raw_data.json"
    assert config.data_timeout_seconds == 30
    assert config.output_format == "text"
    assert config.top_operators == 5
    assert config.log_level == "INFO"
    assert config.config_file is None


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("DATA_SOURCE", "https://example.org/stations.json")
    monkeypatch.setenv("OUTPUT_FORMAT", "JSON")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig()

    assert config.data_source == "https://example.org/stations.json"
    assert config.output_format == "json"
    assert config.log_level == "DEBUG"
    assert config.log_level_value == 10


def test_config_validates_output_format(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given invalid output format, when loading config, then validation error is raised."""
    monkeypatch.setenv("OUTPUT_FORMAT", "xml")

    with pytest.raises(ValueError, match="output_format must be either"):
        AppConfig()


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig()


def test_config_validates_top_operators() -> None:
    """Given zero top operators, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="top_operators must be at least 1"):
        AppConfig(top_operators=0)


def test_filters_config_is_empty_without_config_file() -> None:
    """Given no config file, when reading filters, then an empty table is returned."""
    assert AppConfig().get_filters_config() == {}


def test_config_raises_error_when_file_not_found() -> None:
    """Given non-existent config file, when loading filters, then FileNotFoundError is raised."""
    config = AppConfig(config_file="nonexistent.toml")

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.get_filters_config()


def test_toml_applies_data_and_display_settings(tmp_path: Path) -> None:
    """Given [data] and [display] tables, when loading the TOML file, then settings are updated."""
    config = AppConfig(
        config_file=_write_toml(
            tmp_path,
            """
[data]
source = "stations.json"
timeout_seconds = 5

[display]
output_format = "json"
top_operators = 3
""",
        )
    )

    config.get_filters_config()

    assert config.data_source == "stations.json"
    assert config.data_timeout_seconds == 5
    assert config.output_format == "json"
    assert config.top_operators == 3


def test_toml_rejects_invalid_display_value(tmp_path: Path) -> None:
    """Given an invalid output format in TOML, when loading, then ValueError is raised."""
    config = AppConfig(config_file=_write_toml(tmp_path, '[display]\noutput_format = "pdf"\n'))

    with pytest.raises(ValueError, match="output_format must be either"):
        config.get_filters_config()


def test_filter_criteria_loader_reads_filters_table(tmp_path: Path) -> None:
    """Given a [filters] table, when loading criteria, then its values are used."""
    config = AppConfig(
        config_file=_write_toml(
            tmp_path,
            """
[filters]
region = "VIC"
city = " Geelong "
status = ""
""",
        )
    )

    criteria = FilterCriteriaLoader.load(config)

    assert criteria == FilterCriteria(region="VIC", city="Geelong", town=ALL, status=ALL)


def test_filter_criteria_loader_defaults_to_all() -> None:
    """Given no config file, when loading criteria, then every criterion is ALL."""
    assert FilterCriteriaLoader.load(AppConfig()) == FilterCriteria()


def test_filter_criteria_loader_ignores_non_scalar_values(tmp_path: Path) -> None:
    """Given list values in [filters], when loading criteria, then they are ignored."""
    config = AppConfig(config_file=_write_toml(tmp_path, '[filters]\nregion = ["VIC", "NSW"]\n'))

    assert FilterCriteriaLoader.load(config).region == ALL


def test_apply_overrides_keeps_unset_values() -> None:
    """Given overrides with None values, when applying, then only given values replace criteria."""
    criteria = FilterCriteria(region="VIC", status="planned")

    updated = FilterCriteriaLoader.apply_overrides(
        criteria, {"region": None, "city": "Geelong", "town": None, "status": "all"}
    )

    assert updated == FilterCriteria(region="VIC", city="Geelong", town=ALL, status=ALL)
