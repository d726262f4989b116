"""
Tests for environment-driven configuration.
"""

from pathlib import Path

import pytest

from appeal_estimator.models import Config, ConfigError

ENV_VARS = [
    "ATTOM_API_KEY", "VITE_ATTOM_API_KEY", "ATTOM_BASE_URL", "VITE_API_BASE_URL",
    "ATTOM_TIMEOUT", "ATTOM_MAX_RETRIES", "OUTPUT_DIR", "OUTPUT_FORMAT", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    config = Config.from_env()

    assert config.output_format == "parquet"
    assert config.log_level == "INFO"
    assert config.attom.base_url == "https://api.gateway.attomdata.com"
    assert config.attom.timeout == 10.0
    assert not config.attom.is_configured


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("ATTOM_API_KEY", "abc123")
    monkeypatch.setenv("ATTOM_BASE_URL", "https://attom.test/")
    monkeypatch.setenv("ATTOM_TIMEOUT", "2.5")
    monkeypatch.setenv("ATTOM_MAX_RETRIES", "0")
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("OUTPUT_FORMAT", "CSV")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Config.from_env()

    assert config.attom.api_key == "abc123"
    assert config.attom.is_configured
    assert config.attom.base_url == "https://attom.test"
    assert config.attom.timeout == 2.5
    assert config.attom.max_retries == 0
    assert config.output_dir == Path(tmp_path / "out")
    assert config.output_format == "csv"
    assert config.log_level == "DEBUG"


def test_front_end_variable_names(monkeypatch):
    monkeypatch.setenv("VITE_ATTOM_API_KEY", "vite-key")
    monkeypatch.setenv("VITE_API_BASE_URL", "https://proxy.test")

    config = Config.from_env()

    assert config.attom.api_key == "vite-key"
    assert config.attom.base_url == "https://proxy.test"


def test_primary_names_take_precedence(monkeypatch):
    monkeypatch.setenv("ATTOM_API_KEY", "primary")
    monkeypatch.setenv("VITE_ATTOM_API_KEY", "fallback")

    assert Config.from_env().attom.api_key == "primary"


def test_estimation_tables_are_configurable():
    config = Config.from_env()

    assert config.estimation.base_values.lookup("1 Main St, Austin, TX") == 320000
    assert config.estimation.tax_growth_factor == 0.7


@pytest.mark.parametrize("name,value", [("ATTOM_TIMEOUT", "soon"), ("ATTOM_MAX_RETRIES", "2.5")])
def test_invalid_numbers_raise_config_error(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigError) as exc_info:
        Config.from_env()

    assert name in str(exc_info.value)
