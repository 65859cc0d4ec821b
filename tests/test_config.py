"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from kvlens.config import DEFAULT_INDENT_WIDTH, DEFAULT_LOG_LEVEL, Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("KVLENS_REGISTRY", "KVLENS_INDENT_WIDTH", "KVLENS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_config_defaults():
    config = Config.from_env()

    assert config.registry_path is None
    assert config.indent_width == DEFAULT_INDENT_WIDTH
    assert config.log_level == DEFAULT_LOG_LEVEL


def test_config_from_env_overrides(monkeypatch, tmp_path):
    """Environment variables should override defaults."""
    monkeypatch.setenv("KVLENS_REGISTRY", str(tmp_path / "catalog.yaml"))
    monkeypatch.setenv("KVLENS_INDENT_WIDTH", "2")
    monkeypatch.setenv("KVLENS_LOG_LEVEL", "debug")

    config = Config.from_env()

    assert Path(config.registry_path) == tmp_path / "catalog.yaml"
    assert config.indent_width == 2
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["abc", "0", "-4", ""])
def test_invalid_indent_width_falls_back(monkeypatch, value):
    monkeypatch.setenv("KVLENS_INDENT_WIDTH", value)

    assert Config.from_env().indent_width == DEFAULT_INDENT_WIDTH


def test_indent_width_validated():
    with pytest.raises(ValidationError):
        Config(indent_width=0)
