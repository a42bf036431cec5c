"""
Tests for environment-driven configuration.
"""

import pytest

from gridsnake import config
from gridsnake.domain.constants import DEFAULT_WIDTH, DEFAULT_HEIGHT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GRIDSNAKE_WIDTH", "GRIDSNAKE_HEIGHT", "GRIDSNAKE_STEP_DELAY_MS",
                 "GRIDSNAKE_TICK_MS", "GRIDSNAKE_SEED", "GRIDSNAKE_LOG_LEVEL",
                 "GRIDSNAKE_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    rules = config.load_rules()
    assert rules.width == DEFAULT_WIDTH
    assert rules.height == DEFAULT_HEIGHT
    assert config.get_seed() is None
    assert config.get_log_level() == "WARNING"
    assert config.get_output_dir() is None


def test_environment_values(monkeypatch):
    monkeypatch.setenv("GRIDSNAKE_WIDTH", "30")
    monkeypatch.setenv("GRIDSNAKE_TICK_MS", "50")
    monkeypatch.setenv("GRIDSNAKE_SEED", "17")
    monkeypatch.setenv("GRIDSNAKE_LOG_LEVEL", "debug")

    rules = config.load_rules()
    assert rules.width == 30
    assert rules.tick_interval == 50.0
    assert config.get_seed() == 17
    assert config.get_log_level() == "DEBUG"


def test_overrides_beat_environment(monkeypatch):
    monkeypatch.setenv("GRIDSNAKE_WIDTH", "30")
    rules = config.load_rules(width=20, height=None)
    assert rules.width == 20
    assert rules.height == DEFAULT_HEIGHT


def test_invalid_number_raises(monkeypatch):
    monkeypatch.setenv("GRIDSNAKE_WIDTH", "wide")
    with pytest.raises(ValueError):
        config.load_rules()


def test_invalid_field_raises(monkeypatch):
    monkeypatch.setenv("GRIDSNAKE_HEIGHT", "0")
    with pytest.raises(ValueError):
        config.load_rules()


def test_output_dir_from_environment(monkeypatch):
    monkeypatch.setenv("GRIDSNAKE_OUTPUT_DIR", " replays ")
    assert config.get_output_dir() == "replays"
