"""
Tests for environment settings.
"""

import os
import sys

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config
from config import get_settings

ENV_VARS = [
    "SNAKE_FIELD_WIDTH", "SNAKE_FIELD_HEIGHT", "SNAKE_BLOCK_SIZE", "SNAKE_BLOCK_BORDER",
    "SNAKE_BACKGROUND_COLOR", "SNAKE_SEED", "LOG_LEVEL",
]


def clear_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    clear_env(monkeypatch)
    settings = get_settings()
    assert settings.field_width == config.DEFAULT_FIELD_WIDTH
    assert settings.field_height == config.DEFAULT_FIELD_HEIGHT
    assert settings.block_size == 35
    assert settings.seed is None
    assert settings.log_level == "INFO"


def test_values_from_env(monkeypatch):
    clear_env(monkeypatch)
    monkeypatch.setenv("SNAKE_FIELD_WIDTH", "12")
    monkeypatch.setenv("SNAKE_FIELD_HEIGHT", ' "8" ')
    monkeypatch.setenv("SNAKE_BLOCK_BORDER", "0")
    monkeypatch.setenv("SNAKE_BACKGROUND_COLOR", "'#000000'")
    monkeypatch.setenv("SNAKE_SEED", "7")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.field_width == 12
    assert settings.field_height == 8
    assert settings.block_border == 0
    assert settings.background_color == "#000000"
    assert settings.seed == 7
    assert settings.log_level == "DEBUG"


def test_invalid_values_fall_back(monkeypatch):
    clear_env(monkeypatch)
    monkeypatch.setenv("SNAKE_FIELD_WIDTH", "wide")
    monkeypatch.setenv("SNAKE_FIELD_HEIGHT", "0")
    monkeypatch.setenv("SNAKE_SEED", "abc")

    settings = get_settings()

    assert settings.field_width == config.DEFAULT_FIELD_WIDTH
    assert settings.field_height == config.DEFAULT_FIELD_HEIGHT
    assert settings.seed is None
