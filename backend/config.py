"""
Runtime settings, read from the environment (and a .env file if present).

Game tuning (speeds, food timings) stays in domain/constants.py; only
the things that depend on where the game runs live here.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_FIELD_WIDTH = 30
DEFAULT_FIELD_HEIGHT = 20
DEFAULT_BLOCK_SIZE = 35  # Size of blocks in pixels
DEFAULT_BLOCK_BORDER = 2
DEFAULT_BACKGROUND_COLOR = "#4F4F4F"
DEFAULT_LOG_LEVEL = "INFO"


def _sanitize_env_value(value: Optional[str]) -> Optional[str]:
    """
    Clean up env-provided strings that may include surrounding quotes or whitespace.
    """
    if value is None:
        return None
    cleaned = value.strip()
    if len(cleaned) >= 2 and (
        (cleaned[0] == '"' and cleaned[-1] == '"') or (cleaned[0] == "'" and cleaned[-1] == "'")
    ):
        cleaned = cleaned[1:-1].strip()
    return cleaned or None


def _int_from_env(name: str, default: int, minimum: int = 1) -> int:
    raw = _sanitize_env_value(os.getenv(name))
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; defaulting to %s.", name, raw, default)
        return default
    if value < minimum:
        logger.warning("%s=%s is below %s; defaulting to %s.", name, value, minimum, default)
        return default
    return value


@dataclass
class Settings:
    field_width: int = DEFAULT_FIELD_WIDTH
    field_height: int = DEFAULT_FIELD_HEIGHT
    block_size: int = DEFAULT_BLOCK_SIZE
    block_border: int = DEFAULT_BLOCK_BORDER
    background_color: str = DEFAULT_BACKGROUND_COLOR
    seed: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    """Build Settings from SNAKE_* environment variables."""
    seed_raw = _sanitize_env_value(os.getenv("SNAKE_SEED"))
    seed = None
    if seed_raw is not None:
        try:
            seed = int(seed_raw)
        except ValueError:
            logger.warning("SNAKE_SEED=%r is not an integer; using a random seed.", seed_raw)

    return Settings(
        field_width=_int_from_env("SNAKE_FIELD_WIDTH", DEFAULT_FIELD_WIDTH),
        field_height=_int_from_env("SNAKE_FIELD_HEIGHT", DEFAULT_FIELD_HEIGHT),
        block_size=_int_from_env("SNAKE_BLOCK_SIZE", DEFAULT_BLOCK_SIZE),
        block_border=_int_from_env("SNAKE_BLOCK_BORDER", DEFAULT_BLOCK_BORDER, minimum=0),
        background_color=_sanitize_env_value(os.getenv("SNAKE_BACKGROUND_COLOR")) or DEFAULT_BACKGROUND_COLOR,
        seed=seed,
        log_level=(_sanitize_env_value(os.getenv("LOG_LEVEL")) or DEFAULT_LOG_LEVEL).upper(),
    )
