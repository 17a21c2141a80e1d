"""Runtime settings, read from the environment or a .env file."""
from __future__ import annotations
import logging

from decouple import config

LOG_LEVEL = config("RPS_LOG_LEVEL", default="INFO")


def log_level(name: str | None = None) -> int:
    """Resolve a level name to a logging constant, falling back to INFO."""
    level = logging.getLevelName((name or LOG_LEVEL).strip().upper())
    return level if isinstance(level, int) else logging.INFO
