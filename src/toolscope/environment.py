"""Environment-driven settings.

Values are read from the process environment, after loading a ``.env`` file
from the working directory if one exists. Readers are called at use time so
tests can monkeypatch the environment.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

MAX_TOOLS_VAR = "TOOLSCOPE_MAX_TOOLS"
FALLBACK_CATEGORIES_VAR = "TOOLSCOPE_FALLBACK_CATEGORIES"
LOG_LEVEL_VAR = "TOOLSCOPE_LOG_LEVEL"


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default


def env_list(name: str, default: frozenset[str]) -> frozenset[str]:
    """Read a comma-separated list. Blank entries are dropped."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    values = frozenset(part.strip() for part in raw.split(",") if part.strip())
    return values or default


def log_level(default: str = "WARNING") -> str:
    return os.environ.get(LOG_LEVEL_VAR, default).upper()
