"""Root logger setup for the PantryPal desktop app.

``PANTRYPAL_LOG_LEVEL`` (a level name or number) pins the level and a truthy
``PANTRYPAL_DEBUG`` forces DEBUG. Either one wins over the saved
``debug_logging`` setting.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "PANTRYPAL_LOG_LEVEL"
DEBUG_ENV = "PANTRYPAL_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _parse_level(raw: Optional[str]) -> Optional[int]:
    text = (raw or "").strip()
    if not text:
        return None
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else None


def env_level() -> Optional[int]:
    """Return the level forced by the environment, or ``None``."""
    pinned = _parse_level(os.getenv(LEVEL_ENV))
    if pinned is not None:
        return pinned
    if (os.getenv(DEBUG_ENV) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def configure_root() -> int:
    """Install the console handler once and set the start-up level.

    The level is INFO unless the environment overrides it. Returns the level
    applied to the root logger.
    """
    level = env_level()
    if level is None:
        level = logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(level)
    return level


def apply_saved_preference(debug_logging: bool) -> int:
    """Switch the root logger to the saved ``debug_logging`` choice.

    The environment still wins. Returns the level now in effect.
    """
    level = env_level()
    if level is None:
        level = logging.DEBUG if debug_logging else logging.INFO
    logging.getLogger().setLevel(level)
    logging.getLogger(__name__).debug("Root log level %s", logging.getLevelName(level))
    return level


__all__ = ["apply_saved_preference", "configure_root", "env_level"]
