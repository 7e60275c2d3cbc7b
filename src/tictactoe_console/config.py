"""Runtime settings.

Environment-first: every setting reads a TTT_* variable and falls back
to a default when it is unset or unusable.
"""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = logging.WARNING


def log_level() -> int:
    """Logging level from TTT_LOG_LEVEL (a level name such as DEBUG or INFO).

    Unknown names fall back to WARNING so a typo never breaks a game.
    """
    name = os.getenv("TTT_LOG_LEVEL")
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL
