"""Global configuration and constants for the sparkline adapter.

Environment overrides that do not parse fall back to the default (with a
warning) so a bad variable never breaks ``import sparkles``.
"""

from __future__ import annotations

import logging
import math
import os
from typing import Final

log = logging.getLogger(__name__)

_LEVEL_NAMES: Final = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        log.warning("Ignoring %s=%r: not a finite number, using %s", name, raw, default)
        return default
    return value


def env_log_level(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    if level not in _LEVEL_NAMES:
        log.warning("Ignoring %s=%r: expected one of %s, using %s", name, raw, _LEVEL_NAMES, default)
        return default
    return level


LIB_TAG: Final = "sparkles"

# Extra top/bottom graph space added around the data range
VERTICAL_BOUND_OFFSET: Final = env_float("SPARKLES_VERTICAL_BOUND_OFFSET", 10.0)

LOG_LEVEL: Final = env_log_level("SPARKLES_LOG_LEVEL", "WARNING")
