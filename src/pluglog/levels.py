"""Severity levels used by the plugin logger.

The ordered set FINEST < FINER < FINE < CONFIG < INFO < WARNING < SEVERE is
expressed as stdlib ``logging`` integers so records flow through ordinary
handlers. FINE shares its value with ``logging.DEBUG``.
"""

from __future__ import annotations

import logging

FINEST = 5
FINER = 7
FINE = logging.DEBUG
CONFIG = 15
INFO = logging.INFO
WARNING = logging.WARNING
SEVERE = logging.ERROR

# Minimum debug level required for each debug severity
DEBUG_THRESHOLDS: dict[int, int] = {
    FINE: 1,
    FINER: 2,
    FINEST: 3,
}

MIN_DEBUG_LEVEL = 0
MAX_DEBUG_LEVEL = 3

_NAMES: dict[str, int] = {
    "FINEST": FINEST,
    "FINER": FINER,
    "FINE": FINE,
    "CONFIG": CONFIG,
    "INFO": INFO,
    "WARNING": WARNING,
    "SEVERE": SEVERE,
    # stdlib aliases
    "DEBUG": logging.DEBUG,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

logging.addLevelName(FINEST, "FINEST")
logging.addLevelName(FINER, "FINER")
logging.addLevelName(CONFIG, "CONFIG")


def debug_threshold(level: int) -> int | None:
    """Return the debug level needed to emit ``level``, or None if not a debug severity."""
    return DEBUG_THRESHOLDS.get(level)


def parse_level(name: str) -> int:
    """Resolve a level name (case-insensitive) to its integer value.

    Raises:
        ValueError: If the name is not a known level.
    """
    try:
        return _NAMES[name.strip().upper()]
    except KeyError:
        known = ", ".join(sorted(_NAMES))
        raise ValueError(f"Unknown log level {name!r} (expected one of: {known})") from None
