"""Internal diagnostics logging for pluglog.

These loggers report on pluglog itself (descriptor loading, debug-log file
problems, CLI wiring). Plugin messages never go through them; those are
emitted on the platform logger owned by the facade, so a diagnostics line
never shows up in a plugin's console output or its debug.log.
"""

from __future__ import annotations

import logging
import sys

from pluglog.config import get_internal_log_level_name
from pluglog.levels import parse_level

# Cache configured loggers
_loggers: dict[str, logging.Logger] = {}


def _internal_level() -> int:
    try:
        return parse_level(get_internal_log_level_name())
    except ValueError:
        return logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """Get the diagnostics logger for a pluglog module.

    Loggers are named ``pluglog.<name>`` and write to stderr as
    ``[pluglog:<name>] LEVEL: message``. PLUGLOG_LOG_LEVEL sets the level and
    takes plugin level names too, so ``PLUGLOG_LOG_LEVEL=FINE`` turns on
    the debug-log open/close traces. Unknown names fall back to WARNING.

    Args:
        name: Short module name, e.g. ``"facade"`` or ``"debug_log"``.
    """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(f"pluglog.{name}")

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(f"[pluglog:{name}] %(levelname)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(_internal_level())

    _loggers[name] = logger
    return logger
