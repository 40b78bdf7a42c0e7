"""Environment-driven settings for pluglog.

Provides:
- The name of the platform logger plugin messages are emitted on
- Whether the generic log entry point prefixes non-debug messages
- The level of pluglog's own diagnostics loggers
"""

import os
from pathlib import Path

PLATFORM_LOGGER_VAR = "PLUGLOG_PLATFORM_LOGGER"
PREFIX_GENERIC_VAR = "PLUGLOG_PREFIX_GENERIC"
LOG_LEVEL_VAR = "PLUGLOG_LOG_LEVEL"

DEFAULT_PLATFORM_LOGGER = "Minecraft"

# Debug log file name inside the plugin data directory
DEBUG_LOG_FILE_NAME = "debug.log"

_TRUTHY = {"1", "true", "yes", "on"}


def get_platform_logger_name() -> str:
    """Get the name of the platform logger.

    Uses PLUGLOG_PLATFORM_LOGGER if set, otherwise "Minecraft".
    """
    env_name = os.environ.get(PLATFORM_LOGGER_VAR)
    if env_name:
        return env_name
    return DEFAULT_PLATFORM_LOGGER


def get_prefix_generic() -> bool:
    """Whether generic log(level, message) calls get the plugin prefix."""
    return os.environ.get(PREFIX_GENERIC_VAR, "").strip().lower() in _TRUTHY


def get_internal_log_level_name() -> str:
    """Get the level name for pluglog diagnostics loggers (default WARNING)."""
    return os.environ.get(LOG_LEVEL_VAR, "WARNING").upper()


def get_debug_log_path(data_dir: Path | str) -> Path:
    """Get the debug log path for a plugin data directory."""
    return Path(data_dir) / DEBUG_LOG_FILE_NAME
