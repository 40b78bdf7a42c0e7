"""File-backed debug log for plugin debug output.

At most one DebugLog is open per process. The module keeps the configured
logger name and file path (set by ``configure``) and opens the log lazily on
``get_debug_log``; asking again while it is open returns the same instance.

Usage:
    from pluglog import debug_log

    debug_log.configure("MyPlugin", data_dir / "debug.log")
    log = debug_log.get_debug_log()
    log.log(logging.INFO, "[MyPlugin-Debug] loaded 3 worlds")
    log.close()
"""

from __future__ import annotations

import logging
import sys
import threading
from pathlib import Path
from typing import Any

from pluglog.errors import DebugLogError
from pluglog.io import ensure_parent_dir
from pluglog.logging import get_logger

_logger = get_logger("debug_log")

DEBUG_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DEBUG_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_LOCK = threading.Lock()
_logger_name: str | None = None
_file_name: Path | None = None
_instance: DebugLog | None = None


class _DebugFileHandler(logging.FileHandler):
    """FileHandler that records write failures instead of printing them."""

    def __init__(self, filename: Path) -> None:
        super().__init__(filename, mode="a", encoding="utf-8")
        self.error: BaseException | None = None

    def handleError(self, record: logging.LogRecord) -> None:
        self.error = sys.exc_info()[1]


class DebugLog:
    """An open debug log file.

    Writes go through a private ``logging.Logger`` that is not registered
    with the logging manager, so nothing written here reaches other handlers.
    """

    def __init__(self, logger_name: str, file_path: Path | str) -> None:
        self.logger_name = logger_name
        self.file_path = Path(file_path)
        try:
            ensure_parent_dir(self.file_path)
            self._handler = _DebugFileHandler(self.file_path)
        except OSError as e:
            raise DebugLogError(f"Could not open debug log {self.file_path}: {e}") from e
        self._handler.setFormatter(logging.Formatter(DEBUG_LOG_FORMAT, DEBUG_LOG_DATEFMT))

        self._logger = logging.Logger(logger_name)
        self._logger.propagate = False
        self._logger.addHandler(self._handler)
        self._closed = False
        _logger.debug("Opened debug log %s", self.file_path)

    @property
    def closed(self) -> bool:
        return self._closed

    def log(self, level: int, message: str, exc_info: Any = None) -> None:
        """Write one line to the debug log, followed by a traceback if ``exc_info`` is set.

        Raises:
            DebugLogError: If the log is closed or the write failed.
        """
        if self._closed:
            raise DebugLogError(f"Debug log {self.file_path} is closed")
        self._logger.log(level, message, exc_info=exc_info)
        error = self._handler.error
        if error is not None:
            self._handler.error = None
            raise DebugLogError(f"Could not write to debug log {self.file_path}: {error}") from error

    def close(self) -> None:
        """Flush and close the file. Safe to call more than once.

        Raises:
            DebugLogError: If flushing or closing the file failed. The log is
                considered closed either way.
        """
        if self._closed:
            return
        self._closed = True
        self._logger.removeHandler(self._handler)
        try:
            self._handler.close()
        except (OSError, ValueError) as e:
            raise DebugLogError(f"Could not close debug log {self.file_path}: {e}") from e
        _logger.debug("Closed debug log %s", self.file_path)


def configure(logger_name: str, file_path: Path | str) -> None:
    """Set the logger name and file used by the next opened debug log.

    A debug log that is still open is closed first.
    """
    global _logger_name, _file_name
    with _LOCK:
        try:
            _close_instance()
        finally:
            _logger_name = logger_name
            _file_name = Path(file_path)


def get_debug_log() -> DebugLog:
    """Return the open debug log, opening it if necessary.

    Raises:
        DebugLogError: If ``configure`` has not been called or the file
            cannot be opened.
    """
    global _instance
    with _LOCK:
        if _logger_name is None or _file_name is None:
            raise DebugLogError("Debug log is not configured")
        if _instance is None or _instance.closed:
            _instance = DebugLog(_logger_name, _file_name)
        return _instance


def is_closed() -> bool:
    """True when no debug log is currently open."""
    return _instance is None or _instance.closed


def get_logger_name() -> str | None:
    return _logger_name


def get_file_name() -> Path | None:
    return _file_name


def shutdown() -> None:
    """Close any open debug log and forget the configuration."""
    global _logger_name, _file_name
    with _LOCK:
        try:
            _close_instance()
        finally:
            _logger_name = None
            _file_name = None


def _close_instance() -> None:
    global _instance
    instance, _instance = _instance, None
    if instance is not None:
        instance.close()
