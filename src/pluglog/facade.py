"""Process-wide plugin logger.

One PluginLogger instance holds the identity of the plugin that
initialized it (name and version used in message prefixes), the debug
level (0-3) and, while debugging is enabled, an open debug log file in the
plugin's data directory.

Debug levels:
    0 - debug logging off; the debug log file is closed.
    1 - FINE messages are logged.
    2 - FINE and FINER messages are logged.
    3 - FINE, FINER and FINEST messages are logged.

Debug messages are emitted at INFO as ``[<name><debug prefix>] message``.
Everything else is emitted at its own level as ``[<name>] message`` or
``[<name> <version>] message``. While the debug log is open it receives a
copy of every emitted message.

Usage:
    import pluglog

    pluglog.init(plugin)            # plugin has name, version, data_dir
    pluglog.set_debug_level(2)
    pluglog.info("Loaded %s worlds", 3)
    pluglog.finer("Tick took %d ms", 12)
    pluglog.shutdown()
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pluglog import debug_log
from pluglog.adapter import PluginLoggerAdapter
from pluglog.config import get_debug_log_path, get_platform_logger_name, get_prefix_generic
from pluglog.debug_log import DebugLog
from pluglog.errors import DebugLogError, InvalidDebugLevelError
from pluglog.formatting import format_message
from pluglog.levels import (
    FINE,
    FINER,
    FINEST,
    INFO,
    MAX_DEBUG_LEVEL,
    MIN_DEBUG_LEVEL,
    SEVERE,
    WARNING,
    debug_threshold,
)
from pluglog.logging import get_logger as get_diagnostics_logger
from pluglog.plugin import HostPlugin

_logger = get_diagnostics_logger("facade")

ORIGINAL_NAME = "Logging"
ORIGINAL_VERSION = "v.???"
ORIGINAL_DEBUG_PREFIX = "-Debug"
ORIGINAL_DEBUG_LEVEL = 0


class PluginLogger:
    """Plugin-aware logging facade over a platform logger.

    Args:
        platform_logger: Logger that plugin messages are emitted on.
            Defaults to the logger named by PLUGLOG_PLATFORM_LOGGER.
        prefix_generic: Whether the generic adapter prefixes non-debug
            messages. Defaults to PLUGLOG_PREFIX_GENERIC.
    """

    def __init__(
        self,
        platform_logger: logging.Logger | None = None,
        *,
        prefix_generic: bool | None = None,
    ) -> None:
        if platform_logger is None:
            platform_logger = logging.getLogger(get_platform_logger_name())
        self._platform = platform_logger
        self.prefix_generic = get_prefix_generic() if prefix_generic is None else prefix_generic

        # init() calls shutdown(), so the lock must be re-entrant
        self._lock = threading.RLock()
        self._name = ORIGINAL_NAME
        self._version = ORIGINAL_VERSION
        self._debug_prefix = ORIGINAL_DEBUG_PREFIX
        self._debug_level = ORIGINAL_DEBUG_LEVEL
        self._debug_log: DebugLog | None = None
        self._plugin: HostPlugin | None = None
        self._adapter = PluginLoggerAdapter(self)

    @property
    def platform_logger(self) -> logging.Logger:
        return self._platform

    @property
    def name(self) -> str:
        return self._name

    @property
    def version(self) -> str:
        return self._version

    @property
    def debug_prefix(self) -> str:
        return self._debug_prefix

    @property
    def debug_level(self) -> int:
        return self._debug_level

    @property
    def debug_log(self) -> DebugLog | None:
        return self._debug_log

    @property
    def plugin(self) -> HostPlugin | None:
        return self._plugin

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(self, plugin: HostPlugin) -> None:
        """Prepare the logger for ``plugin``. Debugging starts disabled.

        Call early in plugin startup. If already initialized, the logger is
        shut down first.
        """
        with self._lock:
            if self._plugin is not None:
                self.shutdown()
            self._name = plugin.name
            self._version = plugin.version
            self.close_debug_log()
            debug_log.configure(self._name, self.get_debug_file_name(plugin))
            self.set_debug_level(0)
            self._plugin = plugin
        _logger.debug("Initialized for %s %s", self._name, self._version)

    def shutdown(self) -> None:
        """Return to the original state and release the plugin.

        Call when the plugin is disabled so no reference to it survives a
        server reload. The logger can be initialized again afterwards.
        """
        with self._lock:
            self.close_debug_log()
            try:
                debug_log.shutdown()
            except DebugLogError as e:
                self._report_debug_log_error(e)
            self._plugin = None
            self._name = ORIGINAL_NAME
            self._version = ORIGINAL_VERSION
            self._debug_prefix = ORIGINAL_DEBUG_PREFIX
            self._debug_level = ORIGINAL_DEBUG_LEVEL

    @staticmethod
    def get_debug_file_name(plugin: HostPlugin) -> Path:
        """Path of the debug log for ``plugin``: ``<data_dir>/debug.log``."""
        return get_debug_log_path(plugin.data_dir)

    # ------------------------------------------------------------------
    # Debug level and debug log
    # ------------------------------------------------------------------

    def set_debug_level(self, level: int) -> None:
        """Set the debug level (0 = off, 1-3 = increasing verbosity).

        A level above 0 opens the debug log if it is not already open;
        level 0 closes it.

        Raises:
            InvalidDebugLevelError: If ``level`` is not an int in [0, 3].
        """
        if (
            isinstance(level, bool)
            or not isinstance(level, int)
            or not MIN_DEBUG_LEVEL <= level <= MAX_DEBUG_LEVEL
        ):
            raise InvalidDebugLevelError(
                f"debug level must be between {MIN_DEBUG_LEVEL} and {MAX_DEBUG_LEVEL}, got {level!r}"
            )
        with self._lock:
            if level > 0:
                if self._debug_log is None or self._debug_log.closed:
                    self._open_debug_log()
            else:
                self.close_debug_log()
            self._debug_level = level

    def get_debug_level(self) -> int:
        return self._debug_level

    def close_debug_log(self) -> None:
        """Close the debug log if it is open."""
        with self._lock:
            sink, self._debug_log = self._debug_log, None
            if sink is not None:
                try:
                    sink.close()
                except DebugLogError as e:
                    self._report_debug_log_error(e)

    def _open_debug_log(self) -> None:
        try:
            self._debug_log = debug_log.get_debug_log()
        except DebugLogError as e:
            self._debug_log = None
            self._report_debug_log_error(e)

    def _report_debug_log_error(self, error: DebugLogError) -> None:
        # Platform logger only; going through emit() could hit the broken file again
        self._platform.warning(self.get_prefixed_message(f"Debug log disabled: {error}", False))

    # ------------------------------------------------------------------
    # Message decoration
    # ------------------------------------------------------------------

    def get_prefixed_message(self, message: str, show_version: bool) -> str:
        """Add the plugin name, and optionally its version, to ``message``."""
        if show_version:
            return f"[{self._name} {self._version}] {message}"
        return f"[{self._name}] {message}"

    def set_debug_prefix(self, prefix: str) -> None:
        """Set the text that follows the plugin name in debug messages."""
        self._debug_prefix = prefix

    def get_debug_string(self, message: str) -> str:
        """Add the plugin's debug name to ``message``."""
        return f"[{self._name}{self._debug_prefix}] {message}"

    def get_logger(self) -> PluginLoggerAdapter:
        """Return the stdlib-compatible adapter bound to this facade."""
        return self._adapter

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def log(self, show_version: bool, level: int, message: str, *args: Any) -> None:
        """Log ``message`` formatted with ``args``.

        Debug severities below the current debug level are dropped without
        formatting.

        Raises:
            FormatArgumentMismatchError: If ``message`` has more placeholders
                than ``args``.
            MessageFormatError: If ``message`` cannot be formatted.
        """
        self._log(show_version, level, message, args, stacklevel=2)

    def log_static(self, level: int, message: str, *args: Any) -> None:
        self._log(False, level, message, args, stacklevel=2)

    def _log(
        self,
        show_version: bool,
        level: int,
        message: str,
        args: tuple[Any, ...],
        stacklevel: int = 1,
    ) -> None:
        # stacklevel counts from the caller of _log, as in Logger.log
        threshold = debug_threshold(level)
        if threshold is not None:
            if self._debug_level >= threshold:
                self.emit(
                    INFO,
                    self.get_debug_string(format_message(message, args)),
                    stacklevel=stacklevel + 1,
                )
            return
        self.emit(
            level,
            self.get_prefixed_message(format_message(message, args), show_version),
            stacklevel=stacklevel + 1,
        )

    def emit(
        self,
        level: int,
        message: str,
        *,
        exc_info: Any = None,
        stack_info: bool = False,
        extra: Mapping[str, object] | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Send an already decorated message to the platform logger and debug log.

        ``exc_info``, ``stack_info``, ``extra`` and ``stacklevel`` mean what
        they mean for ``Logger.log``. The debug log gets the traceback too.
        """
        self._platform.log(
            level,
            message,
            exc_info=exc_info,
            stack_info=stack_info,
            extra=extra,
            stacklevel=stacklevel + 1,
        )
        sink = self._debug_log
        if sink is None:
            return
        try:
            sink.log(level, message, exc_info=exc_info)
        except DebugLogError as e:
            self._drop_failed_debug_log(sink, e)

    def _drop_failed_debug_log(self, sink: DebugLog, error: DebugLogError) -> None:
        with self._lock:
            if self._debug_log is sink:
                self._debug_log = None
            with contextlib.suppress(DebugLogError):
                sink.close()
        self._report_debug_log_error(error)

    def fine(self, message: str, *args: Any) -> None:
        """Debug level 1 logging. Use for infrequent messages."""
        self._log(False, FINE, message, args, stacklevel=2)

    def finer(self, message: str, *args: Any) -> None:
        """Debug level 2 logging. Use for somewhat frequent messages."""
        self._log(False, FINER, message, args, stacklevel=2)

    def finest(self, message: str, *args: Any) -> None:
        """Debug level 3 logging. Use for extremely frequent messages."""
        self._log(False, FINEST, message, args, stacklevel=2)

    def info(self, message: str, *args: Any) -> None:
        self._log(False, INFO, message, args, stacklevel=2)

    def warning(self, message: str, *args: Any) -> None:
        self._log(False, WARNING, message, args, stacklevel=2)

    def severe(self, message: str, *args: Any) -> None:
        self._log(False, SEVERE, message, args, stacklevel=2)


# ----------------------------------------------------------------------
# Process-wide instance
# ----------------------------------------------------------------------

_FACADE: PluginLogger | None = None
_FACADE_LOCK = threading.Lock()


def get_facade() -> PluginLogger:
    """Return the process-wide PluginLogger, creating it on first use."""
    global _FACADE
    if _FACADE is not None:
        return _FACADE
    with _FACADE_LOCK:
        if _FACADE is None:
            _FACADE = PluginLogger()
        return _FACADE


def reset_facade(facade: PluginLogger | None = None) -> PluginLogger:
    """Shut down the current PluginLogger and replace it.

    Args:
        facade: Replacement instance. A fresh PluginLogger if omitted.

    Returns:
        The new process-wide instance.
    """
    global _FACADE
    with _FACADE_LOCK:
        if _FACADE is not None:
            _FACADE.shutdown()
        _FACADE = facade if facade is not None else PluginLogger()
        return _FACADE


def init(plugin: HostPlugin) -> None:
    get_facade().init(plugin)


def shutdown() -> None:
    get_facade().shutdown()


def set_debug_level(level: int) -> None:
    get_facade().set_debug_level(level)


def get_debug_level() -> int:
    return get_facade().get_debug_level()


def close_debug_log() -> None:
    get_facade().close_debug_log()


def get_prefixed_message(message: str, show_version: bool) -> str:
    return get_facade().get_prefixed_message(message, show_version)


def set_debug_prefix(prefix: str) -> None:
    get_facade().set_debug_prefix(prefix)


def get_debug_string(message: str) -> str:
    return get_facade().get_debug_string(message)


def get_logger() -> PluginLoggerAdapter:
    return get_facade().get_logger()


def log(show_version: bool, level: int, message: str, *args: Any) -> None:
    get_facade()._log(show_version, level, message, args, stacklevel=2)


def log_static(level: int, message: str, *args: Any) -> None:
    get_facade()._log(False, level, message, args, stacklevel=2)


def fine(message: str, *args: Any) -> None:
    get_facade()._log(False, FINE, message, args, stacklevel=2)


def finer(message: str, *args: Any) -> None:
    get_facade()._log(False, FINER, message, args, stacklevel=2)


def finest(message: str, *args: Any) -> None:
    get_facade()._log(False, FINEST, message, args, stacklevel=2)


def info(message: str, *args: Any) -> None:
    get_facade()._log(False, INFO, message, args, stacklevel=2)


def warning(message: str, *args: Any) -> None:
    get_facade()._log(False, WARNING, message, args, stacklevel=2)


def severe(message: str, *args: Any) -> None:
    get_facade()._log(False, SEVERE, message, args, stacklevel=2)
