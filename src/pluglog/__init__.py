"""pluglog: static plugin logging for game-server plugins.

This package provides:
- A process-wide logger that prefixes messages with the plugin name/version
- Tiered debug logging (levels 0-3) mirrored to <data_dir>/debug.log
- A stdlib LoggerAdapter for code that only speaks the logging API
"""

__version__ = "0.1.0"

from pluglog.errors import (
    DebugLogError,
    FormatArgumentMismatchError,
    InvalidDebugLevelError,
    MessageFormatError,
    PluginDescriptorError,
    PluglogError,
)
from pluglog.facade import (
    PluginLogger,
    close_debug_log,
    fine,
    finer,
    finest,
    get_debug_level,
    get_debug_string,
    get_facade,
    get_logger,
    get_prefixed_message,
    info,
    init,
    log,
    log_static,
    reset_facade,
    set_debug_level,
    set_debug_prefix,
    severe,
    shutdown,
    warning,
)
from pluglog.levels import CONFIG, FINE, FINER, FINEST, INFO, SEVERE, WARNING
from pluglog.plugin import HostPlugin, PluginDescriptor, load_plugin_descriptor

__all__ = [
    "CONFIG",
    "FINE",
    "FINER",
    "FINEST",
    "INFO",
    "SEVERE",
    "WARNING",
    "DebugLogError",
    "FormatArgumentMismatchError",
    "HostPlugin",
    "InvalidDebugLevelError",
    "MessageFormatError",
    "PluginDescriptor",
    "PluginDescriptorError",
    "PluginLogger",
    "PluglogError",
    "close_debug_log",
    "fine",
    "finer",
    "finest",
    "get_debug_level",
    "get_debug_string",
    "get_facade",
    "get_logger",
    "get_prefixed_message",
    "info",
    "init",
    "load_plugin_descriptor",
    "log",
    "log_static",
    "reset_facade",
    "set_debug_level",
    "set_debug_prefix",
    "severe",
    "shutdown",
    "warning",
]
