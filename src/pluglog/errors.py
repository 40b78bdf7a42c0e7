"""Exceptions raised by pluglog."""


class PluglogError(Exception):
    """Base exception for all pluglog errors."""


class InvalidDebugLevelError(PluglogError, ValueError):
    """Debug level outside the 0-3 range."""


class MessageFormatError(PluglogError, ValueError):
    """Message template could not be formatted with the given arguments."""


class FormatArgumentMismatchError(MessageFormatError):
    """Message template has more placeholders than arguments supplied."""

    def __init__(self, template: str, expected: int, supplied: int) -> None:
        super().__init__(
            f"Format specifier count {expected} exceeds {supplied} argument(s): {template!r}"
        )
        self.template = template
        self.expected = expected
        self.supplied = supplied


class DebugLogError(PluglogError, OSError):
    """Debug log file could not be opened, written or closed."""


class PluginDescriptorError(PluglogError):
    """Plugin descriptor is missing, unreadable or invalid."""
