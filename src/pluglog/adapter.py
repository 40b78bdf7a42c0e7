"""Generic ``log(level, message)`` entry point for the plugin logger.

Code that only knows the stdlib logging API (``logger.info(...)``,
``logger.log(level, msg)``) can still go through the plugin facade by
using the adapter returned from ``pluglog.get_logger()``. Messages are
passed through without argument substitution.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pluglog.levels import INFO, debug_threshold

if TYPE_CHECKING:
    from pluglog.facade import PluginLogger


class PluginLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that applies the facade's debug gating.

    Debug severities (FINE, FINER, FINEST) are dropped unless the facade's
    debug level allows them, in which case they are emitted at INFO with the
    debug prefix. Other severities are emitted unchanged at their own level;
    when the facade has ``prefix_generic`` set they get the plugin prefix too.
    """

    def __init__(self, facade: PluginLogger) -> None:
        super().__init__(facade.platform_logger, {})
        self.facade = facade

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Emit ``msg`` through the facade.

        ``exc_info``, ``stack_info``, ``extra`` and ``stacklevel`` are passed
        on to the platform logger, so ``exception()`` keeps its traceback.
        """
        message = str(msg)
        stacklevel = kwargs.pop("stacklevel", 1)
        threshold = debug_threshold(level)
        if threshold is not None:
            if self.facade.debug_level >= threshold:
                self.facade.emit(
                    INFO, self.facade.get_debug_string(message), stacklevel=stacklevel + 1, **kwargs
                )
            return
        if self.facade.prefix_generic:
            message = self.facade.get_prefixed_message(message, False)
        self.facade.emit(level, message, stacklevel=stacklevel + 1, **kwargs)
