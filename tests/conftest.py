"""Shared fixtures for pluglog tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from pluglog import debug_log
from pluglog.facade import PluginLogger, reset_facade
from pluglog.levels import FINEST
from pluglog.plugin import PluginDescriptor

NAME = "Logging-Test"
VERSION = "1.2.3-test"
PLATFORM_LOGGER = "pluglog.test.platform"


@pytest.fixture(autouse=True)
def _reset_state() -> Iterator[None]:
    """Start and end every test with a fresh facade and no debug log."""
    debug_log.shutdown()
    yield
    reset_facade()
    debug_log.shutdown()


@pytest.fixture
def plugin(tmp_path: Path) -> PluginDescriptor:
    return PluginDescriptor(
        name=NAME,
        version=VERSION,
        data_dir=tmp_path / "server" / "plugins" / NAME,
    )


@pytest.fixture
def platform_logger(caplog: pytest.LogCaptureFixture) -> logging.Logger:
    """Test platform logger with every level captured by caplog."""
    caplog.set_level(FINEST, logger=PLATFORM_LOGGER)
    return logging.getLogger(PLATFORM_LOGGER)


@pytest.fixture
def facade(platform_logger: logging.Logger, plugin: PluginDescriptor) -> PluginLogger:
    """Process-wide facade on the test platform logger, initialized for ``plugin``."""
    instance = reset_facade(PluginLogger(platform_logger, prefix_generic=False))
    instance.init(plugin)
    return instance


@pytest.fixture
def platform_records(caplog: pytest.LogCaptureFixture):
    """Callable returning (levelno, message) pairs emitted on the platform logger."""

    def _records() -> list[tuple[int, str]]:
        return [(r.levelno, r.getMessage()) for r in caplog.records if r.name == PLATFORM_LOGGER]

    return _records


@pytest.fixture
def platform_log_records(caplog: pytest.LogCaptureFixture):
    """Callable returning the LogRecords emitted on the platform logger."""

    def _records() -> list[logging.LogRecord]:
        return [r for r in caplog.records if r.name == PLATFORM_LOGGER]

    return _records
