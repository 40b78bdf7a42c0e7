"""Host plugin handles.

The facade only needs three things from the plugin that initializes it:
its name, its version and a writable data directory. Hosts pass their own
plugin object (anything matching HostPlugin) or a PluginDescriptor loaded
from a JSON descriptor file such as:

    {"name": "MyPlugin", "version": "1.2.3", "data_dir": "plugins/MyPlugin"}
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from pluglog.errors import PluginDescriptorError
from pluglog.io import read_json
from pluglog.jsonschema import validate
from pluglog.logging import get_logger

_logger = get_logger("plugin")

DESCRIPTOR_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["name", "version"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "version": {"type": "string", "minLength": 1},
        "data_dir": {"type": "string", "minLength": 1},
    },
}


@runtime_checkable
class HostPlugin(Protocol):
    """What the facade reads from the initializing plugin."""

    @property
    def name(self) -> str: ...

    @property
    def version(self) -> str: ...

    @property
    def data_dir(self) -> Path: ...


@dataclass(frozen=True)
class PluginDescriptor:
    """A plain host plugin handle.

    Attributes:
        name: Plugin name used in message prefixes.
        version: Plugin version string.
        data_dir: Directory the plugin may write to (holds debug.log).
    """

    name: str
    version: str
    data_dir: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "data_dir", Path(self.data_dir))


def load_plugin_descriptor(path: Path | str) -> PluginDescriptor:
    """Load and validate a JSON plugin descriptor.

    A relative ``data_dir`` is resolved against the descriptor's directory;
    a missing one defaults to ``<descriptor dir>/<name>``.

    Raises:
        PluginDescriptorError: If the file is missing, not JSON, or does
            not match DESCRIPTOR_SCHEMA.
    """
    path = Path(path)
    data = read_json(path)
    if data is None:
        raise PluginDescriptorError(f"Could not read plugin descriptor {path}")

    errors = validate(data, DESCRIPTOR_SCHEMA)
    if errors:
        raise PluginDescriptorError(f"Invalid plugin descriptor {path}: " + "; ".join(errors))

    base = path.parent
    data_dir = Path(data.get("data_dir") or data["name"])
    if not data_dir.is_absolute():
        data_dir = base / data_dir

    descriptor = PluginDescriptor(name=data["name"], version=data["version"], data_dir=data_dir)
    _logger.debug("Loaded plugin descriptor %s", descriptor)
    return descriptor
