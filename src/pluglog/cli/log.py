"""Log a single message through the plugin logger."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated, Any

import typer

from pluglog.errors import PluglogError
from pluglog.facade import PluginLogger
from pluglog.formatting import conversions
from pluglog.levels import FINEST, parse_level
from pluglog.plugin import load_plugin_descriptor

CONSOLE_FORMAT = "%(levelname)s: %(message)s"

_INTEGER_CONVERSIONS = frozenset("diouxX")
_FLOAT_CONVERSIONS = frozenset("eEfFgG")


def coerce_arg(value: str, conversion: str | None) -> Any:
    """Turn a command-line argument into the type its conversion expects.

    Integer conversions (``%d``, ``%x``...) get an int, float conversions
    (``%f``, ``%g``...) a float. Values for ``%s``, ``%r`` and ``%c``, surplus
    values, and values that do not parse are passed through as strings.
    """
    if conversion in _INTEGER_CONVERSIONS:
        converters: tuple[type, ...] = (int, float)
    elif conversion in _FLOAT_CONVERSIONS:
        converters = (float,)
    else:
        return value
    for convert in converters:
        try:
            return convert(value)
        except ValueError:
            continue
    return value


def coerce_args(template: str, values: list[str]) -> list[Any]:
    """Coerce each value for the conversion it fills in ``template``."""
    kinds = conversions(template)
    return [coerce_arg(v, kinds[i] if i < len(kinds) else None) for i, v in enumerate(values)]


def log_command(
    message: Annotated[str, typer.Argument(help="Message template (printf-style)")],
    args: Annotated[
        list[str] | None,
        typer.Argument(help="Values substituted into the template"),
    ] = None,
    plugin_path: Annotated[
        Path,
        typer.Option("--plugin", "-p", help="Path to the plugin descriptor JSON"),
    ] = Path("plugin.json"),
    level: Annotated[
        str,
        typer.Option("--level", "-l", help="Severity (FINEST..SEVERE)"),
    ] = "INFO",
    debug_level: Annotated[
        int,
        typer.Option("--debug-level", "-d", help="Debug level 0-3"),
    ] = 0,
    show_version: Annotated[
        bool,
        typer.Option("--show-version", "-V", help="Include the plugin version in the prefix"),
    ] = False,
    debug_prefix: Annotated[
        str | None,
        typer.Option("--debug-prefix", help="Text after the plugin name in debug messages"),
    ] = None,
) -> None:
    """Log one message as the plugin described by --plugin."""
    try:
        severity = parse_level(level)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    platform_logger = logging.getLogger("pluglog.cli.console")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    platform_logger.addHandler(handler)
    platform_logger.setLevel(FINEST)
    platform_logger.propagate = False

    facade = PluginLogger(platform_logger)
    try:
        facade.init(load_plugin_descriptor(plugin_path))
        facade.set_debug_level(debug_level)
        if debug_prefix is not None:
            facade.set_debug_prefix(debug_prefix)
        facade.log(show_version, severity, message, *coerce_args(message, args or []))
    except PluglogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    finally:
        facade.shutdown()
        platform_logger.removeHandler(handler)
        handler.close()
