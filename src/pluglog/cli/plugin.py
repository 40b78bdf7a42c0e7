"""Plugin descriptor commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from pluglog.errors import PluginDescriptorError
from pluglog.facade import PluginLogger
from pluglog.plugin import load_plugin_descriptor

app = typer.Typer(
    name="plugin",
    help="Plugin descriptor utilities",
    no_args_is_help=True,
)


@app.command("describe")
def describe(
    plugin_path: Annotated[
        Path,
        typer.Option("--plugin", "-p", help="Path to the plugin descriptor JSON"),
    ] = Path("plugin.json"),
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show the identity and debug log location of a plugin."""
    try:
        descriptor = load_plugin_descriptor(plugin_path)
    except PluginDescriptorError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    debug_file = PluginLogger.get_debug_file_name(descriptor)
    if json_output:
        output = {
            "name": descriptor.name,
            "version": descriptor.version,
            "data_dir": str(descriptor.data_dir),
            "debug_log": str(debug_file),
        }
        typer.echo(json.dumps(output, indent=2))
        return

    typer.echo(f"Name:      {descriptor.name}")
    typer.echo(f"Version:   {descriptor.version}")
    typer.echo(f"Data dir:  {descriptor.data_dir}")
    typer.echo(f"Debug log: {debug_file}")
