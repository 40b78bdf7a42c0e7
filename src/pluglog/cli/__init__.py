"""Unified CLI for pluglog.

Provides a single entry point for shell scripts run by the host:

    pluglog log "message %s" arg --plugin plugin.json   # Log one message
    pluglog plugin describe --plugin plugin.json        # Show plugin identity
"""

import typer

from pluglog.cli import log, plugin

app = typer.Typer(
    name="pluglog",
    help="pluglog: plugin-prefixed logging with tiered debug output",
    no_args_is_help=True,
)

app.command("log")(log.log_command)
app.add_typer(plugin.app)


def main() -> None:
    """Main entry point for the pluglog CLI."""
    app()


if __name__ == "__main__":
    main()
