"""
Root Typer application for the hostboard CLI.
"""

from __future__ import annotations

import sys

import typer
from typer import Typer

from hostboard.core.logging import configure_logging

app = Typer(
    name="hostboard",
    help="hostboard - run Ansible widgets against inventory hosts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from hostboard import __version__

        typer.echo(f"hostboard {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="HOSTBOARD_LOG_LEVEL", help="Log level"),
    log_json: bool = typer.Option(False, "--log-json", help="Emit JSON logs"),
) -> None:
    """hostboard CLI - serve the dashboard API or query it from a terminal."""
    configure_logging(level=log_level, json_format=log_json, service="hostboard", stream=sys.stderr)


# ── Command registration ─────────────────────────────────────────────────

from hostboard.cli.dashboard import list_hosts, run_widget, show_config, show_inventory  # noqa: E402
from hostboard.cli.serve import serve  # noqa: E402

app.command("serve", help="Start the API server.")(serve)
app.command("config", help="Show the configured widgets.")(show_config)
app.command("inventory", help="Print the inventory as JSON.")(show_inventory)
app.command("hosts", help="List inventory hosts.")(list_hosts)
app.command("run", help="Run a widget against a host.")(run_widget)
