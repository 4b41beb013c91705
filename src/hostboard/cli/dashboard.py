"""
CLI: ``hostboard config | inventory | hosts | run`` - read the dashboard
from a terminal.

Every command reads from one of three sources: local Ansible (default),
a running hostboard server (``--remote`` / ``--api-url``), or canned
sample data (``--sample``).
"""

from __future__ import annotations

import typer

from hostboard.cli.utils import console, output_json, print_table, run_with_source
from hostboard.ops.inventory import flatten_inventory

_API_URL = typer.Option(None, "--api-url", help="hostboard server URL (implies --remote)")
_REMOTE = typer.Option(False, "--remote", help="Read from a hostboard server (HOSTBOARD_API_BASE_URL)")
_SAMPLE = typer.Option(False, "--sample", help="Use sample data")
_JSON = typer.Option(False, "--json", help="Print raw JSON")


def show_config(
    api_url: str | None = _API_URL,
    remote: bool = _REMOTE,
    sample: bool = _SAMPLE,
    json_out: bool = _JSON,
) -> None:
    """Show the configured widgets."""

    async def action(source):
        return await source.get_config()

    config = run_with_source(action, api_url=api_url, remote=remote, sample=sample)
    if json_out:
        output_json(config)
        return

    console.print(f"[bold]API[/bold] {config.api.host}:{config.api.port}")
    console.print(f"[bold]Inventory[/bold] {config.inventory_path}")
    print_table(
        [{"widget": name, "script_path": w.script_path} for name, w in config.widgets.items()],
        title="Widgets",
    )


def show_inventory(
    api_url: str | None = _API_URL,
    remote: bool = _REMOTE,
    sample: bool = _SAMPLE,
) -> None:
    """Print the inventory document as JSON."""

    async def action(source):
        return await source.get_inventory()

    output_json(run_with_source(action, api_url=api_url, remote=remote, sample=sample))


def list_hosts(
    group: str | None = typer.Option(None, "--group", "-g", help="Only hosts in this group"),
    api_url: str | None = _API_URL,
    remote: bool = _REMOTE,
    sample: bool = _SAMPLE,
) -> None:
    """List inventory hosts, one row per group membership."""

    async def action(source):
        return await source.get_inventory()

    rows = flatten_inventory(run_with_source(action, api_url=api_url, remote=remote, sample=sample))
    if group:
        rows = [r for r in rows if r.group == group]
    print_table(
        [{"host": r.host, "group": r.group, "address": r.address, "user": r.user} for r in rows],
        title="Hosts",
    )


def run_widget(
    widget: str = typer.Argument(..., help="Widget name, playbook path or playbook file name"),
    host: str = typer.Option(..., "--host", "-H", help="Inventory host to limit the run to"),
    api_url: str | None = _API_URL,
    remote: bool = _REMOTE,
    sample: bool = _SAMPLE,
    json_out: bool = _JSON,
) -> None:
    """Run one widget's playbook against HOST and print its output."""

    async def action(source):
        return await source.run_widget(widget, host)

    result = run_with_source(action, api_url=api_url, remote=remote, sample=sample)
    if json_out:
        output_json(result.to_dict())
    else:
        console.print(result.output, markup=False, highlight=False, end="")
