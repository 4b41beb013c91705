"""
CLI utility helpers - source selection and output formatting.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import Any, NoReturn, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from hostboard.client import DashboardClient, DashboardClientError
from hostboard.core.errors import HostboardError
from hostboard.core.settings import HostboardSettings
from hostboard.sources import DashboardSource, RemoteSource, SampleSource, create_source

console = Console()
err_console = Console(stderr=True)

T = TypeVar("T")


# ── Source helper ────────────────────────────────────────────────────────


@asynccontextmanager
async def open_source(*, api_url: str | None = None, remote: bool = False, sample: bool = False):
    """Yield the data source a command should read from.

    ``--sample`` wins over ``--remote``/``--api-url``; with neither, Ansible
    runs locally.
    """
    if sample:
        yield SampleSource()
        return
    if remote or api_url:
        source = RemoteSource(DashboardClient(api_url))
        try:
            yield source
        finally:
            await source.aclose()
        return
    yield create_source(HostboardSettings())


def run_with_source(
    action: Callable[[DashboardSource], Awaitable[T]],
    *,
    api_url: str | None = None,
    remote: bool = False,
    sample: bool = False,
) -> T:
    """Run *action* against the selected source, exiting 1 on dashboard errors."""

    async def _main() -> T:
        async with open_source(api_url=api_url, remote=remote, sample=sample) as source:
            return await action(source)

    try:
        return asyncio.run(_main())
    except HostboardError as exc:
        fail(exc.code, exc.message, exc.details)
    except DashboardClientError as exc:
        fail("API", exc.message)


def fail(code: str, message: str, details: str | None = None) -> NoReturn:
    err_console.print(f"[bold red]Error[/bold red] ({code}): {message}")
    if details:
        err_console.print(details, markup=False, highlight=False)
    raise typer.Exit(code=1)


# ── Output helpers ───────────────────────────────────────────────────────


def _to_jsonable(obj: Any) -> Any:
    """Convert pydantic models and dataclasses to plain data; JSON passes through."""
    if hasattr(obj, "model_dump"):
        return obj.model_dump()
    if hasattr(obj, "__dataclass_fields__"):
        return asdict(obj)
    if isinstance(obj, list | tuple):
        return [_to_jsonable(item) for item in obj]
    return obj


def output_json(data: Any) -> None:
    payload = _to_jsonable(data)
    console.print_json(json.dumps(payload, default=str))


def print_table(rows: list[dict[str, Any]], *, title: str = "") -> None:
    """Render a list of dicts as a Rich table."""
    if not rows:
        console.print("[dim]No items.[/dim]")
        return
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in rows[0]:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*("" if v is None else str(v) for v in row.values()))
    console.print(table)
