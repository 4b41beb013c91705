"""
CLI: ``hostboard serve`` - start the API server.
"""

from __future__ import annotations

import os

import typer
import uvicorn

from hostboard.cli.utils import console
from hostboard.core.settings import HostboardSettings


def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address [default: settings]"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port [default: settings]"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on changes"),
    workers: int = typer.Option(1, "--workers", "-w", help="Number of workers"),
    sample: bool = typer.Option(False, "--sample", help="Serve sample data instead of running Ansible"),
) -> None:
    """Start the hostboard REST API server."""
    settings = HostboardSettings()
    bind_host = host or settings.host
    bind_port = port or settings.port

    if sample:
        # create_app reads settings from the environment in each worker
        os.environ["HOSTBOARD_DATA_SOURCE"] = "sample"

    console.print(f"[bold green]Starting hostboard API[/bold green] on {bind_host}:{bind_port}")
    uvicorn.run(
        "hostboard.api:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        workers=workers,
        log_level=settings.log_level.lower(),
    )
