"""
CLI layer for hostboard.

Provides a Typer application for serving the dashboard API and for
reading config, inventory and widget output from a terminal.

Entry point::

    hostboard --help
"""

from hostboard.cli.app import app

__all__ = ["app"]
