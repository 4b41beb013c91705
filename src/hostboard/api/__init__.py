"""
REST API layer for hostboard.

Quick start::

    from hostboard.api import create_app

    app = create_app()  # ready for uvicorn

Routers handle only HTTP transport concerns; the work is done by the
data source (``hostboard.sources``) and the dispatcher
(``hostboard.execution``).
"""

from hostboard.api.app import create_app

__all__ = ["create_app"]
