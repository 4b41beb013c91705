"""
FastAPI application factory.

``create_app()`` wires middleware, routers, error handlers and the data
source into a single ``FastAPI`` instance.  The front-end catch-all
router is included last so API routes always win.

Tags:
    hostboard, api, app-factory, FastAPI
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hostboard import __version__
from hostboard.api.deps import get_settings
from hostboard.api.middleware.errors import hostboard_error_handler, unhandled_exception_handler
from hostboard.api.middleware.logging import RequestLoggingMiddleware
from hostboard.core.errors import HostboardError
from hostboard.core.logging import configure_logging, get_logger
from hostboard.core.settings import HostboardSettings
from hostboard.execution.runner import ProcessRunner
from hostboard.sources.protocol import DashboardSource, create_source


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan - logging setup and startup / shutdown log lines."""
    settings: HostboardSettings = app.state.settings
    configure_logging(level=settings.log_level, json_format=settings.log_json, service="hostboard")
    log = get_logger("hostboard.api")
    log.info(
        "hostboard API starting",
        version=app.version,
        source=app.state.source.name,
        url=f"http://{settings.host}:{settings.port}",
    )
    yield
    log.info("hostboard API shutting down")


def create_app(
    *,
    settings: HostboardSettings | None = None,
    source: DashboardSource | None = None,
    runner: ProcessRunner | None = None,
) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    settings : HostboardSettings | None
        Override settings (useful for testing).  When ``None`` the cached
        singleton from :func:`get_settings` is used.
    source : DashboardSource | None
        Data source to serve from.  Defaults to the one selected by
        ``settings.data_source``.
    runner : ProcessRunner | None
        Process runner for the default live source (tests pass a fake).
    """

    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.source = source or create_source(settings, runner=runner)

    # Override DI so endpoints use the provided settings
    app.dependency_overrides[get_settings] = lambda: settings

    # ── Middleware ───────────────────────────────────────────────────
    app.add_middleware(RequestLoggingMiddleware)
    if settings.cors_enabled:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=settings.cors_methods,
            allow_headers=settings.cors_headers,
        )

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(HostboardError, hostboard_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Routers ──────────────────────────────────────────────────────
    from hostboard.api.routers import config, frontend, inventory, widgets

    app.include_router(config.router, tags=["config"])
    app.include_router(inventory.router, tags=["inventory"])
    app.include_router(widgets.router, tags=["widgets"])
    app.include_router(frontend.router)

    return app
