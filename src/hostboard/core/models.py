"""Response models shared by the API, data sources and client."""

from __future__ import annotations

from pydantic import BaseModel, Field

from hostboard.core.settings import WidgetSettings


class ApiEndpoint(BaseModel):
    """Where the browser client should send its requests."""

    host: str
    port: int


class ConfigDocument(BaseModel):
    """The dashboard configuration served at ``/config``."""

    api: ApiEndpoint
    inventory_path: str
    widgets: dict[str, WidgetSettings] = Field(default_factory=dict)


class WidgetOutput(BaseModel):
    """Successful widget run."""

    output: str


class ErrorBody(BaseModel):
    """Error envelope for every non-2xx response."""

    error: str = Field(description="Short error summary")
    details: str | None = Field(default=None, description="Underlying failure message")
