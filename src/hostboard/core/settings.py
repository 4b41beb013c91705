"""Hostboard settings.

All configuration lives in :class:`HostboardSettings`.  The defaults
reproduce the reference deployment (an Ansible control node serving the
dashboard on port 9998); every field can be overridden from the
environment with the ``HOSTBOARD_`` prefix or from a ``.env`` file.

Examples:
    >>> s = HostboardSettings(port=8080, data_source="sample")
    >>> sorted(s.widgets)
    ['cpu', 'disk', 'ram', 'services', 'status']

    Overriding a nested widget from the environment::

        HOSTBOARD_WIDGETS='{"uptime": {"script_path": "/srv/uptime.yml"}}'

Tags:
    settings, configuration, pydantic, environment, hostboard
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WidgetSettings(BaseModel):
    """One configured widget: the playbook it runs."""

    script_path: str = Field(min_length=1, description="Playbook path passed to the runner")


def _default_widgets() -> dict[str, WidgetSettings]:
    return {
        "status": WidgetSettings(script_path="/etc/ansible/playbooks/status.yml"),
        "services": WidgetSettings(script_path="/etc/ansible/playbooks/nmap.yml"),
        "cpu": WidgetSettings(script_path="/etc/ansible/playbooks/cpu_usage.yml"),
        "ram": WidgetSettings(script_path="/etc/ansible/playbooks/check_ram_usage.yml"),
        "disk": WidgetSettings(script_path="/etc/ansible/playbooks/chk_rt_var.yml"),
    }


class HostboardSettings(BaseSettings):
    """Settings for the hostboard API, dispatcher and CLI.

    Order of precedence (highest → lowest):
        1. Constructor arguments
        2. Environment variables (``HOSTBOARD_PORT``, etc.)
        3. ``.env`` file
        4. Defaults below
    """

    # ── Server ───────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=9998, description="Bind port")
    debug: bool = Field(default=False, description="Expose exception text in 500 responses")
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool | None = Field(default=None, description="Force JSON logs (None = auto)")
    api_title: str = Field(default="hostboard API", description="OpenAPI title")

    # ── Advertised API location (for the browser client only) ───────────
    api_host: str = Field(default="192.168.1.197", description="Host the client should call")
    api_port: int = Field(default=9998, description="Port the client should call")

    # ── Ansible ──────────────────────────────────────────────────────────
    inventory_path: str = Field(
        default="/etc/ansible/inventory.ini",
        description="Inventory file passed to the playbook runner",
    )
    widgets: dict[str, WidgetSettings] = Field(
        default_factory=_default_widgets,
        description="Widget name -> playbook mapping",
    )
    runner_command: str = Field(default="ansible-playbook", description="Playbook runner executable")
    inventory_command: list[str] = Field(
        default_factory=lambda: ["ansible-inventory", "--list"],
        description="Inventory provider argv",
    )

    # ── Process limits (unset = unbounded) ──────────────────────────────
    command_timeout: float | None = Field(
        default=None, gt=0, description="Seconds before an external process is killed"
    )
    max_concurrent_processes: int | None = Field(
        default=None, ge=1, description="Upper bound on simultaneous external processes"
    )

    # ── Data source ──────────────────────────────────────────────────────
    data_source: Literal["live", "sample"] = Field(
        default="live", description="'live' runs Ansible, 'sample' serves canned data"
    )

    # ── Front end ────────────────────────────────────────────────────────
    static_dir: str = Field(default="dist", description="Directory holding the built front end")

    # ── CORS ─────────────────────────────────────────────────────────────
    cors_enabled: bool = Field(default=False, description="Install the CORS middleware")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")
    cors_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        description="Allowed CORS methods",
    )
    cors_headers: list[str] = Field(
        default=["Content-Type", "Authorization"],
        description="Allowed CORS request headers",
    )

    model_config = SettingsConfigDict(
        env_prefix="HOSTBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    @field_validator("inventory_command")
    @classmethod
    def _inventory_command_not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("inventory_command must name an executable")
        return value
