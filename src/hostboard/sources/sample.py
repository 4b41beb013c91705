"""
Sample data source - canned dashboard data for demos and UI work.

Serves a fixed configuration, a two-group inventory and per-playbook
widget payloads without touching Ansible.  Widget payloads are returned
through the same ``{"output": <text>}`` contract as live runs, with the
payload rendered as JSON text.
"""

from __future__ import annotations

import json
from typing import Any

from hostboard.core.errors import MissingParameterError
from hostboard.core.logging import get_logger
from hostboard.core.models import ApiEndpoint, ConfigDocument
from hostboard.core.settings import WidgetSettings
from hostboard.execution.dispatcher import DispatchResult

logger = get_logger(__name__)

_SSH_KEY = "/etc/ansible/.ssh/id_ed25519"


def _host(address: str) -> dict[str, str]:
    return {
        "ansible_host": address,
        "ansible_user": "pruta",
        "ansible_become_pass": "******",
        "ansible_ssh_private_key_file": _SSH_KEY,
    }


SAMPLE_CONFIG = ConfigDocument(
    api=ApiEndpoint(host="localhost", port=3000),
    inventory_path="/etc/ansible/inventory.ini",
    widgets={
        "status": WidgetSettings(script_path="/etc/ansible/playbooks/status.yml"),
        "services": WidgetSettings(script_path="/etc/ansible/playbooks/nmap.yml"),
        "cpu": WidgetSettings(script_path="/etc/ansible/playbooks/cpu_usage.yml"),
        "ram": WidgetSettings(script_path="/etc/ansible/playbooks/check_ram_usage.yml"),
        "disk": WidgetSettings(script_path="/etc/ansible/playbooks/chk_rt_var.yml"),
    },
)

SAMPLE_INVENTORY: dict[str, Any] = {
    "nuc_sensors": {
        "hosts": {addr: _host(addr) for addr in ("192.168.1.204", "192.168.1.206")},
    },
    "elasticsearch": {
        "hosts": {
            addr: _host(addr)
            for addr in (
                "192.168.1.210",
                "192.168.1.211",
                "192.168.1.212",
                "192.168.1.213",
                "192.168.1.230",
                "192.168.1.231",
                "192.168.1.240",
                "192.168.1.241",
            )
        },
    },
}

# Checked in order; first key contained in the script identifier wins.
SAMPLE_WIDGET_DATA: list[tuple[str, dict[str, Any]]] = [
    (
        "chk_rt_var",
        {
            "disk_usage": {
                "stdout_lines": [
                    "Filesystem                         Size  Used Avail Use% Mounted on",
                    "/dev/mapper/ubuntu--vg-ubuntu--lv   98G   17G   77G  18% /",
                    "/dev/mapper/ubuntu--vg-lv--0       2.8T  2.4T  318G  89% /var",
                ]
            }
        },
    ),
    (
        "check_ram_usage",
        {
            "ram_usage_percent": {"stdout": "42.17"},
            "total_ram_gb": {"stdout": "30"},
            "available_ram_mb": {"stdout": "17368"},
        },
    ),
    ("cpu_usage", {"cpu_usage": {"stdout": "12.48"}}),
    ("nmap", {"nmap_result": {"stdout": "22/tcp open  ssh\n80/tcp open  http\n443/tcp open https"}}),
    (
        "status",
        {"status": {"stdout": "UP - Uptime: 39 days, 15:01, 1 user, load average: 0.26, 0.25, 0.28"}},
    ),
]


def sample_widget_payload(script_identifier: str) -> dict[str, Any]:
    for key, payload in SAMPLE_WIDGET_DATA:
        if key in script_identifier:
            return payload
    return {"status": f"Mock data for {script_identifier}"}


class SampleSource:
    """Static data with the same interface as :class:`LiveSource`."""

    name = "sample"

    async def get_config(self) -> ConfigDocument:
        return SAMPLE_CONFIG.model_copy(deep=True)

    async def get_inventory(self) -> Any:
        return json.loads(json.dumps(SAMPLE_INVENTORY))

    async def run_widget(self, script_identifier: str | None, host: str | None) -> DispatchResult:
        if not script_identifier or not host:
            raise MissingParameterError()
        logger.info("sample_widget", script=script_identifier, host=host)
        return DispatchResult(output=json.dumps(sample_widget_payload(script_identifier), indent=2))
