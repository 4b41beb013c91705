"""
Inventory shaping - turns an inventory document into host rows.

The dispatcher passes the inventory through untouched; this module is
only used by presentation layers (the CLI ``hosts`` command) that want a
flat table.  Two document shapes are understood:

``ansible-inventory --list`` output::

    {"_meta": {"hostvars": {"10.0.0.1": {"ansible_user": "ops"}}},
     "all": {"children": ["web"]},
     "web": {"hosts": ["10.0.0.1"]}}

Grouped mapping (the sample data shape)::

    {"web": {"hosts": {"10.0.0.1": {"ansible_user": "ops"}}}}

Anything else under a group is ignored; groups without hosts yield no
rows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

SECRET_VARS = frozenset({"ansible_become_pass", "ansible_password", "ansible_ssh_pass"})


@dataclass(frozen=True)
class HostRow:
    """One host as listed under one group."""

    host: str
    group: str
    vars: dict[str, Any] = field(default_factory=dict)

    @property
    def address(self) -> str:
        return str(self.vars.get("ansible_host", self.host))

    @property
    def user(self) -> str | None:
        return self.vars.get("ansible_user")

    def redacted_vars(self) -> dict[str, Any]:
        return {k: ("******" if k in SECRET_VARS else v) for k, v in self.vars.items()}


def flatten_inventory(inventory: Any) -> list[HostRow]:
    """List every host once per group it appears in, in document order."""
    if not isinstance(inventory, dict):
        return []

    hostvars = inventory.get("_meta", {}).get("hostvars", {}) if isinstance(inventory.get("_meta"), dict) else {}
    rows: list[HostRow] = []

    for group, body in inventory.items():
        if group == "_meta" or not isinstance(body, dict):
            continue
        hosts = body.get("hosts")
        if isinstance(hosts, dict):
            for name, host_vars in hosts.items():
                merged = {**hostvars.get(name, {}), **(host_vars or {})}
                rows.append(HostRow(host=name, group=group, vars=merged))
        elif isinstance(hosts, list):
            for name in hosts:
                rows.append(HostRow(host=name, group=group, vars=dict(hostvars.get(name, {}))))

    return rows
