"""Tests for GET /config."""

from __future__ import annotations

from fastapi.testclient import TestClient

from hostboard.api.app import create_app
from hostboard.core.settings import HostboardSettings, WidgetSettings


class TestConfigEndpoint:
    def test_returns_reference_widgets(self, client):
        resp = client.get("/config")
        assert resp.status_code == 200
        body = resp.json()
        assert set(body["widgets"]) == {"status", "services", "cpu", "ram", "disk"}
        assert body["widgets"]["cpu"] == {"script_path": "/etc/ansible/playbooks/cpu_usage.yml"}

    def test_api_and_inventory_path(self, client):
        body = client.get("/config").json()
        assert body["api"] == {"host": "192.168.1.197", "port": 9998}
        assert body["inventory_path"] == "/etc/ansible/inventory.ini"

    def test_never_spawns_process(self, client, fake_runner):
        client.get("/config")
        assert fake_runner.calls == []

    def test_exactly_configured_keys(self, fake_runner):
        s = HostboardSettings(
            _env_file=None,
            widgets={"uptime": WidgetSettings(script_path="/srv/uptime.yml")},
        )
        client = TestClient(create_app(settings=s, runner=fake_runner))
        body = client.get("/config").json()
        assert body["widgets"] == {"uptime": {"script_path": "/srv/uptime.yml"}}
