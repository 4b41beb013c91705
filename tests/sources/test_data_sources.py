"""Tests for the live, sample and remote data sources."""

from __future__ import annotations

import json

import httpx
import pytest

from hostboard.client import DashboardClient, DashboardClientError
from hostboard.core.errors import MissingParameterError, UnknownOperationError
from hostboard.core.models import ConfigDocument
from hostboard.core.settings import HostboardSettings
from hostboard.sources import DashboardSource, LiveSource, RemoteSource, SampleSource, create_source
from hostboard.sources.sample import SAMPLE_CONFIG, SAMPLE_INVENTORY, sample_widget_payload


class TestCreateSource:
    def test_live_by_default(self, settings, fake_runner):
        source = create_source(settings, runner=fake_runner)
        assert isinstance(source, LiveSource)
        assert source.dispatcher.runner is fake_runner

    def test_sample(self):
        source = create_source(HostboardSettings(_env_file=None, data_source="sample"))
        assert isinstance(source, SampleSource)

    @pytest.mark.asyncio
    async def test_protocol(self, settings, fake_runner):
        remote = RemoteSource(DashboardClient("http://hostboard.test"))
        try:
            for source in (SampleSource(), LiveSource(settings, runner=fake_runner), remote):
                assert isinstance(source, DashboardSource)
        finally:
            await remote.aclose()


class TestLiveSource:
    @pytest.mark.asyncio
    async def test_config_from_settings(self, settings, fake_runner):
        config = await LiveSource(settings, runner=fake_runner).get_config()
        assert config.api.host == "192.168.1.197"
        assert config.widgets["ram"].script_path == "/etc/ansible/playbooks/check_ram_usage.yml"
        assert fake_runner.calls == []

    @pytest.mark.asyncio
    async def test_widget_runs_playbook(self, settings, fake_runner):
        fake_runner.stdout = "ok"
        result = await LiveSource(settings, runner=fake_runner).run_widget("ram", "192.168.1.206")
        assert result.output == "ok"
        assert fake_runner.calls[0][1] == "/etc/ansible/playbooks/check_ram_usage.yml"

    @pytest.mark.asyncio
    async def test_inventory_runs_provider(self, settings, fake_runner):
        fake_runner.stdout = "{}"
        assert await LiveSource(settings, runner=fake_runner).get_inventory() == {}
        assert fake_runner.calls == [("ansible-inventory", "--list")]


class TestSampleSource:
    @pytest.mark.asyncio
    async def test_config(self):
        config = await SampleSource().get_config()
        assert config.api.port == 3000
        assert set(config.widgets) == {"status", "services", "cpu", "ram", "disk"}

    @pytest.mark.asyncio
    async def test_config_is_a_copy(self):
        config = await SampleSource().get_config()
        config.widgets.pop("cpu")
        assert "cpu" in SAMPLE_CONFIG.widgets

    @pytest.mark.asyncio
    async def test_inventory_groups(self):
        inventory = await SampleSource().get_inventory()
        assert len(inventory["nuc_sensors"]["hosts"]) == 2
        assert len(inventory["elasticsearch"]["hosts"]) == 8
        inventory.clear()
        assert SAMPLE_INVENTORY

    @pytest.mark.asyncio
    async def test_widget_output_is_json_text(self):
        result = await SampleSource().run_widget("/etc/ansible/playbooks/cpu_usage.yml", "h")
        assert json.loads(result.output) == {"cpu_usage": {"stdout": "12.48"}}

    @pytest.mark.asyncio
    async def test_missing_parameters(self):
        with pytest.raises(MissingParameterError):
            await SampleSource().run_widget("cpu_usage.yml", "")

    @pytest.mark.parametrize(
        ("identifier", "key"),
        [
            ("chk_rt_var.yml", "disk_usage"),
            ("check_ram_usage.yml", "ram_usage_percent"),
            ("nmap.yml", "nmap_result"),
            ("status.yml", "status"),
        ],
    )
    def test_payload_lookup(self, identifier, key):
        assert key in sample_widget_payload(identifier)

    def test_payload_fallback(self):
        assert sample_widget_payload("other.yml") == {"status": "Mock data for other.yml"}


def _remote(handler) -> RemoteSource:
    return RemoteSource(DashboardClient("http://hostboard.test", transport=httpx.MockTransport(handler)))


class TestRemoteSource:
    @pytest.mark.asyncio
    async def test_config(self):
        body = SAMPLE_CONFIG.model_dump()

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/config"
            return httpx.Response(200, json=body)

        source = _remote(handler)
        try:
            config = await source.get_config()
        finally:
            await source.aclose()
        assert isinstance(config, ConfigDocument)
        assert config == SAMPLE_CONFIG

    @pytest.mark.asyncio
    async def test_widget(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["host"] == "192.168.1.204"
            return httpx.Response(200, json={"output": "PLAY RECAP"})

        source = _remote(handler)
        try:
            result = await source.run_widget("cpu", "192.168.1.204")
        finally:
            await source.aclose()
        assert result.output == "PLAY RECAP"

    @pytest.mark.asyncio
    async def test_server_error_surfaces(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": "Unknown scriptPath"})

        source = _remote(handler)
        try:
            with pytest.raises(DashboardClientError, match="404 - Unknown scriptPath"):
                await source.run_widget("evil.yml", "h")
        finally:
            await source.aclose()


class TestSampleSourceDoesNotResolve:
    @pytest.mark.asyncio
    async def test_any_identifier_answers(self):
        # sample data has no allowlist; unknown names get the fallback payload
        result = await SampleSource().run_widget("whatever.yml", "h")
        assert "Mock data for whatever.yml" in result.output

    def test_live_rejects_same_identifier(self, settings):
        from hostboard.execution.dispatcher import OperationDispatcher

        with pytest.raises(UnknownOperationError):
            OperationDispatcher(settings).resolve("whatever.yml")
