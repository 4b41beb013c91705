"""Tests for hostboard.core.logging."""

from __future__ import annotations

import io
import json

import pytest

from hostboard import __version__
from hostboard.core.logging import LogContext, configure_logging, get_logger


def _lines(buf: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in buf.getvalue().splitlines() if line.strip()]


class TestConfigureLogging:
    def test_json_output_fields(self):
        buf = io.StringIO()
        configure_logging(level="INFO", json_format=True, service="hostboard-test", stream=buf)
        get_logger("tests.logging").info("playbook_started", host="192.168.1.204")

        (record,) = _lines(buf)
        assert record["event"] == "playbook_started"
        assert record["host"] == "192.168.1.204"
        assert record["service.name"] == "hostboard-test"
        assert record["log.level"] == "info"
        assert "@timestamp" in record

    def test_level_filters(self):
        buf = io.StringIO()
        configure_logging(level="WARNING", json_format=True, stream=buf)
        log = get_logger("tests.logging.level")
        log.info("dropped")
        log.warning("kept")
        assert [r["event"] for r in _lines(buf)] == ["kept"]


class TestLogContext:
    def test_context_bound_and_removed(self):
        buf = io.StringIO()
        configure_logging(level="INFO", json_format=True, stream=buf)
        log = get_logger("tests.logging.ctx")
        with LogContext(request_id="req-1"):
            log.info("inside")
        log.info("outside")

        inside, outside = _lines(buf)
        assert inside["request_id"] == "req-1"
        assert "request_id" not in outside


class TestJsonFields:
    def test_logger_name_and_version(self):
        buf = io.StringIO()
        configure_logging(level="INFO", json_format=True, stream=buf)
        get_logger("hostboard.execution.dispatcher").info("executing_command")

        (record,) = _lines(buf)
        assert record["log.logger"] == "hostboard.execution.dispatcher"
        assert record["service.name"] == "hostboard"
        assert record["service.version"] == __version__

    def test_exception_rendered_as_text(self):
        buf = io.StringIO()
        configure_logging(level="INFO", json_format=True, stream=buf)
        log = get_logger("tests.logging.exc")
        try:
            raise RuntimeError("playbook exploded")
        except RuntimeError:
            log.exception("unhandled_exception")

        (record,) = _lines(buf)
        assert "RuntimeError: playbook exploded" in record["exception"]

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(level="LOUD", stream=io.StringIO())
