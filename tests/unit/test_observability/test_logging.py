"""Unit tests for structured logging setup."""

import io
import json
import logging
from collections.abc import Generator

import pytest
import structlog

from picshare.observability.logging import configure_logging, session_context
from picshare.settings import AppSettings


@pytest.fixture(autouse=True)
def restore_structlog() -> Generator[None, None, None]:
    """Return structlog to its defaults after each test."""
    yield
    structlog.reset_defaults()


def read_records(stream: io.StringIO) -> list[dict[str, object]]:
    """Parse every JSON line written to the stream."""
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_lines(self) -> None:
        """JSON output carries event, level, timestamp and bound keys."""
        stream = io.StringIO()
        configure_logging(AppSettings(log_json=True, log_level="INFO"), output=stream)

        structlog.get_logger().bind(component="store").info("state_transition")

        [record] = read_records(stream)
        assert record["event"] == "state_transition"
        assert record["level"] == "info"
        assert record["component"] == "store"
        assert "timestamp" in record

    def test_level_from_settings(self) -> None:
        """Events below the configured level are dropped."""
        stream = io.StringIO()
        level = configure_logging(AppSettings(log_level="WARNING"), output=stream)

        log = structlog.get_logger()
        log.info("feed_fetch_started")
        log.warning("feed_fetch_failed")

        assert level == logging.WARNING
        assert [r["event"] for r in read_records(stream)] == ["feed_fetch_failed"]

    def test_verbose_forces_debug(self) -> None:
        """verbose=True logs debug events whatever the setting says."""
        stream = io.StringIO()
        level = configure_logging(
            AppSettings(log_level="ERROR"), verbose=True, output=stream
        )

        structlog.get_logger().debug("event_ignored")

        assert level == logging.DEBUG
        assert read_records(stream)[0]["event"] == "event_ignored"

    def test_console_format_override(self) -> None:
        """json_logs=False switches to the console renderer."""
        stream = io.StringIO()
        configure_logging(AppSettings(log_json=True), json_logs=False, output=stream)

        structlog.get_logger().info("program_started", photos=2)

        line = stream.getvalue().strip()
        assert "program_started" in line
        assert "photos=2" in line
        assert not line.startswith("{")

    def test_quiets_http_stack(self) -> None:
        """httpx request logging stays at WARNING or above."""
        configure_logging(AppSettings(log_level="DEBUG"), output=io.StringIO())

        assert logging.getLogger("httpx").level == logging.WARNING


class TestSessionContext:
    """Tests for session_context."""

    def test_binds_and_unbinds(self) -> None:
        """The session id is attached only inside the block."""
        stream = io.StringIO()
        configure_logging(AppSettings(log_json=True), output=stream)
        log = structlog.get_logger()

        with session_context("abc123") as session_id:
            log.info("show_complete")
        log.info("after_session")

        inside, after = read_records(stream)
        assert session_id == "abc123"
        assert inside["session_id"] == "abc123"
        assert "session_id" not in after

    def test_generates_id(self) -> None:
        """Without an id a short random one is generated."""
        with session_context() as first, session_context() as second:
            pass

        assert len(first) == 12
        assert first != second
