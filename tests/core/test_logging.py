"""Tests for structlog configuration helpers."""

import pytest
import structlog

from advocate_directory.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    json_format_for,
    unbind_context,
)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    clear_context()
    structlog.reset_defaults()


class TestJsonFormatFor:
    @pytest.mark.parametrize(("value", "expected"), [("json", True), ("console", False), ("auto", None)])
    def test_mapping(self, value, expected):
        assert json_format_for(value) is expected


class TestContext:
    def test_bind_and_unbind(self):
        bind_context(request_id="abc", caller="test")
        assert structlog.contextvars.get_contextvars() == {"request_id": "abc", "caller": "test"}

        unbind_context("caller")
        assert structlog.contextvars.get_contextvars() == {"request_id": "abc"}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}


class TestConfigureLogging:
    def test_logger_usable_after_configure(self):
        configure_logging(level="DEBUG", json_format=True)
        log = get_logger("tests")
        with structlog.testing.capture_logs() as logs:
            log.info("advocates_listed", count=3)
        assert logs == [{"event": "advocates_listed", "count": 3, "log_level": "info"}]
