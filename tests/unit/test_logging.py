"""Logging configuration tests."""

import io
import json
import logging

import pytest
import structlog

from component_forge.core import LogContext, configure_logging, get_logger


@pytest.fixture
def stream():
    buffer = io.StringIO()
    yield buffer
    configure_logging("DEBUG")


@pytest.mark.unit
def test_console_logging(stream):
    configure_logging("INFO", stream=stream)
    get_logger("forge.test.console").info("component_parsed", name="Card")

    output = stream.getvalue()
    assert "component_parsed" in output
    assert "Card" in output


@pytest.mark.unit
def test_json_logging(stream):
    configure_logging("INFO", json_logs=True, stream=stream)
    get_logger("forge.test.json").warning("credential_missing", purpose="generate components")

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["level"] == "WARNING"
    assert "credential_missing" in record["message"]


@pytest.mark.unit
def test_level_filtering(stream):
    configure_logging("WARNING", stream=stream)
    get_logger("forge.test.level").info("hidden_event")
    assert "hidden_event" not in stream.getvalue()


@pytest.mark.unit
def test_noisy_loggers_capped(stream):
    configure_logging("DEBUG", stream=stream)
    assert logging.getLogger("google").level == logging.WARNING


@pytest.mark.unit
def test_log_context_nesting():
    """Test nested contexts restore the outer binding."""
    with LogContext(description="outer"):
        with LogContext(description="inner", stage="write"):
            assert structlog.contextvars.get_contextvars()["description"] == "inner"
        context = structlog.contextvars.get_contextvars()
        assert context["description"] == "outer"
        assert "stage" not in context
    assert "description" not in structlog.contextvars.get_contextvars()
