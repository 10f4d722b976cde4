"""Unit tests for structured logging."""
import sys
sys.path.insert(0, 'backend')

import json
import logging
import pytest
from logger import JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def make_record(**extra):
    record = logging.LogRecord(
        name="services.webhook_client",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg="Webhook error: %s",
        args=("boom",),
        exc_info=None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_basic_fields():
    data = json.loads(JSONFormatter().format(make_record()))

    assert data["level"] == "ERROR"
    assert data["logger"] == "services.webhook_client"
    assert data["message"] == "Webhook error: boom"
    assert data["timestamp"].endswith("Z")


def test_json_formatter_includes_extra_fields():
    record = make_record(error_code="REMOTE_CALL_FAILED", error_details={"status_code": 500})

    data = json.loads(JSONFormatter().format(record))

    assert data["error_code"] == "REMOTE_CALL_FAILED"
    assert data["error_details"] == {"status_code": 500}
    assert "pathname" not in data


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad value")
    except ValueError:
        record = make_record(exc_info=sys.exc_info())

    data = json.loads(JSONFormatter().format(record))

    assert "ValueError: bad value" in data["exception"]


def test_setup_logging_json(restore_root_logger):
    setup_logging("DEBUG", json_format=True)

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)


def test_setup_logging_text(restore_root_logger):
    setup_logging("warning")

    assert restore_root_logger.level == logging.WARNING
    assert not isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)
