"""Test the centralized logging functionality."""

import logging
from io import StringIO

import pytest

from fwstep.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def fresh_logging():
    reset_logging()
    setup_root_logger()
    yield
    reset_logging()
    setup_root_logger()


def test_centralized_logging():
    """Test that centralized logging works properly."""
    logger = get_logger("fwstep.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    try:
        logger.info("Test info message")
        assert "Test info message" in log_capture.getvalue()

        log_capture.seek(0)
        log_capture.truncate(0)
        logger.debug("Test debug message")
        assert "Test debug message" not in log_capture.getvalue()

        enable_debug_logging()
        logger.debug("Test debug message after enable")
        assert "Test debug message after enable" in log_capture.getvalue()
    finally:
        logger.removeHandler(handler)


def test_logger_naming():
    logger = get_logger("fwstep.algorithms.test")
    assert logger.name == "fwstep.algorithms.test"
    assert logger.level == logging.NOTSET


def test_root_logger_has_single_handler():
    setup_root_logger()
    setup_root_logger()
    root_logger = logging.getLogger("fwstep")
    assert len(root_logger.handlers) == 1
    assert root_logger.propagate


def test_custom_handler_and_format():
    reset_logging()
    log_capture = StringIO()
    setup_root_logger(
        level=logging.DEBUG,
        format_string="%(levelname)s|%(message)s",
        handler=logging.StreamHandler(log_capture),
    )
    get_logger("fwstep.custom").debug("hello")
    assert "DEBUG|hello" in log_capture.getvalue()


def test_global_level_propagates_to_children():
    logger1 = get_logger("fwstep.module1")
    logger2 = get_logger("fwstep.module2")

    set_global_log_level(logging.WARNING)
    assert logging.getLogger("fwstep").level == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING

    disable_debug_logging()
    assert logger1.getEffectiveLevel() == logging.INFO


def test_engine_logs_completion(caplog, triangle):
    from fwstep.algorithms.floyd_warshall import FloydWarshallEngine

    with caplog.at_level(logging.INFO, logger="fwstep"):
        FloydWarshallEngine(triangle).run()
    messages = [r.message for r in caplog.records]
    assert any("Initialized Floyd-Warshall engine with 3 nodes" in m for m in messages)
    assert any("complete after 27 relaxations" in m for m in messages)
