from __future__ import annotations

import logging
from io import StringIO

from snaptrack.logging.init import (
    LOGGER_NAME,
    SUMMARY_LEVEL,
    LabeledFormatter,
    get_logger,
    log_summary,
    setup_logging,
)


def _capture(logger: logging.Logger) -> StringIO:
    out = StringIO()
    for handler in logger.handlers:
        handler.setStream(out)
    return out


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()
    assert logger.name == LOGGER_NAME == "snaptrack"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_logging_labeled_prefixes():
    logger = setup_logging()
    out = _capture(logger)

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(SUMMARY_LEVEL, "Test summary message")
    logger.debug("hidden at INFO")

    assert out.getvalue().strip().split("\n") == [
        "INFO Test info message",
        "WARN Test warning message",
        "ERROR Test error message",
        "SUMMARY Test summary message",
    ]


def test_module_loggers_reach_app_handler():
    logger = setup_logging()
    out = _capture(logger)
    logging.getLogger("snaptrack.services.session").warning("input rejected: x")
    assert out.getvalue() == "WARN input rejected: x\n"


def test_get_logger_returns_configured_logger():
    assert get_logger() is setup_logging()


def test_setup_logging_idempotent():
    logger1 = setup_logging()
    logger2 = setup_logging()
    assert logger1 is logger2
    assert len(logger1.handlers) == 1


def test_debug_lowers_level():
    logger = setup_logging()
    setup_logging(debug=True)
    assert logger.level == logging.DEBUG
    assert all(h.level == logging.DEBUG for h in logger.handlers)


def test_log_summary_convenience_function():
    out = _capture(setup_logging())
    log_summary("total=3 changed=1 new=1")
    assert out.getvalue() == "SUMMARY total=3 changed=1 new=1\n"
    assert logging.getLevelName(SUMMARY_LEVEL) == "SUMMARY"
