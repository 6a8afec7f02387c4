"""Tests for logging setup and the JSON formatter."""

import json
import logging
import sys

import pytest

from blog_api_gateway.app.core import logging_config
from blog_api_gateway.app.core.logging_config import OWNED_HANDLER_ATTR, JsonFormatter, setup_logging


def make_record(msg: str = "created post %s", args: tuple = (7,), exc_info=None) -> logging.LogRecord:
    return logging.LogRecord("blog", logging.INFO, __file__, 1, msg, args, exc_info)


def test_json_formatter_fields() -> None:
    line = JsonFormatter().format(make_record())
    payload = json.loads(line)
    assert payload["level"] == "INFO"
    assert payload["logger"] == "blog"
    assert payload["message"] == "created post 7"
    assert "time" in payload
    assert "error" not in payload


def test_json_formatter_includes_exception() -> None:
    try:
        raise ValueError("bad seed")
    except ValueError:
        record = make_record("seed failed", (), sys.exc_info())
    payload = json.loads(JsonFormatter().format(record))
    assert "ValueError: bad seed" in payload["error"]


def owned_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, OWNED_HANDLER_ATTR, False)]


@pytest.fixture
def root_logger():
    """Root logger with the app's own handlers detached for the test.

    Handlers installed by pytest stay attached, just as a test runner's
    would in a real process.
    """
    root = logging.getLogger()
    saved_handlers, saved_level = owned_handlers(root), root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
    yield root
    for handler in owned_handlers(root):
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_setup_logging_json(root_logger: logging.Logger) -> None:
    setup_logging("debug", fmt="json")
    assert root_logger.level == logging.DEBUG
    handlers = owned_handlers(root_logger)
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, JsonFormatter)


def test_setup_logging_ignores_foreign_handlers(root_logger: logging.Logger) -> None:
    foreign = logging.NullHandler()
    root_logger.addHandler(foreign)
    try:
        setup_logging("ERROR")
        assert root_logger.level == logging.ERROR
        assert len(owned_handlers(root_logger)) == 1
        assert foreign in root_logger.handlers
    finally:
        root_logger.removeHandler(foreign)


def test_setup_logging_invalid_level_falls_back(root_logger: logging.Logger) -> None:
    setup_logging("LOUD")
    assert root_logger.level == logging_config.DEFAULT_LEVEL


def test_setup_logging_file_handler(root_logger: logging.Logger, tmp_path) -> None:
    logfile = tmp_path / "app.log"
    setup_logging("INFO", logfile=str(logfile))
    logging.getLogger("blog").info("hello file")
    for handler in owned_handlers(root_logger):
        handler.flush()
    assert "hello file" in logfile.read_text(encoding="utf-8")


def test_setup_logging_runs_once(root_logger: logging.Logger) -> None:
    setup_logging("INFO")
    setup_logging("DEBUG")
    assert len(owned_handlers(root_logger)) == 1
    assert root_logger.level == logging.INFO
