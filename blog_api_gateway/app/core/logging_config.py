"""
Basic logging configuration for the application.

The ``setup_logging`` function configures the root logger with a
console handler and, optionally, a file handler.  Two output formats
are supported: the human readable ``text`` format (timestamp, logger
name, level and message) and ``json``, which writes one JSON object
per line for log collectors.  This module ensures that logging is set
up exactly once.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

DEFAULT_LEVEL = logging.INFO

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed by ``setup_logging`` so repeated calls are no-ops
# while handlers added by others (e.g. a test runner) are left alone.
OWNED_HANDLER_ATTR = "_blog_api_gateway_handler"


class JsonFormatter(logging.Formatter):
    """Render a record as a single line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _make_formatter(fmt: str) -> logging.Formatter:
    if fmt.lower() == "json":
        return JsonFormatter()
    return logging.Formatter(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, fmt: str = "text") -> None:
    """Configure root logger.

    Unless this function already installed its handlers on the root
    logger, attach a console handler and optionally a file handler.
    Handlers added by anyone else are kept.  The root logger's level is
    set based on the provided ``level``; an unknown level name falls
    back to ``INFO`` with a warning.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    fmt : str
        ``"text"`` or ``"json"``.
    """
    logger = logging.getLogger()
    if any(getattr(h, OWNED_HANDLER_ATTR, False) for h in logger.handlers):
        # Already configured by a previous ``create_app`` call.
        return

    numeric_level = logging.getLevelName(level.upper())
    invalid_level = not isinstance(numeric_level, int)
    if invalid_level:
        numeric_level = DEFAULT_LEVEL
    logger.setLevel(numeric_level)

    formatter = _make_formatter(fmt)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    setattr(console_handler, OWNED_HANDLER_ATTR, True)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        setattr(file_handler, OWNED_HANDLER_ATTR, True)
        logger.addHandler(file_handler)

    if invalid_level:
        logger.warning(
            "Invalid log level %r, using default: %s", level, logging.getLevelName(DEFAULT_LEVEL)
        )
    else:
        logger.info("Min log level set: %s", logging.getLevelName(numeric_level))
