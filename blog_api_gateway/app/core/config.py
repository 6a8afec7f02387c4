"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all.  ``Settings.validate``
checks the values that cannot be expressed by their type alone and
reports every problem at once.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

from .errors import ConfigError

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG", "NOTSET"}
LOG_FORMATS = {"text", "json"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"invalid configuration: {name}(number)") from None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Blog API Gateway")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # ``text`` for human readable lines, ``json`` for one JSON object per line.
    log_format: str = os.getenv("LOG_FORMAT", "text")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    http_host: str = os.getenv("HTTP_HOST", "0.0.0.0")
    http_port: int = _env_int("HTTP_PORT", "8080")

    # The bundled blog_data.json is used unless SEED_FILE points elsewhere.
    seed_on_startup: bool = _env_flag("SEED_ON_STARTUP", "true")
    seed_file: Optional[str] = os.getenv("SEED_FILE") or None

    def validate(self) -> "Settings":
        """Raise :class:`ConfigError` listing every invalid field.

        Returns ``self`` so the call can be chained.
        """
        problems: List[str] = []
        if self.log_level.upper() not in LOG_LEVELS:
            problems.append("LOG_LEVEL(log_level)")
        if self.log_format.lower() not in LOG_FORMATS:
            problems.append("LOG_FORMAT(oneof)")
        if not 0 <= self.http_port <= 65535:
            problems.append("HTTP_PORT(port)")
        if self.seed_file is not None and not os.path.isfile(self.seed_file):
            problems.append("SEED_FILE(file)")
        if problems:
            raise ConfigError("invalid configuration: " + ", ".join(problems))
        return self

    @property
    def http_endpoint(self) -> str:
        return f"{self.http_host}:{self.http_port}"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()

