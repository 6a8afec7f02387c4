"""Entry point for the Blog API Gateway.

Starts the FastAPI application under Uvicorn.  Intended to be executed
from the project root, for example in Docker, where you only specify a
single Python file to run.

Configuration is read from environment variables (see
``blog_api_gateway/app/core/config.py``): ``HTTP_HOST``, ``HTTP_PORT``,
``LOG_LEVEL``, ``LOG_FORMAT``, ``SEED_FILE`` and so on.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from blog_api_gateway.app.core.errors import ConfigError, SeedError


UVICORN_LOG_LEVELS = {"critical", "error", "warning", "info", "debug"}


def _uvicorn_log_level(level: str) -> str:
    level = level.lower()
    if level == "warn":
        return "warning"
    return level if level in UVICORN_LOG_LEVELS else "info"


async def run_api() -> None:
    """Build the application and serve it until shutdown.

    Configuration is validated and the post store seeded before the
    server binds its socket.
    """
    # Imported here so that invalid environment values surface as
    # ConfigError inside main() rather than at module import.
    from blog_api_gateway.app.core.config import settings

    settings.validate()
    # Importing the module creates (and seeds) the application.
    from blog_api_gateway.app.main import app

    config = Config(
        app=app,
        host=settings.http_host,
        port=settings.http_port,
        reload=False,
        log_level=_uvicorn_log_level(settings.log_level),
    )
    server = Server(config)
    await server.serve()


def main() -> int:
    try:
        asyncio.run(run_api())
    except (ConfigError, SeedError) as exc:
        logging.basicConfig(level=logging.INFO)
        logging.getLogger(__name__).error("failed to start app: %s", exc)
        return 1
    except (KeyboardInterrupt, SystemExit):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
