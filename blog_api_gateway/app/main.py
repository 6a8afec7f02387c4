"""
Main entrypoint for the Blog API Gateway.

This module assembles the FastAPI application: it sets up logging,
builds the stores and services, seeds the post store and includes the
API router.  ``create_app`` builds a fully independent application
(its own stores included), which is then instantiated at module
import time as ``app`` so it can be served directly, e.g.::

    uvicorn blog_api_gateway.app.main:app

Seeding happens inside ``create_app``, so it is finished before the
server accepts its first connection.  A seed failure raises
``SeedError`` out of ``create_app`` and aborts startup.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .repositories.item_repository import InMemoryItemRepository, ItemRepository
from .repositories.post_repository import InMemoryPostRepository, PostRepository
from .services.item_service import ItemService
from .services.post_service import PostService
from .services.seed_service import run_seed

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    post_repository: Optional[PostRepository] = None,
    item_repository: Optional[ItemRepository] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the process wide ``settings``.
    post_repository, item_repository : optional
        Storage backends.  Fresh in‑memory stores are created when
        omitted.

    Returns
    -------
    FastAPI
        A configured application whose services are available as
        ``app.state.post_service`` and ``app.state.item_service``.
    """
    cfg = (app_settings or settings).validate()

    # Initialise logging before anything else so that the steps below
    # can safely log messages.
    setup_logging(cfg.log_level, cfg.log_file, cfg.log_format)

    app = FastAPI(
        title=cfg.project_name,
        version=cfg.api_version,
        docs_url="/swagger",
        redoc_url=None,
    )
    register_exception_handlers(app)

    posts = post_repository if post_repository is not None else InMemoryPostRepository()
    items = item_repository if item_repository is not None else InMemoryItemRepository()
    app.state.settings = cfg
    app.state.post_service = PostService(posts)
    app.state.item_service = ItemService(items)

    if cfg.seed_on_startup:
        run_seed(posts, cfg.seed_file)

    app.include_router(router)
    logger.info("%s %s ready", cfg.project_name, cfg.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
