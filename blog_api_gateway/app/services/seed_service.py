"""
Startup seeding of the post store.

The bundled ``data/blog_data.json`` document (``{"posts": [...]}``) is
loaded once when the application is created, before the server starts
accepting connections.  The whole document is parsed and validated
before the first insert, so malformed data aborts startup with an
empty store instead of a partially seeded one.  ``id`` fields in the
document are ignored; the store assigns ids in document order.

Any failure is raised as :class:`SeedError` and is fatal: seeding is
never retried.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Protocol, Union

from pydantic import ValidationError

from blog_api_gateway.app.core.errors import SeedError
from blog_api_gateway.app.schemas.post import Post, SeedDocument

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).resolve().parent.parent / "data" / "blog_data.json"


class PostCreator(Protocol):
    """Anything with ``create_post``: a repository or a ``PostService``."""

    def create_post(self, post: Post) -> int: ...


def load_seed_document(path: Optional[Union[str, Path]] = None) -> SeedDocument:
    """Read and validate the seed document.

    Parameters
    ----------
    path : Optional[str | Path]
        Location of the JSON document.  Defaults to the bundled
        ``blog_data.json``.
    """
    seed_path = Path(path) if path else DEFAULT_SEED_PATH
    try:
        raw = json.loads(seed_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SeedError(f"read seed data {seed_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SeedError(f"unmarshal seed data {seed_path}: {exc}") from exc
    try:
        return SeedDocument.model_validate(raw)
    except ValidationError as exc:
        raise SeedError(f"invalid seed data {seed_path}: {exc}") from exc


def seed_posts(target: PostCreator, document: SeedDocument) -> int:
    """Create every post of ``document`` in order and return how many were created."""
    created = 0
    for entry in document.posts:
        try:
            target.create_post(entry.to_record())
        except Exception as exc:
            raise SeedError(f"create post {entry.title!r}: {exc}") from exc
        created += 1
    return created


def run_seed(target: PostCreator, path: Optional[Union[str, Path]] = None) -> int:
    """Load the seed document and apply it to ``target``."""
    document = load_seed_document(path)
    created = seed_posts(target, document)
    logger.info("Seeded %d posts from %s", created, path or DEFAULT_SEED_PATH.name)
    return created
