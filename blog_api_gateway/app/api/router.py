"""
Top‑level API router.

Aggregates the resource routers under their path prefixes.  When a
new resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import items, posts

router = APIRouter()

router.include_router(posts.router, prefix="/posts", tags=["posts"])
router.include_router(items.router, prefix="/items", tags=["items"])
