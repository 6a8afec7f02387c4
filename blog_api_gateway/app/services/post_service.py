"""
Service layer for blog posts.

A thin forwarding layer: every operation delegates 1:1 to the
repository and lets its errors (notably ``NotFoundError``) propagate
unchanged to the API layer.
"""

from __future__ import annotations

import logging
from typing import List

from blog_api_gateway.app.repositories.post_repository import PostRepository
from blog_api_gateway.app.schemas.post import Post

logger = logging.getLogger(__name__)


class PostService:
    """Post operations exposed to the HTTP boundary."""

    def __init__(self, repository: PostRepository) -> None:
        self._repository = repository

    def list_posts(self) -> List[Post]:
        return self._repository.list_posts()

    def get_post(self, post_id: int) -> Post:
        return self._repository.get_post(post_id)

    def create_post(self, post: Post) -> int:
        post_id = self._repository.create_post(post)
        logger.info("Created post %s", post_id)
        return post_id

    def update_post(self, post: Post) -> None:
        self._repository.update_post(post)
        logger.info("Updated post %s", post.id)

    def delete_post(self, post_id: int) -> None:
        self._repository.delete_post(post_id)
        logger.info("Deleted post %s", post_id)
