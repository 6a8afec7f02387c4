"""
Post storage.

``PostRepository`` declares the capability set the post service
relies on.  ``InMemoryPostRepository`` keeps posts in a dict keyed by
id, guarded by a reader/writer lock: lookups and listing share the
lock, while create/update/delete (and the id counter they advance)
take it exclusively.  Records cross the repository boundary only as
copies, so callers can never mutate stored state outside the lock.
"""

from __future__ import annotations

import abc
from typing import Dict, List

from blog_api_gateway.app.core.errors import NotFoundError
from blog_api_gateway.app.core.rwlock import ReadWriteLock
from blog_api_gateway.app.schemas.post import Post


class PostRepository(abc.ABC):
    """Operations every post storage backend must provide."""

    @abc.abstractmethod
    def list_posts(self) -> List[Post]:
        """Return copies of all stored posts."""

    @abc.abstractmethod
    def get_post(self, post_id: int) -> Post:
        """Return a copy of the post or raise :class:`NotFoundError`."""

    @abc.abstractmethod
    def create_post(self, post: Post) -> int:
        """Store ``post`` under a freshly assigned id and return the id."""

    @abc.abstractmethod
    def update_post(self, post: Post) -> None:
        """Replace the post with ``post.id`` or raise :class:`NotFoundError`."""

    @abc.abstractmethod
    def delete_post(self, post_id: int) -> None:
        """Remove the post or raise :class:`NotFoundError`."""


class InMemoryPostRepository(PostRepository):
    """Process local post store.  Ids start at 1 and are never reused."""

    def __init__(self) -> None:
        self._posts: Dict[int, Post] = {}
        self._last_id = 0
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read_lock():
            return len(self._posts)

    @property
    def last_id(self) -> int:
        with self._lock.read_lock():
            return self._last_id

    def list_posts(self) -> List[Post]:
        with self._lock.read_lock():
            return [self._posts[post_id].model_copy() for post_id in sorted(self._posts)]

    def get_post(self, post_id: int) -> Post:
        with self._lock.read_lock():
            post = self._posts.get(post_id)
            if post is None:
                raise NotFoundError(f"post {post_id} not found")
            return post.model_copy()

    def create_post(self, post: Post) -> int:
        with self._lock.write_lock():
            self._last_id += 1
            stored = post.model_copy(update={"id": self._last_id})
            self._posts[stored.id] = stored
            return stored.id

    def update_post(self, post: Post) -> None:
        with self._lock.write_lock():
            if post.id not in self._posts:
                raise NotFoundError(f"post {post.id} not found")
            self._posts[post.id] = post.model_copy()

    def delete_post(self, post_id: int) -> None:
        with self._lock.write_lock():
            if post_id not in self._posts:
                raise NotFoundError(f"post {post_id} not found")
            del self._posts[post_id]
