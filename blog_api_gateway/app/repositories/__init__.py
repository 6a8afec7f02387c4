"""
Storage layer.

Services depend on the abstract repository classes defined here, so
the in‑memory implementations can later be replaced by a database
backed one without touching services or API handlers.
"""

from .item_repository import InMemoryItemRepository, ItemRepository  # noqa: F401
from .post_repository import InMemoryPostRepository, PostRepository  # noqa: F401
