"""
Inventory item storage.

Same discipline as the post store: a dict guarded by a reader/writer
lock, ids from a counter that is only advanced under the write lock,
and copies on every read.  ``adjust_quantity`` performs its
read‑modify‑write inside a single exclusive section so concurrent
increases and decreases never lose updates.
"""

from __future__ import annotations

import abc
from datetime import datetime, timezone
from typing import Dict, List

from blog_api_gateway.app.core.errors import ConflictError, NotFoundError
from blog_api_gateway.app.core.rwlock import ReadWriteLock
from blog_api_gateway.app.schemas.item import Item, ItemCreate


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ItemRepository(abc.ABC):
    """Operations every item storage backend must provide."""

    @abc.abstractmethod
    def list_items(self) -> List[Item]: ...

    @abc.abstractmethod
    def get_item(self, item_id: int) -> Item: ...

    @abc.abstractmethod
    def create_item(self, data: ItemCreate) -> Item: ...

    @abc.abstractmethod
    def adjust_quantity(self, item_id: int, delta: int) -> Item: ...

    @abc.abstractmethod
    def delete_item(self, item_id: int) -> None: ...


class InMemoryItemRepository(ItemRepository):
    def __init__(self) -> None:
        self._items: Dict[int, Item] = {}
        self._last_id = 0
        self._lock = ReadWriteLock()

    def list_items(self) -> List[Item]:
        with self._lock.read_lock():
            return [self._items[item_id].model_copy() for item_id in sorted(self._items)]

    def get_item(self, item_id: int) -> Item:
        with self._lock.read_lock():
            item = self._items.get(item_id)
            if item is None:
                raise NotFoundError(f"item {item_id} not found")
            return item.model_copy()

    def create_item(self, data: ItemCreate) -> Item:
        now = _utcnow()
        with self._lock.write_lock():
            self._last_id += 1
            item = Item(
                id=self._last_id,
                name=data.name,
                quantity=data.quantity,
                location=data.location,
                created_at=now,
                updated_at=now,
            )
            self._items[item.id] = item
            return item.model_copy()

    def adjust_quantity(self, item_id: int, delta: int) -> Item:
        """Add ``delta`` (possibly negative) to the item's quantity.

        Raises :class:`ConflictError` if the result would be negative;
        the stored quantity is left untouched in that case.
        """
        with self._lock.write_lock():
            item = self._items.get(item_id)
            if item is None:
                raise NotFoundError(f"item {item_id} not found")
            new_quantity = item.quantity + delta
            if new_quantity < 0:
                raise ConflictError(
                    f"item {item_id} has only {item.quantity} in stock, cannot remove {-delta}"
                )
            updated = item.model_copy(update={"quantity": new_quantity, "updated_at": _utcnow()})
            self._items[item_id] = updated
            return updated.model_copy()

    def delete_item(self, item_id: int) -> None:
        with self._lock.write_lock():
            if item_id not in self._items:
                raise NotFoundError(f"item {item_id} not found")
            del self._items[item_id]
