"""Service layer for inventory items."""

from __future__ import annotations

import logging
from typing import List

from blog_api_gateway.app.repositories.item_repository import ItemRepository
from blog_api_gateway.app.schemas.item import Item, ItemCreate

logger = logging.getLogger(__name__)


class ItemService:
    def __init__(self, repository: ItemRepository) -> None:
        self._repository = repository

    def list_items(self) -> List[Item]:
        return self._repository.list_items()

    def get_item(self, item_id: int) -> Item:
        return self._repository.get_item(item_id)

    def create_item(self, data: ItemCreate) -> Item:
        item = self._repository.create_item(data)
        logger.info("Created item %s (%s)", item.id, item.name)
        return item

    def increase_quantity(self, item_id: int, amount: int) -> Item:
        item = self._repository.adjust_quantity(item_id, amount)
        logger.info("Increased item %s by %s to %s", item_id, amount, item.quantity)
        return item

    def decrease_quantity(self, item_id: int, amount: int) -> Item:
        item = self._repository.adjust_quantity(item_id, -amount)
        logger.info("Decreased item %s by %s to %s", item_id, amount, item.quantity)
        return item

    def delete_item(self, item_id: int) -> None:
        self._repository.delete_item(item_id)
        logger.info("Deleted item %s", item_id)
