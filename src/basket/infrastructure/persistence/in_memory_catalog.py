"""Dict-backed implementation of ItemCatalog."""

from __future__ import annotations

import structlog

from basket.domain.exceptions import ValidationError
from basket.domain.model.item import Item
from basket.domain.repository.item_catalog import ItemCatalog

logger = structlog.get_logger(__name__)


class InMemoryItemCatalog(ItemCatalog):

    def __init__(self, items: list[Item] | None = None) -> None:
        self._store: dict[str, Item] = {}
        for item in items or []:
            self.add(item)

    # --- ItemCatalog interface ------------------------------------------------

    def add(self, item: Item) -> None:
        if item.name in self._store:
            logger.warning("duplicate_item_rejected", item_name=item.name)
            raise ValidationError(f"Item '{item.name}' already exists")
        self._store[item.name] = item
        logger.debug("item_registered", item_name=item.name, pricing=item.strategy.describe())

    def get_by_name(self, name: str) -> Item | None:
        return self._store.get(name)

    def list_all(self) -> list[Item]:
        return list(self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, name: object) -> bool:
        return name in self._store
