"""Abstract catalog of purchasable items.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.

A catalog is expected to be fully populated before any Order reads
from it; sharing one catalog between Orders is safe only while nobody
calls ``add()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from basket.domain.exceptions import ItemNotFoundError
from basket.domain.model.item import Item
from basket.domain.model.value_objects import Money


class ItemCatalog(ABC):

    @abstractmethod
    def add(self, item: Item) -> None:
        """Register an item under its name. Duplicate names are rejected."""

    @abstractmethod
    def get_by_name(self, name: str) -> Item | None:
        """Return the item registered under exactly ``name``, or None."""

    @abstractmethod
    def list_all(self) -> list[Item]:
        """Return every registered item."""

    # --- Lookups built on the interface ---------------------------------------

    def fetch(self, name: str) -> Item:
        item = self.get_by_name(name)
        if item is None:
            raise ItemNotFoundError(name)
        return item

    def price_for(self, name: str, quantity: int) -> Money:
        """Price ``quantity`` units of the named item.

        Strategy failures (e.g. InvalidQuantityError) propagate unchanged.
        """
        return self.fetch(name).price(quantity)
