"""Composition root: where the item catalog comes from.

Resolves the shipped ``data/catalog.json`` and builds catalogs from it
or from the built-in sample items.
"""

from __future__ import annotations

from pathlib import Path

from basket.domain.model.item import Item
from basket.domain.model.pricing import BulkPricing, UnitPricing
from basket.domain.model.value_objects import Money
from basket.infrastructure.catalog_loader import load_catalog
from basket.infrastructure.persistence.in_memory_catalog import InMemoryItemCatalog

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def item_catalog(file_path: Path | None = None) -> InMemoryItemCatalog:
    """Catalog loaded from the price list on disk."""
    return load_catalog(file_path or _DATA_DIR / "catalog.json")


def default_catalog() -> InMemoryItemCatalog:
    """Built-in price list, matching ``data/catalog.json``."""
    return InMemoryItemCatalog(
        [
            Item("Milk", UnitPricing(Money.of("5"))),
            Item("Bread", UnitPricing(Money.of("3"))),
            Item("Chocolates", BulkPricing(3, Money.of("10"), Money.of("4"))),
            Item("Apple", BulkPricing(5, Money.of("4"), Money.of("1"))),
        ]
    )
