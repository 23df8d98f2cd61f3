"""Build an item catalog from a JSON price list.

The file is read once at start-up; nothing is ever written back.

Format::

    [
      {"name": "Milk", "pricing": {"type": "unit", "unit_price": "5"}},
      {"name": "Chocolates",
       "pricing": {"type": "bulk", "bundle_size": 3,
                   "bundle_price": "10", "unit_price": "4"}}
    ]

Omitting ``unit_price`` on a bulk entry makes the item bundles-only.
Amounts should be JSON strings so they reach Decimal untouched.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

from basket.domain.exceptions import ValidationError
from basket.domain.model.item import Item
from basket.domain.model.pricing import BulkPricing, PricingStrategy, UnitPricing
from basket.domain.model.value_objects import Money
from basket.infrastructure.persistence.in_memory_catalog import InMemoryItemCatalog

logger = structlog.get_logger(__name__)


def load_catalog(file_path: Path) -> InMemoryItemCatalog:
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError(f"Malformed price list {file_path}: {exc}") from exc

    if not isinstance(raw, list):
        raise ValidationError(f"Price list {file_path} must be a JSON array")

    catalog = InMemoryItemCatalog([_parse_item(entry) for entry in raw])
    logger.info("catalog_loaded", path=str(file_path), items=len(catalog))
    return catalog


# --- Parsing helpers ----------------------------------------------------------


def _parse_item(entry: Any) -> Item:
    if not isinstance(entry, dict):
        raise ValidationError(f"Price list entry must be an object, got {entry!r}")
    try:
        name = entry["name"]
        pricing = entry["pricing"]
    except KeyError as exc:
        raise ValidationError(f"Price list entry {entry!r} is missing {exc}") from exc
    return Item(name=name, strategy=_parse_strategy(name, pricing))


def _parse_strategy(name: str, pricing: Any) -> PricingStrategy:
    if not isinstance(pricing, dict):
        raise ValidationError(f"Pricing for '{name}' must be an object")

    kind = pricing.get("type")
    try:
        if kind == "unit":
            return UnitPricing(unit_price=Money.of(pricing["unit_price"]))
        if kind == "bulk":
            unit_price = pricing.get("unit_price")
            return BulkPricing(
                bundle_size=pricing["bundle_size"],
                bundle_price=Money.of(pricing["bundle_price"]),
                unit_price=Money.of(unit_price) if unit_price is not None else None,
            )
    except KeyError as exc:
        raise ValidationError(f"Pricing for '{name}' is missing {exc}") from exc

    raise ValidationError(f"Unknown pricing type for '{name}': {kind!r}")
