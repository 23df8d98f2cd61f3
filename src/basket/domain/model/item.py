"""Item — a named product bound to the rule that prices it."""

from __future__ import annotations

from dataclasses import dataclass

from basket.domain.exceptions import InvalidQuantityError, ValidationError
from basket.domain.model.pricing import PricingStrategy, price_of
from basket.domain.model.value_objects import Money


@dataclass(frozen=True)
class Item:
    """A purchasable item.

    Immutable: changing an item's price means registering a new Item
    in a new catalog, not mutating this one.
    """

    name: str
    strategy: PricingStrategy

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Item name is required")

    def price(self, quantity: int) -> Money:
        try:
            return price_of(self.strategy, quantity)
        except InvalidQuantityError as exc:
            raise exc.for_item(self.name) from exc
