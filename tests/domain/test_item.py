"""Unit tests for the Item value object."""

import pytest

from basket.domain.exceptions import InvalidQuantityError, ValidationError
from basket.domain.model.item import Item
from basket.domain.model.pricing import BulkPricing, UnitPricing
from basket.domain.model.value_objects import Money


class TestItem:

    def test_price_delegates_to_strategy(self):
        item = Item("Milk", UnitPricing(Money.of("5")))
        assert item.price(3) == Money.of("15")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Item("   ", UnitPricing(Money.of("5")))

    def test_is_immutable(self):
        item = Item("Milk", UnitPricing(Money.of("5")))
        with pytest.raises(AttributeError):
            item.name = "Cream"  # type: ignore[misc]

    def test_invalid_quantity_names_the_item(self):
        item = Item("Chocolates", BulkPricing(3, Money.of("10")))
        with pytest.raises(InvalidQuantityError) as exc_info:
            item.price(2)
        assert exc_info.value.item_name == "Chocolates"
        assert exc_info.value.multiple == 3
        assert str(exc_info.value) == (
            "Cannot price 2 of 'Chocolates': quantity must be a multiple of 3"
        )
