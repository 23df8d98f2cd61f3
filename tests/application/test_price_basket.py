"""Integration tests for the PriceBasket use case.

Uses the in-memory catalog — no file I/O.
"""

import pytest

from basket.application.dto import BasketLineDTO
from basket.application.price_basket import PriceBasketHandler
from basket.domain.exceptions import DomainException, InvalidQuantityError, ItemNotFoundError
from basket.domain.model.item import Item
from basket.domain.model.order import Order
from basket.domain.model.pricing import BulkPricing
from basket.domain.model.value_objects import Money
from basket.infrastructure.persistence.in_memory_catalog import InMemoryItemCatalog
from tests.fakes import RecordingItemCatalog, shop_items


def _handler(items: list[Item] | None = None) -> PriceBasketHandler:
    return PriceBasketHandler(InMemoryItemCatalog(items if items is not None else shop_items()))


class TestPriceBasketHappyPath:

    def test_mixed_basket_breakdown(self):
        dto = _handler().handle(
            ["Milk", "Chocolates", "Milk", "Bread"]
            + ["Chocolates"] * 2
            + ["Apple"] * 5
        )

        assert dto.total == "$27.00"
        assert dto.lines == [
            BasketLineDTO("Milk", 2, "$5.00 each", "$10.00"),
            BasketLineDTO("Chocolates", 3, "3 for $10.00, else $4.00 each", "$10.00"),
            BasketLineDTO("Bread", 1, "$3.00 each", "$3.00"),
            BasketLineDTO("Apple", 5, "5 for $4.00, else $1.00 each", "$4.00"),
        ]

    def test_empty_basket(self):
        dto = _handler().handle([])
        assert dto.lines == []
        assert dto.total == "$0.00"

    def test_accepts_any_iterable(self):
        dto = _handler().handle(name for name in ["Chocolates"] * 16)
        assert dto.total == "$54.00"


class TestPriceBasketErrors:

    def test_unknown_item_rejected(self):
        with pytest.raises(ItemNotFoundError, match="Item not found: 'iPhone'"):
            _handler().handle(["Milk", "iPhone"])

    def test_partial_bundle_of_bundles_only_item(self):
        handler = _handler([Item("Chocolates", BulkPricing(3, Money.of("10")))])
        with pytest.raises(InvalidQuantityError, match="multiple of 3"):
            handler.handle(["Chocolates", "Chocolates"])

    def test_errors_share_a_base_class(self):
        with pytest.raises(DomainException):
            _handler().handle(["iPhone"])


class TestPriceBasketLookups:

    def test_each_line_fetched_once_when_mapping(self):
        catalog = RecordingItemCatalog(shop_items())
        PriceBasketHandler(catalog).handle(["Milk", "Milk", "Bread"])
        # one lookup per add, then one per distinct line
        assert catalog.lookups == ["Milk", "Milk", "Bread", "Milk", "Bread"]

    def test_total_matches_order_total(self):
        catalog = InMemoryItemCatalog(shop_items())
        names = ["Apple"] * 7 + ["Chocolates"] * 4 + ["Bread"]
        order = Order(catalog)
        for name in names:
            order.add(name)

        dto = PriceBasketHandler(catalog).handle(names)

        assert dto.total == str(order.total())
