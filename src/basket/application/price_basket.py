"""Application service: Price Basket use case.

Turns a sequence of scanned item names into a priced breakdown. All
pricing decisions stay in the domain model; this handler only
drives it and maps the result to DTOs.
"""

from __future__ import annotations

from collections.abc import Iterable

from basket.application.dto import BasketDTO, BasketLineDTO
from basket.domain.model.order import Order
from basket.domain.model.value_objects import Money
from basket.domain.repository.item_catalog import ItemCatalog


class PriceBasketHandler:

    def __init__(self, catalog: ItemCatalog) -> None:
        self._catalog = catalog

    def handle(self, item_names: Iterable[str]) -> BasketDTO:
        """Price a basket of scanned items.

        Steps:
        1. Add each name to a fresh Order (fails fast on an unknown item).
        2. Price every line against the catalog.
        3. Return a DTO with per-line totals and the grand total.
        """
        order = Order(self._catalog)
        for name in item_names:
            order.add(name)

        return self._to_dto(order)

    # --- Mapping --------------------------------------------------------------

    def _to_dto(self, order: Order) -> BasketDTO:
        lines: list[BasketLineDTO] = []
        total = Money.zero()

        for line in order.lines:
            item = self._catalog.fetch(line.item_name)
            amount = item.price(line.quantity)
            total = total + amount
            lines.append(
                BasketLineDTO(
                    item_name=line.item_name,
                    quantity=line.quantity,
                    pricing=item.strategy.describe(),
                    line_total=str(amount),
                )
            )

        return BasketDTO(lines=lines, total=str(total))
