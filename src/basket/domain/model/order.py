"""Order aggregate — the core of the domain.

An Order accumulates item names with repeat counts and prices them
against the catalog it was created with. Prices are resolved on every
``total()`` call; the Order never caches Items.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import structlog

from basket.domain.exceptions import ItemNotFoundError
from basket.domain.model.value_objects import Money
from basket.domain.repository.item_catalog import ItemCatalog

logger = structlog.get_logger(__name__)


class OrderStatus(Enum):
    EMPTY = "EMPTY"
    HAS_LINES = "HAS_LINES"


@dataclass(frozen=True)
class OrderLine:
    """One distinct item name and how many times it was added."""

    item_name: str
    quantity: int


class Order:
    """Aggregate root for a shopping basket.

    State only moves forward: the first successful ``add()`` takes the
    order from EMPTY to HAS_LINES and there is no way back, since lines
    cannot be removed.
    """

    def __init__(self, catalog: ItemCatalog) -> None:
        self._catalog = catalog
        self._quantities: dict[str, int] = {}

    # --- Commands -------------------------------------------------------------

    def add(self, name: str) -> None:
        """Add one unit of the named item.

        The name is checked against the catalog first, so an unknown
        item raises ItemNotFoundError and leaves the order untouched.
        """
        try:
            item = self._catalog.fetch(name)
        except ItemNotFoundError:
            logger.warning("unknown_item_rejected", item_name=name)
            raise
        self._quantities[item.name] = self._quantities.get(item.name, 0) + 1
        logger.debug(
            "item_added",
            item_name=item.name,
            quantity=self._quantities[item.name],
        )

    # --- Queries --------------------------------------------------------------

    @property
    def status(self) -> OrderStatus:
        return OrderStatus.HAS_LINES if self._quantities else OrderStatus.EMPTY

    @property
    def lines(self) -> list[OrderLine]:
        """Snapshot of the order's lines, in the order names were first added."""
        return [OrderLine(name, qty) for name, qty in self._quantities.items()]

    def quantity_of(self, name: str) -> int:
        return self._quantities.get(name, 0)

    def line_totals(self) -> list[tuple[OrderLine, Money]]:
        """Price every line against the catalog.

        Raises InvalidQuantityError if a bundles-only item was added a
        number of times that is not a whole number of bundles.
        """
        return [
            (line, self._catalog.price_for(line.item_name, line.quantity))
            for line in self.lines
        ]

    def total(self) -> Money:
        result = Money.zero()
        for _, amount in self.line_totals():
            result = result + amount
        logger.info("order_totalled", lines=len(self._quantities), total=str(result))
        return result
