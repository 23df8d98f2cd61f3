"""Pricing strategies — how a quantity of one item turns into Money.

The rule set is closed: an item is priced either per unit or in bundles.
Both variants are immutable value objects exposing ``price(quantity)``;
``price_of()`` is the single dispatch point over the variant set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from basket.domain.exceptions import InvalidQuantityError, ValidationError
from basket.domain.model.value_objects import Money


def _check_quantity(quantity: int) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError(f"Quantity cannot be negative, got {quantity}")


@dataclass(frozen=True)
class UnitPricing:
    """Flat per-unit price: ``price(q) = unit_price * q``."""

    unit_price: Money

    def price(self, quantity: int) -> Money:
        _check_quantity(quantity)
        return self.unit_price * quantity

    def describe(self) -> str:
        return f"{self.unit_price} each"


@dataclass(frozen=True)
class BulkPricing:
    """Multi-buy price: ``bundle_size`` units sell together for ``bundle_price``.

    Units left over after taking out full bundles are billed at
    ``unit_price``.  Without a ``unit_price`` the item is only sold in
    whole bundles and any other quantity raises InvalidQuantityError.
    """

    bundle_size: int
    bundle_price: Money
    unit_price: Money | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.bundle_size, int) or isinstance(self.bundle_size, bool):
            raise ValidationError(
                f"Bundle size must be an integer, got {type(self.bundle_size).__name__}"
            )
        if self.bundle_size < 1:
            raise ValidationError(
                f"Bundle size must be at least 1, got {self.bundle_size}"
            )

    @property
    def is_strict(self) -> bool:
        """True when only exact multiples of ``bundle_size`` can be priced."""
        return self.unit_price is None

    def price(self, quantity: int) -> Money:
        _check_quantity(quantity)
        bundles, remainder = divmod(quantity, self.bundle_size)

        if self.unit_price is None:
            if remainder:
                raise InvalidQuantityError(quantity, self.bundle_size)
            return self.bundle_price * bundles

        return self.bundle_price * bundles + self.unit_price * remainder

    def describe(self) -> str:
        rule = f"{self.bundle_size} for {self.bundle_price}"
        if self.unit_price is None:
            return f"{rule}, bundles only"
        return f"{rule}, else {self.unit_price} each"


PricingStrategy = Union[UnitPricing, BulkPricing]


def price_of(strategy: PricingStrategy, quantity: int) -> Money:
    """Price ``quantity`` units under ``strategy``.

    Rejects anything outside the known variants instead of duck-typing,
    so a new rule must be added here before it can be used.
    """
    if isinstance(strategy, (UnitPricing, BulkPricing)):
        return strategy.price(quantity)
    raise TypeError(f"Unsupported pricing strategy: {type(strategy).__name__}")
