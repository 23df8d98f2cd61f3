"""Domain-level exceptions.

All pricing rule violations are expressed as subclasses of DomainException
so callers can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ItemNotFoundError(EntityNotFoundError):
    """No item is registered in the catalog under the requested name."""

    def __init__(self, item_name: str) -> None:
        super().__init__(f"Item not found: '{item_name}'")
        self.item_name = item_name


class InvalidQuantityError(ValidationError):
    """A bulk-only item was asked to price a quantity outside its bundles.

    ``item_name`` is ``None`` when raised by a bare pricing strategy; the
    owning Item attaches its name via ``for_item()``.
    """

    def __init__(
        self,
        quantity: int,
        multiple: int,
        item_name: str | None = None,
    ) -> None:
        subject = f"'{item_name}'" if item_name else "item"
        super().__init__(
            f"Cannot price {quantity} of {subject}: "
            f"quantity must be a multiple of {multiple}"
        )
        self.quantity = quantity
        self.multiple = multiple
        self.item_name = item_name

    def for_item(self, item_name: str) -> InvalidQuantityError:
        return InvalidQuantityError(self.quantity, self.multiple, item_name)
