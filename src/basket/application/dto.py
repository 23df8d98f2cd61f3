"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry a priced basket out of the application layer without
exposing domain internals to whoever renders it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BasketLineDTO:
    """Output: a single priced line."""

    item_name: str
    quantity: int
    pricing: str  # rule description, e.g. "3 for $10.00, else $4.00 each"
    line_total: str  # formatted, e.g. "$14.00"


@dataclass(frozen=True)
class BasketDTO:
    """Output: a complete priced basket."""

    lines: list[BasketLineDTO]
    total: str
