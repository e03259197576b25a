"""
Catalog types.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from paysheet._types import Money, to_money


@dataclass(frozen=True, slots=True)
class Item:
    """
    A purchasable product.

    Immutable; price is quantized to the currency minor unit.
    Empty name or negative price fails fast.
    """

    name: str
    price: Money

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("item name must not be empty")
        price = to_money(self.price)
        if price < Decimal(0):
            raise ValueError(f"item price must be non-negative, got {price}")
        # frozen: bypass __setattr__ to store the normalized price
        object.__setattr__(self, "price", price)


__all__ = ("Item",)
