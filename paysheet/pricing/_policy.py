"""
Pricing policy — tax rate and rounding.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal, ROUND_HALF_UP

from paysheet._types import CENT, Money


@dataclass(frozen=True, slots=True)
class PricingPolicy:
    """
    How summaries are priced.

    - tax_rate: fraction of the (post-discount) subtotal
    - quantum/rounding: currency rounding, half-up to the cent by default
    - cap_discount: cap a coupon at the item price so the subtotal
      never drops below zero. Off by default: the subtotal may go negative.

    Example:
        policy = PricingPolicy().with_tax_rate("0.18")
    """

    tax_rate: Decimal = Decimal("0.05")
    quantum: Decimal = CENT
    rounding: str = ROUND_HALF_UP
    cap_discount: bool = False

    def __post_init__(self) -> None:
        if self.tax_rate < 0:
            raise ValueError(f"tax rate must be non-negative, got {self.tax_rate}")

    def round(self, amount: Decimal) -> Money:
        return amount.quantize(self.quantum, rounding=self.rounding)

    def tax_on(self, subtotal: Money) -> Money:
        return self.round(subtotal * self.tax_rate)

    def with_tax_rate(self, rate: Decimal | str) -> PricingPolicy:
        return replace(self, tax_rate=Decimal(rate))

    def with_discount_cap(self, enabled: bool = True) -> PricingPolicy:
        return replace(self, cap_discount=enabled)


DEFAULT_POLICY = PricingPolicy()


__all__ = ("PricingPolicy", "DEFAULT_POLICY")
