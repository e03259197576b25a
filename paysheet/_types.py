"""
Core types for paysheet.

Re-exports from kungfu + money and country types.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing, LazyCoroResult


# ═══════════════════════════════════════════════════════════════════════════════
# Money
# ═══════════════════════════════════════════════════════════════════════════════

type Money = Decimal
"""Currency amount. Always a Decimal, never a float."""

CENT = Decimal("0.01")
"""Minor unit shared by every supported currency."""


def to_money(value: Decimal | int | str, quantum: Decimal = CENT) -> Money:
    """
    Quantize to the currency minor unit (half-up).

    Floats are rejected: Decimal(0.1) is not 0.1.
    """
    if isinstance(value, float):
        raise TypeError("money amounts must be Decimal, int or str, not float")
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


# ═══════════════════════════════════════════════════════════════════════════════
# Country Context
# ═══════════════════════════════════════════════════════════════════════════════


class Country(Enum):
    """
    Country where the purchase is processed.

    Fixed table: the currency and display name derive from the code.
    """

    US = "US"
    IN = "IN"

    @property
    def currency_code(self) -> str:
        return _CURRENCIES[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, code: str) -> Country:
        """Look up by ISO code, case-insensitive."""
        try:
            return cls(code.strip().upper())
        except ValueError:
            raise ValueError(f"unsupported country code: {code!r}") from None


_CURRENCIES: dict[Country, str] = {
    Country.US: "USD",
    Country.IN: "INR",
}

_DISPLAY_NAMES: dict[Country, str] = {
    Country.US: "United States",
    Country.IN: "India",
}

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "LazyCoroResult",
    # Money
    "Money",
    "CENT",
    "to_money",
    # Country
    "Country",
)
