"""
Pricing types — line items, coupons, coupon errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto

from paysheet._types import Money, to_money

# ═══════════════════════════════════════════════════════════════════════════════
# Labels
# ═══════════════════════════════════════════════════════════════════════════════

TAX_LABEL = "Tax"
TOTAL_LABEL = "Total"
DISCOUNT_LABEL = "Coupon Code Applied"

# ═══════════════════════════════════════════════════════════════════════════════
# LineItem — One Summary Row
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class LineItem:
    """
    One row of the payment summary.

    Note: order matters. The last row of a summary is the grand total.
    Discounts carry negative amounts.
    """

    label: str
    amount: Money
    is_final: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_money(self.amount))


type LineItems = tuple[LineItem, ...]
"""Ordered payment summary. Immutable so callers can compare before/after."""

# ═══════════════════════════════════════════════════════════════════════════════
# Coupon
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Coupon:
    """
    Flat-amount discount code.

    Codes compare case-insensitively; surrounding whitespace is ignored.
    """

    code: str
    amount: Money

    def __post_init__(self) -> None:
        if not self.code or not self.code.strip():
            raise ValueError("coupon code must not be empty")
        amount = to_money(self.amount)
        if amount < Decimal(0):
            raise ValueError(f"coupon amount must be non-negative, got {amount}")
        object.__setattr__(self, "amount", amount)

    def matches(self, code: str) -> bool:
        return normalize_code(code) == normalize_code(self.code)


def normalize_code(code: str) -> str:
    return code.strip().casefold()


# ═══════════════════════════════════════════════════════════════════════════════
# Coupon Errors
# ═══════════════════════════════════════════════════════════════════════════════


class CouponErrorKind(Enum):
    """Kinds of coupon errors."""

    INVALID_CODE = auto()  # Code matches no registered coupon


@dataclass(frozen=True, slots=True)
class CouponError:
    """
    Coupon rejection. Non-fatal: the user may retype within the attempt.
    """

    kind: CouponErrorKind
    code: str
    message: str

    @staticmethod
    def invalid_code(code: str) -> CouponError:
        return CouponError(CouponErrorKind.INVALID_CODE, code, "Coupon code is not valid.")


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "TAX_LABEL",
    "TOTAL_LABEL",
    "DISCOUNT_LABEL",
    "LineItem",
    "LineItems",
    "Coupon",
    "normalize_code",
    "CouponErrorKind",
    "CouponError",
)
