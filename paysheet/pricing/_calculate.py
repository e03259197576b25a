"""
Summary calculation — baseline and coupon recomputation.

Pure functions: no I/O, no shared state.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal

from kungfu import Result, Ok, Error

from paysheet._types import Money
from paysheet.catalog import Item
from paysheet.pricing._policy import PricingPolicy, DEFAULT_POLICY
from paysheet.pricing._types import (
    TAX_LABEL,
    TOTAL_LABEL,
    DISCOUNT_LABEL,
    LineItem,
    LineItems,
    Coupon,
    CouponError,
)

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# compute_baseline() — Item + Tax + Total
# ═══════════════════════════════════════════════════════════════════════════════


def compute_baseline(item: Item, policy: PricingPolicy = DEFAULT_POLICY) -> LineItems:
    """
    Build the undiscounted summary for one item.

    Example:
        compute_baseline(Item("Jordan Retro 10", Decimal("110.00")))
        # (Jordan Retro 10 110.00, Tax 5.50, Total 115.50 final)
    """
    price = item.price
    tax = policy.tax_on(price)
    return (
        LineItem(item.name, price),
        LineItem(TAX_LABEL, tax),
        LineItem(TOTAL_LABEL, price + tax, is_final=True),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# apply_coupon() — Discount + Recomputed Tax + Total
# ═══════════════════════════════════════════════════════════════════════════════


def apply_coupon(
    current: LineItems,
    code: str,
    coupons: Sequence[Coupon] | None,
    policy: PricingPolicy = DEFAULT_POLICY,
) -> Result[LineItems, CouponError]:
    """
    Recompute the summary with the first coupon matching `code`.

    - Blank code or no coupons configured: Ok(current), unchanged.
    - Matching coupon: item, discount, [tax,] total. Tax is recomputed
      from the discounted subtotal, only when `current` has a tax row.
    - No match: Error(CouponError.invalid_code(code)).

    The first row of `current` must be the item itself. The discount is
    always taken from that row, so applying to an already discounted
    summary replaces the discount instead of stacking it.

    Example:
        match apply_coupon(baseline, "festival", [Coupon("FESTIVAL", 50)]):
            case Ok(items):
                ...
            case Error(e):
                print(e.message)
    """
    if not current:
        raise ValueError("cannot apply a coupon to an empty summary")

    if not code.strip():
        return Ok(current)

    if not coupons:
        return Ok(current)

    coupon = _find_coupon(code, coupons)
    if coupon is None:
        logger.debug("coupon code %r matches none of %d coupons", code, len(coupons))
        return Error(CouponError.invalid_code(code))

    return Ok(_discounted(current, coupon, policy))


def _find_coupon(code: str, coupons: Sequence[Coupon]) -> Coupon | None:
    """First match in registration order."""
    for coupon in coupons:
        if coupon.matches(code):
            return coupon
    return None


def _discounted(current: LineItems, coupon: Coupon, policy: PricingPolicy) -> LineItems:
    item = current[0]
    discount = _discount_amount(item.amount, coupon.amount, policy)
    subtotal = item.amount - discount
    discount_row = LineItem(DISCOUNT_LABEL, -discount)

    if any(row.label == TAX_LABEL for row in current):
        tax = policy.tax_on(subtotal)
        return (
            item,
            discount_row,
            LineItem(TAX_LABEL, tax, is_final=True),
            LineItem(TOTAL_LABEL, subtotal + tax, is_final=True),
        )

    return (
        item,
        discount_row,
        LineItem(TOTAL_LABEL, subtotal, is_final=True),
    )


def _discount_amount(price: Money, amount: Money, policy: PricingPolicy) -> Money:
    if policy.cap_discount:
        return min(amount, max(price, Decimal(0)))
    return amount


# ═══════════════════════════════════════════════════════════════════════════════
# Summary Helpers
# ═══════════════════════════════════════════════════════════════════════════════


def grand_total(items: LineItems) -> Money:
    """Amount of the last row."""
    if not items:
        raise ValueError("empty summary has no grand total")
    return items[-1].amount


def is_balanced(items: LineItems) -> bool:
    """True when the last row equals the sum of the rows before it."""
    if not items:
        return False
    return sum((row.amount for row in items[:-1]), Decimal(0)) == items[-1].amount


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "compute_baseline",
    "apply_coupon",
    "grand_total",
    "is_balanced",
)
