"""
Pricing — payment summary computation.

    from paysheet import pricing as P

    baseline = P.compute_baseline(item)
    result = P.apply_coupon(baseline, "festival", [P.Coupon("FESTIVAL", 50)])

Summaries are tuples of LineItem; the last row is the grand total and
equals the sum of the rows before it. Tax is always a fixed share of the
post-discount subtotal.
"""

from paysheet.pricing._types import (
    TAX_LABEL,
    TOTAL_LABEL,
    DISCOUNT_LABEL,
    LineItem,
    LineItems,
    Coupon,
    CouponError,
    CouponErrorKind,
)
from paysheet.pricing._policy import PricingPolicy, DEFAULT_POLICY
from paysheet.pricing._calculate import (
    compute_baseline,
    apply_coupon,
    grand_total,
    is_balanced,
)

__all__ = (
    "TAX_LABEL",
    "TOTAL_LABEL",
    "DISCOUNT_LABEL",
    "LineItem",
    "LineItems",
    "Coupon",
    "CouponError",
    "CouponErrorKind",
    "PricingPolicy",
    "DEFAULT_POLICY",
    "compute_baseline",
    "apply_coupon",
    "grand_total",
    "is_balanced",
)
