"""
Checkout types — attempt state, errors, completion.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from paysheet._types import Country
from paysheet.catalog import Item
from paysheet.gateway import PaymentToken, ShippingMethod
from paysheet.pricing import Coupon, LineItems

# ═══════════════════════════════════════════════════════════════════════════════
# Completion — One Call Per Attempt
# ═══════════════════════════════════════════════════════════════════════════════

type Completion = Callable[[bool, PaymentToken | None], None]
"""Called exactly once per attempt with (success, token)."""

# ═══════════════════════════════════════════════════════════════════════════════
# Phase — Attempt Lifecycle
# ═══════════════════════════════════════════════════════════════════════════════


class Phase(Enum):
    """
    Lifecycle of one checkout attempt.

        IDLE → PRESENTING → AUTHORIZED → IDLE
                   │             │
                   └─ failure ───┴─ country mismatch → IDLE
    """

    IDLE = auto()
    PRESENTING = auto()
    AUTHORIZED = auto()


# ═══════════════════════════════════════════════════════════════════════════════
# CheckoutState — Per Attempt, Never Shared
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True)
class CheckoutState:
    """
    Mutable state of one attempt.

    baseline is the undiscounted summary; line_items is what the sheet
    currently shows. Coupons are always applied to baseline.
    """

    item: Item
    country: Country
    baseline: LineItems
    line_items: LineItems
    coupons: tuple[Coupon, ...]
    shipping_methods: tuple[ShippingMethod, ...]
    phase: Phase = Phase.IDLE
    applied_coupon: Coupon | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class CheckoutErrorKind(Enum):
    """Kinds of checkout errors. All are terminal for the attempt."""

    UNSUPPORTED_PAYMENT_METHOD = auto()  # Platform cannot pay at all
    PRESENTATION_FAILURE = auto()  # Sheet could not be shown
    SHIPPING_COUNTRY_MISMATCH = auto()  # Approved address outside the country
    CANCELLED = auto()  # Flow finished without authorization
    GATEWAY_ERROR = auto()  # Gateway raised
    TIMEOUT = auto()  # Flow exceeded timeout_seconds
    ATTEMPT_IN_PROGRESS = auto()  # Another attempt is in flight


@dataclass(frozen=True, slots=True)
class CheckoutError:
    """
    Checkout failure reported through the completion.

    details holds the human-readable messages shown on the sheet.
    """

    kind: CheckoutErrorKind
    message: str
    details: tuple[str, ...] = ()


class CheckoutErrors:
    @staticmethod
    def unsupported() -> CheckoutError:
        return CheckoutError(
            CheckoutErrorKind.UNSUPPORTED_PAYMENT_METHOD,
            "Unable to make payment on this device.",
        )

    @staticmethod
    def presentation_failure(reason: str) -> CheckoutError:
        return CheckoutError(
            CheckoutErrorKind.PRESENTATION_FAILURE,
            reason or "Failed to present payment sheet.",
        )

    @staticmethod
    def country_mismatch(country: Country, got: str | None, details: tuple[str, ...]) -> CheckoutError:
        return CheckoutError(
            CheckoutErrorKind.SHIPPING_COUNTRY_MISMATCH,
            f"Shipping country {got or 'unknown'} is not {country.value}",
            details,
        )

    @staticmethod
    def cancelled() -> CheckoutError:
        return CheckoutError(CheckoutErrorKind.CANCELLED, "Payment cancelled.")

    @staticmethod
    def gateway_error(exc: Exception) -> CheckoutError:
        return CheckoutError(CheckoutErrorKind.GATEWAY_ERROR, f"{type(exc).__name__}: {exc}")

    @staticmethod
    def timeout(seconds: float) -> CheckoutError:
        return CheckoutError(CheckoutErrorKind.TIMEOUT, f"Payment timed out after {seconds}s")

    @staticmethod
    def attempt_in_progress() -> CheckoutError:
        return CheckoutError(
            CheckoutErrorKind.ATTEMPT_IN_PROGRESS,
            "Another checkout is already in progress.",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Completion",
    "Phase",
    "CheckoutState",
    "CheckoutErrorKind",
    "CheckoutError",
    "CheckoutErrors",
)
