"""
Checkout — orchestration of one payment attempt.

Usage:
    from paysheet import checkout as CO

    checkout = CO.Checkout(gateway, config)
    result = await checkout.start(item, lambda ok, token: ...)
"""

from paysheet.checkout._types import (
    Completion,
    Phase,
    CheckoutState,
    CheckoutErrorKind,
    CheckoutError,
    CheckoutErrors,
)
from paysheet.checkout._attempt import CheckoutAttempt
from paysheet.checkout._checkout import Checkout

__all__ = (
    "Completion",
    "Phase",
    "CheckoutState",
    "CheckoutErrorKind",
    "CheckoutError",
    "CheckoutErrors",
    "CheckoutAttempt",
    "Checkout",
)
