"""
Checkout attempt — per-attempt state machine on the gateway channel.
"""

from __future__ import annotations

import logging

from kungfu import Result, Ok, Error

from paysheet.gateway import (
    AuthorizationResult,
    AuthorizationStatus,
    AuthorizedPayment,
    CouponCodeChanged,
    CouponUpdate,
    Finished,
    GatewayEvent,
    GatewayReply,
    PaymentAuthorized,
    PaymentError,
    PaymentErrorCode,
    PaymentToken,
    PresentationFailed,
    Presented,
)
from paysheet.pricing import PricingPolicy, apply_coupon
from paysheet.checkout._types import (
    CheckoutError,
    CheckoutErrors,
    CheckoutState,
    Completion,
    Phase,
)

logger = logging.getLogger(__name__)


class CheckoutAttempt:
    """
    One checkout attempt.

    `handle` is the gateway channel: every notification for this attempt
    goes through it, in order. `complete` reports the outcome through the
    completion exactly once; later reports are dropped.
    """

    __slots__ = ("state", "_completion", "_policy", "_outcome", "_closed")

    def __init__(self, state: CheckoutState, completion: Completion, policy: PricingPolicy) -> None:
        self.state = state
        self._completion = completion
        self._policy = policy
        self._outcome: Result[PaymentToken, CheckoutError] | None = None
        self._closed = False

    @property
    def outcome(self) -> Result[PaymentToken, CheckoutError] | None:
        return self._outcome

    @property
    def reported(self) -> bool:
        return self._outcome is not None

    # ----- channel -----

    async def handle(self, event: GatewayEvent) -> GatewayReply:
        """Dispatch one gateway notification."""
        if self._closed:
            logger.warning("ignoring %s: attempt already finished", type(event).__name__)
            return None

        match event:
            case Presented():
                logger.info("payment sheet presented for %r", self.state.item.name)
                return None
            case PresentationFailed(reason):
                return self._on_presentation_failed(reason)
            case CouponCodeChanged(code):
                return self._on_coupon_changed(code)
            case PaymentAuthorized(payment):
                return self._on_authorized(payment)
            case Finished():
                self.close()
                return None

    def _on_presentation_failed(self, reason: str) -> None:
        logger.warning("failed to present payment sheet: %s", reason or "no reason given")
        self.state.phase = Phase.IDLE
        self.complete(Error(CheckoutErrors.presentation_failure(reason)))
        self._closed = True

    def _on_coupon_changed(self, code: str) -> CouponUpdate:
        state = self.state
        if self.reported:
            logger.warning("coupon %r ignored: outcome already reported", code)
            return CouponUpdate(state.line_items, shipping_methods=state.shipping_methods)

        result = apply_coupon(state.baseline, code, state.coupons, self._policy)

        match result:
            case Ok(items):
                state.line_items = items
                state.applied_coupon = next((c for c in state.coupons if code.strip() and c.matches(code)), None)
                if state.applied_coupon is not None:
                    logger.info("coupon %s applied, total %s", state.applied_coupon.code, items[-1].amount)
                return CouponUpdate(items, shipping_methods=state.shipping_methods)
            case Error(e):
                logger.info("coupon rejected: %r", e.code)
                return CouponUpdate(
                    state.line_items,
                    errors=(PaymentError(PaymentErrorCode.COUPON_CODE_INVALID, e.message),),
                    shipping_methods=state.shipping_methods,
                )

    def _on_authorized(self, payment: AuthorizedPayment) -> AuthorizationResult:
        state = self.state
        if self.reported:
            logger.warning("duplicate authorization for %r rejected", state.item.name)
            return AuthorizationResult(AuthorizationStatus.FAILURE)

        contact = payment.shipping_contact
        got = contact.iso_country_code if contact is not None else None

        if (got or "").strip().upper() != state.country.value:
            errors = (
                PaymentError(
                    PaymentErrorCode.SHIPPING_ADDRESS_UNSERVICEABLE,
                    f"Shipping is only available in {state.country.display_name}",
                ),
                PaymentError(
                    PaymentErrorCode.SHIPPING_ADDRESS_INVALID,
                    "Invalid country",
                    contact_field="country",
                ),
            )
            logger.warning("shipping country %s does not match %s", got, state.country.value)
            state.phase = Phase.IDLE
            self.complete(Error(CheckoutErrors.country_mismatch(
                state.country, got, tuple(e.message for e in errors),
            )))
            return AuthorizationResult(AuthorizationStatus.FAILURE, errors)

        state.phase = Phase.AUTHORIZED
        logger.info("payment authorized, transaction %s", payment.token.transaction_id)
        self.complete(Ok(payment.token))
        return AuthorizationResult(AuthorizationStatus.SUCCESS)

    # ----- outcome -----

    def complete(self, result: Result[PaymentToken, CheckoutError]) -> bool:
        """Report the outcome. Returns False if one was already reported."""
        if self._outcome is not None:
            logger.debug("outcome already reported, dropping %r", result)
            return False

        self._outcome = result
        match result:
            case Ok(token):
                self._completion(True, token)
            case Error(_):
                self._completion(False, None)
        return True

    def close(self) -> Result[PaymentToken, CheckoutError]:
        """End the attempt and return its outcome. Without one yet, it counts as cancelled."""
        outcome = self._outcome
        if outcome is None:
            logger.info("payment flow finished without authorization")
            outcome = Error(CheckoutErrors.cancelled())
            self.complete(outcome)
        self.state.phase = Phase.IDLE
        self._closed = True
        return outcome


__all__ = ("CheckoutAttempt",)
