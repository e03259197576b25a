"""
Checkout — drives one payment attempt from catalog item to token.

    item ──► compute_baseline ──► build_payment_request ──► gateway.present
                                                              │
                          CheckoutAttempt.handle ◄── events ──┘
                                   │
                                   └──► completion(success, token)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

import combinators as C
from combinators import lift as L
from kungfu import Result, Ok, Error, LazyCoroResult

from paysheet._types import Country
from paysheet.catalog import Item
from paysheet.config import CheckoutConfig
from paysheet.gateway import (
    Availability,
    Gateway,
    PaymentRequest,
    PaymentToken,
    ShippingMethod,
    build_payment_request,
)
from paysheet.pricing import CouponError, LineItems, apply_coupon, compute_baseline
from paysheet.checkout._attempt import CheckoutAttempt
from paysheet.checkout._types import (
    CheckoutError,
    CheckoutErrors,
    CheckoutState,
    Completion,
    Phase,
)

logger = logging.getLogger(__name__)


class Checkout:
    """
    Checkout orchestrator. One attempt in flight at a time.

    Example:
        checkout = Checkout(gateway, CheckoutConfig.demo())

        match await checkout.start(item, on_done):
            case Ok(token):
                ship(item, token)
            case Error(e) if e.kind == CheckoutErrorKind.CANCELLED:
                pass
            case Error(e):
                show(e.message)

    The completion is called exactly once for every start call,
    including rejected ones.
    """

    __slots__ = ("_gateway", "_config", "_attempt")

    def __init__(self, gateway: Gateway, config: CheckoutConfig) -> None:
        self._gateway = gateway
        self._config = config
        self._attempt: CheckoutAttempt | None = None

    @property
    def config(self) -> CheckoutConfig:
        return self._config

    @property
    def in_flight(self) -> CheckoutAttempt | None:
        """The running attempt, if any."""
        return self._attempt

    def availability(self) -> Availability:
        return self._gateway.availability(self._config.networks)

    def quote(self, item: Item, coupon_code: str = "") -> Result[LineItems, CouponError]:
        """Summary the sheet would show for item with coupon_code entered."""
        policy = self._config.pricing
        return apply_coupon(compute_baseline(item, policy), coupon_code, self._config.coupons, policy)

    async def start(
        self,
        item: Item,
        completion: Completion,
        *,
        country: Country | None = None,
        shipping_methods: Iterable[ShippingMethod] | None = None,
        supports_coupon: bool | None = None,
    ) -> Result[PaymentToken, CheckoutError]:
        """
        Run one payment attempt for item.

        Keyword arguments override the configured values for this attempt.
        Returns the same outcome that was reported to completion.
        """
        if self._attempt is not None:
            logger.warning("checkout for %r rejected: attempt in progress", item.name)
            return _reject(completion, CheckoutErrors.attempt_in_progress())

        if not self.availability().supported:
            logger.warning("payments are not supported on this device")
            return _reject(completion, CheckoutErrors.unsupported())

        config = self._config
        country = country or config.country
        baseline = compute_baseline(item, config.pricing)
        request = build_payment_request(
            baseline,
            config.merchant_id,
            country,
            shipping_methods=config.shipping_methods if shipping_methods is None else shipping_methods,
            supports_coupon=config.supports_coupon if supports_coupon is None else supports_coupon,
            networks=config.networks,
        )

        attempt = CheckoutAttempt(
            CheckoutState(
                item=item,
                country=country,
                baseline=baseline,
                line_items=baseline,
                coupons=config.coupons,
                shipping_methods=request.shipping_methods,
                phase=Phase.PRESENTING,
            ),
            completion,
            config.pricing,
        )
        self._attempt = attempt
        logger.info("starting checkout for %r, total %s %s", item.name, request.total, request.currency_code)

        try:
            match await self._present(request, attempt):
                case Error(e):
                    logger.error("checkout for %r failed: %s", item.name, e.message)
                    if not attempt.complete(Error(e)):
                        logger.warning("gateway failed after the outcome was reported")
                case Ok(_):
                    pass
            outcome = attempt.close()
        except asyncio.CancelledError:
            attempt.complete(Error(CheckoutErrors.cancelled()))
            raise
        finally:
            attempt.state.phase = Phase.IDLE
            self._attempt = None

        return outcome

    def _present(self, request: PaymentRequest, attempt: CheckoutAttempt) -> LazyCoroResult[None, CheckoutError]:
        flow = L.catching_async(
            lambda: self._gateway.present(request, attempt.handle),
            on_error=CheckoutErrors.gateway_error,
        )

        seconds = self._config.timeout_seconds
        if seconds is None:
            return flow

        return C.timeout(flow, seconds=seconds).map_err(_from_timeout)


def _from_timeout(e: CheckoutError | C.TimeoutError) -> CheckoutError:
    if isinstance(e, C.TimeoutError):
        return CheckoutErrors.timeout(e.seconds)
    return e


def _reject(completion: Completion, error: CheckoutError) -> Result[PaymentToken, CheckoutError]:
    completion(False, None)
    return Error(error)


__all__ = ("Checkout",)
