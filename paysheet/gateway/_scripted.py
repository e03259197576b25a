"""
Scripted gateway — in-memory Gateway driven by a list of user actions.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from paysheet.gateway._protocol import Channel
from paysheet.gateway._types import (
    Availability,
    AuthorizedPayment,
    CouponCodeChanged,
    Finished,
    GatewayEvent,
    GatewayReply,
    PaymentAuthorized,
    PaymentNetwork,
    PaymentRequest,
    PresentationFailed,
    Presented,
)

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# User Actions
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class EnterCoupon:
    code: str


@dataclass(frozen=True, slots=True)
class Authorize:
    payment: AuthorizedPayment


@dataclass(frozen=True, slots=True)
class Cancel:
    pass


type UserAction = EnterCoupon | Authorize | Cancel

# ═══════════════════════════════════════════════════════════════════════════════
# ScriptedGateway
# ═══════════════════════════════════════════════════════════════════════════════


class ScriptedGateway:
    """
    Gateway that replays a fixed user session.

    Example:
        gateway = ScriptedGateway([
            EnterCoupon("wrong"),
            EnterCoupon("FESTIVAL"),
            Authorize(AuthorizedPayment(token, ShippingContact("Ann", "IN"))),
        ])
        checkout = Checkout(gateway, config)

    Every request and (event, reply) exchange is recorded.
    The session ends at the first Authorize or Cancel.
    """

    def __init__(
        self,
        actions: Iterable[UserAction] = (),
        *,
        supported: bool = True,
        has_funding_source: bool = True,
        presentable: bool = True,
        raises: Exception | None = None,
        step_delay: float = 0.0,
    ) -> None:
        self.actions: tuple[UserAction, ...] = tuple(actions)
        self.supported = supported
        self.has_funding_source = has_funding_source
        self.presentable = presentable
        self.raises = raises
        self.step_delay = step_delay

        self.requests: list[PaymentRequest] = []
        self.exchanges: list[tuple[GatewayEvent, GatewayReply]] = []

    # ----- Gateway protocol -----

    def availability(self, networks: Sequence[PaymentNetwork]) -> Availability:
        return Availability(
            supported=self.supported,
            has_funding_source=self.supported and self.has_funding_source and bool(networks),
        )

    async def present(self, request: PaymentRequest, channel: Channel) -> None:
        self.requests.append(request)

        if self.raises is not None:
            raise self.raises

        if not self.presentable:
            await self._send(channel, PresentationFailed("payment sheet unavailable"))
            return

        await self._send(channel, Presented())

        for action in self.actions:
            if self.step_delay:
                await asyncio.sleep(self.step_delay)

            match action:
                case EnterCoupon(code):
                    await self._send(channel, CouponCodeChanged(code))
                case Authorize(payment):
                    await self._send(channel, PaymentAuthorized(payment))
                    break
                case Cancel():
                    logger.debug("scripted session cancelled by user")
                    break

        await self._send(channel, Finished())

    # ----- inspection -----

    @property
    def last_request(self) -> PaymentRequest | None:
        return self.requests[-1] if self.requests else None

    @property
    def events(self) -> list[GatewayEvent]:
        return [event for event, _ in self.exchanges]

    def replies_to[T](self, event_type: type[T]) -> list[GatewayReply]:
        """Replies the core gave to events of one type, in order."""
        return [reply for event, reply in self.exchanges if isinstance(event, event_type)]

    async def _send(self, channel: Channel, event: GatewayEvent) -> GatewayReply:
        reply = await channel(event)
        self.exchanges.append((event, reply))
        return reply


__all__ = (
    "EnterCoupon",
    "Authorize",
    "Cancel",
    "UserAction",
    "ScriptedGateway",
)
