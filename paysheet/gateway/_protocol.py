"""
Gateway protocol — the platform payment-authorization collaborator.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Protocol

from paysheet.gateway._types import (
    Availability,
    GatewayEvent,
    GatewayReply,
    PaymentNetwork,
    PaymentRequest,
)

type Channel = Callable[[GatewayEvent], Awaitable[GatewayReply]]
"""Single ordered notification channel from the gateway into the core."""


class Gateway(Protocol):
    """
    Payment gateway protocol.

    Implement this to bind a real payment sheet. The gateway owns the UI
    and tokenization; the core only sees notifications on `channel`.

    Example — binding a platform sheet:

        class PlatformGateway:
            def availability(self, networks):
                return Availability(
                    supported=sheet.can_make_payments(),
                    has_funding_source=sheet.can_make_payments(networks),
                )

            async def present(self, request, channel):
                controller = sheet.Controller(to_platform(request))
                if not await controller.present():
                    await channel(PresentationFailed("sheet unavailable"))
                    return
                await channel(Presented())
                async for event in controller.events():
                    reply = await channel(event)
                    controller.respond(reply)
                await channel(Finished())
    """

    def availability(self, networks: Sequence[PaymentNetwork]) -> Availability:
        """Whether payments are possible, and whether the user has a card."""
        ...

    async def present(self, request: PaymentRequest, channel: Channel) -> None:
        """
        Run one approval flow.

        Must deliver events in order: Presented (or PresentationFailed, then
        return), any CouponCodeChanged, at most one PaymentAuthorized, Finished.
        """
        ...


__all__ = ("Channel", "Gateway")
