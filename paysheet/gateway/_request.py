"""
Payment request construction.
"""

from __future__ import annotations

from collections.abc import Iterable

from paysheet._types import Country
from paysheet.pricing import LineItems, is_balanced
from paysheet.gateway._types import (
    DEFAULT_NETWORKS,
    MerchantCapability,
    PaymentNetwork,
    PaymentRequest,
    ShippingMethod,
    ShippingType,
)


def build_payment_request(
    line_items: LineItems,
    merchant_id: str,
    country: Country,
    *,
    shipping_methods: Iterable[ShippingMethod] | None = None,
    shipping_type: ShippingType = ShippingType.DELIVERY,
    supports_coupon: bool = False,
    networks: Iterable[PaymentNetwork] = DEFAULT_NETWORKS,
    capabilities: Iterable[MerchantCapability] = (MerchantCapability.THREE_DS,),
) -> PaymentRequest:
    """
    Validate a summary and wrap it into a PaymentRequest.

    Raises ValueError for an empty or unbalanced summary, a blank
    merchant id or an empty network list.
    """
    if not line_items:
        raise ValueError("payment request needs at least one line item")
    # a lone row is its own grand total
    if len(line_items) > 1 and not is_balanced(line_items):
        raise ValueError("last line item must equal the sum of the others")
    if not merchant_id or not merchant_id.strip():
        raise ValueError("merchant id must not be empty")

    networks = tuple(networks)
    if not networks:
        raise ValueError("at least one payment network is required")

    return PaymentRequest(
        line_items=tuple(line_items),
        merchant_id=merchant_id,
        country=country,
        networks=networks,
        capabilities=tuple(capabilities),
        shipping_type=shipping_type,
        shipping_methods=tuple(shipping_methods or ()),
        supports_coupon=supports_coupon,
    )


__all__ = ("build_payment_request",)
