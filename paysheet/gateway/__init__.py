"""
Gateway — boundary with the platform payment sheet.

    from paysheet import gateway as G

    request = G.build_payment_request(items, "merchant.com.example", Country.IN)
    await some_gateway.present(request, channel)

The gateway owns UI and tokenization. The core receives its notifications
on one ordered channel and answers coupon changes and authorizations.
"""

from paysheet.gateway._types import (
    PaymentNetwork,
    DEFAULT_NETWORKS,
    MerchantCapability,
    ShippingType,
    ContactField,
    ShippingMethod,
    PaymentRequest,
    Availability,
    PaymentToken,
    ShippingContact,
    AuthorizedPayment,
    PaymentErrorCode,
    PaymentError,
    AuthorizationStatus,
    AuthorizationResult,
    CouponUpdate,
    Presented,
    PresentationFailed,
    CouponCodeChanged,
    PaymentAuthorized,
    Finished,
    GatewayEvent,
    GatewayReply,
)
from paysheet.gateway._protocol import Channel, Gateway
from paysheet.gateway._request import build_payment_request
from paysheet.gateway._scripted import (
    EnterCoupon,
    Authorize,
    Cancel,
    UserAction,
    ScriptedGateway,
)

__all__ = (
    # Request
    "PaymentNetwork",
    "DEFAULT_NETWORKS",
    "MerchantCapability",
    "ShippingType",
    "ContactField",
    "ShippingMethod",
    "PaymentRequest",
    "build_payment_request",
    # Availability
    "Availability",
    # Authorization payload
    "PaymentToken",
    "ShippingContact",
    "AuthorizedPayment",
    # Replies
    "PaymentErrorCode",
    "PaymentError",
    "AuthorizationStatus",
    "AuthorizationResult",
    "CouponUpdate",
    # Notifications
    "Presented",
    "PresentationFailed",
    "CouponCodeChanged",
    "PaymentAuthorized",
    "Finished",
    "GatewayEvent",
    "GatewayReply",
    # Protocol
    "Channel",
    "Gateway",
    # In-memory
    "EnterCoupon",
    "Authorize",
    "Cancel",
    "UserAction",
    "ScriptedGateway",
)
