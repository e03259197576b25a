"""
Gateway types — payment request, notifications, replies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum, auto

from paysheet._types import Country, Money, to_money
from paysheet.pricing import LineItems

# ═══════════════════════════════════════════════════════════════════════════════
# Request Metadata
# ═══════════════════════════════════════════════════════════════════════════════


class PaymentNetwork(Enum):
    """Card networks the merchant accepts."""

    AMEX = "amex"
    DISCOVER = "discover"
    MASTERCARD = "masterCard"
    VISA = "visa"


DEFAULT_NETWORKS: tuple[PaymentNetwork, ...] = (
    PaymentNetwork.AMEX,
    PaymentNetwork.DISCOVER,
    PaymentNetwork.MASTERCARD,
    PaymentNetwork.VISA,
)


class MerchantCapability(Enum):
    """Payment processing protocols the merchant supports."""

    THREE_DS = "3DS"
    EMV = "EMV"
    CREDIT = "credit"
    DEBIT = "debit"


class ShippingType(Enum):
    SHIPPING = auto()
    DELIVERY = auto()
    STORE_PICKUP = auto()
    SERVICE_PICKUP = auto()


class ContactField(Enum):
    """Contact fields the sheet asks the user for."""

    NAME = auto()
    POSTAL_ADDRESS = auto()
    EMAIL = auto()
    PHONE = auto()


@dataclass(frozen=True, slots=True)
class ShippingMethod:
    """
    One shipping option shown on the sheet.

    Delivery window is relative to the day the request is built.
    """

    label: str
    amount: Money
    detail: str | None = None
    identifier: str | None = None
    start_after_days: int | None = None
    end_after_days: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_money(self.amount))

    def delivery_window(self, today: date | None = None) -> tuple[date, date] | None:
        """(earliest, latest) delivery dates, or None if no window is set."""
        if self.start_after_days is None or self.end_after_days is None:
            return None
        start = today or date.today()
        return (
            start + timedelta(days=self.start_after_days),
            start + timedelta(days=self.end_after_days),
        )


@dataclass(frozen=True, slots=True)
class PaymentRequest:
    """
    Everything the gateway needs to present the sheet.

    All amounts share the country's currency.
    """

    line_items: LineItems
    merchant_id: str
    country: Country
    networks: tuple[PaymentNetwork, ...] = DEFAULT_NETWORKS
    capabilities: tuple[MerchantCapability, ...] = (MerchantCapability.THREE_DS,)
    shipping_type: ShippingType = ShippingType.DELIVERY
    shipping_methods: tuple[ShippingMethod, ...] = ()
    required_shipping_fields: frozenset[ContactField] = frozenset(
        {ContactField.NAME, ContactField.POSTAL_ADDRESS}
    )
    supports_coupon: bool = False

    @property
    def currency_code(self) -> str:
        return self.country.currency_code

    @property
    def total(self) -> Money:
        return self.line_items[-1].amount


# ═══════════════════════════════════════════════════════════════════════════════
# Availability
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Availability:
    """
    supported: the platform supports this payment method at all.
    has_funding_source: the user has a usable card on a requested network.
    """

    supported: bool
    has_funding_source: bool

    @property
    def needs_setup(self) -> bool:
        """Supported, but the user must add a card first."""
        return self.supported and not self.has_funding_source


# ═══════════════════════════════════════════════════════════════════════════════
# Authorization Payload
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class PaymentToken:
    """Opaque token produced by the gateway. Never inspected by the core."""

    transaction_id: str
    payment_data: bytes = field(default=b"", repr=False)
    network: PaymentNetwork | None = None


@dataclass(frozen=True, slots=True)
class ShippingContact:
    name: str | None = None
    iso_country_code: str | None = None


@dataclass(frozen=True, slots=True)
class AuthorizedPayment:
    """What the user approved: token plus the shipping contact they picked."""

    token: PaymentToken
    shipping_contact: ShippingContact | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Replies
# ═══════════════════════════════════════════════════════════════════════════════


class PaymentErrorCode(Enum):
    SHIPPING_ADDRESS_UNSERVICEABLE = auto()
    SHIPPING_ADDRESS_INVALID = auto()
    COUPON_CODE_INVALID = auto()


@dataclass(frozen=True, slots=True)
class PaymentError:
    """Human-readable error shown on the sheet."""

    code: PaymentErrorCode
    message: str
    contact_field: str | None = None


class AuthorizationStatus(Enum):
    SUCCESS = auto()
    FAILURE = auto()


@dataclass(frozen=True, slots=True)
class AuthorizationResult:
    status: AuthorizationStatus
    errors: tuple[PaymentError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status is AuthorizationStatus.SUCCESS


@dataclass(frozen=True, slots=True)
class CouponUpdate:
    """
    Reply to a coupon change.

    With errors, line_items and shipping_methods are the previous ones.
    """

    line_items: LineItems
    errors: tuple[PaymentError, ...] = ()
    shipping_methods: tuple[ShippingMethod, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


# ═══════════════════════════════════════════════════════════════════════════════
# Notifications — One Ordered Channel
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Presented:
    """The sheet is on screen."""


@dataclass(frozen=True, slots=True)
class PresentationFailed:
    """The sheet could not be shown. Terminal for the attempt."""

    reason: str = ""


@dataclass(frozen=True, slots=True)
class CouponCodeChanged:
    code: str


@dataclass(frozen=True, slots=True)
class PaymentAuthorized:
    payment: AuthorizedPayment


@dataclass(frozen=True, slots=True)
class Finished:
    """The flow is over: approved, failed or cancelled by the user."""


type GatewayEvent = (
    Presented | PresentationFailed | CouponCodeChanged | PaymentAuthorized | Finished
)
"""Order per attempt: Presented|PresentationFailed, coupons, authorization, Finished."""

type GatewayReply = CouponUpdate | AuthorizationResult | None

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Request
    "PaymentNetwork",
    "DEFAULT_NETWORKS",
    "MerchantCapability",
    "ShippingType",
    "ContactField",
    "ShippingMethod",
    "PaymentRequest",
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
)
