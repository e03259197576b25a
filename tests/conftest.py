from __future__ import annotations

from decimal import Decimal

import pytest

from paysheet.catalog import Item
from paysheet.config import CheckoutConfig
from paysheet.gateway import (
    AuthorizedPayment,
    PaymentNetwork,
    PaymentToken,
    ShippingContact,
)


class Recorder:
    """Completion that remembers every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[bool, PaymentToken | None]] = []

    def __call__(self, success: bool, token: PaymentToken | None) -> None:
        self.calls.append((success, token))


@pytest.fixture
def config() -> CheckoutConfig:
    return CheckoutConfig.demo()


@pytest.fixture
def item() -> Item:
    return Item("Nike Air Force 1 High LV8", Decimal("110.00"))


@pytest.fixture
def token() -> PaymentToken:
    return PaymentToken("txn-1", b"\x00\x01", PaymentNetwork.VISA)


@pytest.fixture
def payment_in(token: PaymentToken) -> AuthorizedPayment:
    return AuthorizedPayment(token, ShippingContact("Asha", "IN"))


@pytest.fixture
def payment_us(token: PaymentToken) -> AuthorizedPayment:
    return AuthorizedPayment(token, ShippingContact("Sam", "US"))


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
