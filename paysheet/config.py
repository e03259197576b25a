"""Checkout configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

from paysheet._types import Country
from paysheet.gateway import DEFAULT_NETWORKS, PaymentNetwork, ShippingMethod
from paysheet.pricing import Coupon, PricingPolicy

ENV_PREFIX = "PAYSHEET_"


class ConfigError(ValueError):
    """Missing or malformed configuration."""


@dataclass(frozen=True, slots=True)
class CheckoutConfig:
    """
    Merchant-side settings for every checkout attempt.

    - merchant_id: identifier registered with the payment platform
    - country: where the purchase is processed; fixes the currency
    - coupons: registered codes, matched in this order
    - timeout_seconds: upper bound for one approval flow, None for no limit
    """

    merchant_id: str
    country: Country = Country.US
    pricing: PricingPolicy = field(default_factory=PricingPolicy)
    coupons: tuple[Coupon, ...] = ()
    shipping_methods: tuple[ShippingMethod, ...] = ()
    networks: tuple[PaymentNetwork, ...] = DEFAULT_NETWORKS
    supports_coupon: bool = True
    timeout_seconds: float | None = None

    def __post_init__(self) -> None:
        if not self.merchant_id or not self.merchant_id.strip():
            raise ConfigError("merchant_id must not be empty")
        if not self.networks:
            raise ConfigError("at least one payment network is required")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ConfigError("timeout_seconds must be positive")

    def with_coupons(self, *coupons: Coupon) -> CheckoutConfig:
        return replace(self, coupons=tuple(coupons))

    @classmethod
    def demo(cls) -> CheckoutConfig:
        """Settings of the demo shoe store."""
        return cls(
            merchant_id="merchant.com.example.shoestore",
            country=Country.IN,
            coupons=(Coupon("FESTIVAL", Decimal(50)),),
            shipping_methods=(
                ShippingMethod(
                    label="Delivery",
                    amount=Decimal("1.00"),
                    detail="Shoes sent to your address",
                    identifier="DELIVERY",
                    start_after_days=3,
                    end_after_days=5,
                ),
            ),
            supports_coupon=True,
        )

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> CheckoutConfig:
        """Load configuration from environment variables.

        Args:
            env_file: Optional path to a .env file. Without it, a .env in
                the current directory is used when present.

        Returns:
            CheckoutConfig built from PAYSHEET_* variables.

        Raises:
            ConfigError: If PAYSHEET_MERCHANT_ID is missing or a value
                cannot be parsed.
        """
        if env_file is not None:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv(Path(".env"))

        merchant_id = _env("MERCHANT_ID")
        if not merchant_id:
            raise ConfigError(f"Missing required environment variable: {ENV_PREFIX}MERCHANT_ID")

        try:
            country = Country.parse(_env("COUNTRY") or "US")
        except ValueError as e:
            raise ConfigError(str(e)) from None

        pricing = PricingPolicy()
        if tax_rate := _env("TAX_RATE"):
            try:
                pricing = pricing.with_tax_rate(_decimal("TAX_RATE", tax_rate))
            except ValueError as e:
                raise ConfigError(str(e)) from None

        timeout = _env("TIMEOUT_SECONDS")

        return cls(
            merchant_id=merchant_id,
            country=country,
            pricing=pricing,
            coupons=parse_coupons(_env("COUPONS") or ""),
            supports_coupon=_flag("SUPPORTS_COUPON", default=True),
            timeout_seconds=float(_decimal("TIMEOUT_SECONDS", timeout)) if timeout else None,
        )


def parse_coupons(raw: str) -> tuple[Coupon, ...]:
    """Parse "CODE:AMOUNT,CODE:AMOUNT". Order is kept."""
    coupons: list[Coupon] = []
    for chunk in raw.split(","):
        if not chunk.strip():
            continue
        code, sep, amount = chunk.partition(":")
        if not sep:
            raise ConfigError(f"coupon {chunk.strip()!r} must be CODE:AMOUNT")
        try:
            coupons.append(Coupon(code.strip(), _decimal("COUPONS", amount)))
        except ValueError as e:
            raise ConfigError(str(e)) from None
    return tuple(coupons)


def _env(name: str) -> str | None:
    value = os.getenv(ENV_PREFIX + name)
    return value.strip() if value is not None else None


def _decimal(name: str, raw: str) -> Decimal:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        raise ConfigError(f"{ENV_PREFIX}{name}: {raw!r} is not a number") from None
    if not value.is_finite():
        raise ConfigError(f"{ENV_PREFIX}{name}: {raw!r} is not a finite number")
    return value


def _flag(name: str, *, default: bool) -> bool:
    raw = _env(name)
    if not raw:
        return default
    if raw.lower() in ("1", "true", "yes", "on"):
        return True
    if raw.lower() in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"{ENV_PREFIX}{name}: {raw!r} is not a boolean")


__all__ = ("ENV_PREFIX", "ConfigError", "CheckoutConfig", "parse_coupons")
