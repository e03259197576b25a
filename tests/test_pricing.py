from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given, strategies as st
from kungfu import Ok, Error

from paysheet.catalog import Item
from paysheet.pricing import (
    DISCOUNT_LABEL,
    TAX_LABEL,
    TOTAL_LABEL,
    Coupon,
    CouponErrorKind,
    LineItem,
    PricingPolicy,
    apply_coupon,
    compute_baseline,
    grand_total,
    is_balanced,
)

FESTIVAL = (Coupon("FESTIVAL", Decimal(50)),)

money = st.decimals(min_value=0, max_value=100_000, places=2, allow_nan=False, allow_infinity=False)


def amounts(items: tuple[LineItem, ...]) -> list[Decimal]:
    return [row.amount for row in items]


# ═══════════════════════════════════════════════════════════════════════════════
# compute_baseline
# ═══════════════════════════════════════════════════════════════════════════════


def test_baseline_item_tax_total(item: Item) -> None:
    items = compute_baseline(item)

    assert [row.label for row in items] == [item.name, TAX_LABEL, TOTAL_LABEL]
    assert amounts(items) == [Decimal("110.00"), Decimal("5.50"), Decimal("115.50")]
    assert [row.is_final for row in items] == [False, False, True]


def test_baseline_rounds_tax_half_up() -> None:
    items = compute_baseline(Item("adidas Ultra Boost Clima", Decimal("139.99")))

    # 139.99 * 0.05 = 6.9995
    assert amounts(items) == [Decimal("139.99"), Decimal("7.00"), Decimal("146.99")]


def test_baseline_free_item() -> None:
    items = compute_baseline(Item("Sample", Decimal(0)))

    assert amounts(items) == [Decimal("0.00")] * 3


def test_baseline_custom_tax_rate(item: Item) -> None:
    items = compute_baseline(item, PricingPolicy().with_tax_rate("0.18"))

    assert amounts(items) == [Decimal("110.00"), Decimal("19.80"), Decimal("129.80")]


def test_negative_tax_rate_rejected() -> None:
    with pytest.raises(ValueError):
        PricingPolicy(tax_rate=Decimal("-0.01"))


# ═══════════════════════════════════════════════════════════════════════════════
# apply_coupon
# ═══════════════════════════════════════════════════════════════════════════════


def test_valid_coupon_recomputes_tax_on_discounted_subtotal(item: Item) -> None:
    result = apply_coupon(compute_baseline(item), "FESTIVAL", FESTIVAL)

    assert isinstance(result, Ok)
    items = result.unwrap()
    assert [row.label for row in items] == [item.name, DISCOUNT_LABEL, TAX_LABEL, TOTAL_LABEL]
    assert amounts(items) == [Decimal("110.00"), Decimal("-50.00"), Decimal("3.00"), Decimal("63.00")]
    assert [row.is_final for row in items] == [False, False, True, True]


@pytest.mark.parametrize("code", ["festival", " Festival ", "FESTIVAL"])
def test_code_match_ignores_case_and_whitespace(item: Item, code: str) -> None:
    result = apply_coupon(compute_baseline(item), code, FESTIVAL)

    assert grand_total(result.unwrap()) == Decimal("63.00")


def test_invalid_code_is_error(item: Item) -> None:
    result = apply_coupon(compute_baseline(item), "wrong", FESTIVAL)

    match result:
        case Error(e):
            assert e.kind is CouponErrorKind.INVALID_CODE
            assert e.code == "wrong"
            assert e.message == "Coupon code is not valid."
        case Ok(_):
            pytest.fail("expected an invalid code error")


@pytest.mark.parametrize("code", ["", "   "])
def test_blank_code_leaves_summary(item: Item, code: str) -> None:
    baseline = compute_baseline(item)

    assert apply_coupon(baseline, code, FESTIVAL).unwrap() == baseline


@pytest.mark.parametrize("coupons", [None, ()])
def test_no_coupons_leaves_summary(item: Item, coupons: tuple[Coupon, ...] | None) -> None:
    baseline = compute_baseline(item)

    assert apply_coupon(baseline, "FESTIVAL", coupons).unwrap() == baseline


def test_every_coupon_is_considered(item: Item) -> None:
    coupons = (Coupon("SPRING", Decimal(10)), Coupon("FESTIVAL", Decimal(50)))

    result = apply_coupon(compute_baseline(item), "festival", coupons)

    assert amounts(result.unwrap())[1] == Decimal("-50.00")


def test_first_matching_coupon_wins(item: Item) -> None:
    coupons = (Coupon("FESTIVAL", Decimal(50)), Coupon("festival", Decimal(20)))

    result = apply_coupon(compute_baseline(item), "FESTIVAL", coupons)

    assert amounts(result.unwrap())[1] == Decimal("-50.00")


def test_summary_without_tax_row(item: Item) -> None:
    current = (LineItem(item.name, item.price), LineItem(TOTAL_LABEL, item.price, is_final=True))

    items = apply_coupon(current, "FESTIVAL", FESTIVAL).unwrap()

    assert [row.label for row in items] == [item.name, DISCOUNT_LABEL, TOTAL_LABEL]
    assert amounts(items) == [Decimal("110.00"), Decimal("-50.00"), Decimal("60.00")]


def test_reapplying_replaces_discount(item: Item) -> None:
    once = apply_coupon(compute_baseline(item), "FESTIVAL", FESTIVAL).unwrap()

    assert apply_coupon(once, "FESTIVAL", FESTIVAL).unwrap() == once


def test_discount_larger_than_price_goes_negative() -> None:
    baseline = compute_baseline(Item("adidas Originals Prophere", Decimal("49.99")))

    items = apply_coupon(baseline, "FESTIVAL", FESTIVAL).unwrap()

    assert grand_total(items) == Decimal("-0.01")
    assert is_balanced(items)


def test_discount_cap_stops_at_zero() -> None:
    policy = PricingPolicy().with_discount_cap()
    baseline = compute_baseline(Item("adidas Originals Prophere", Decimal("49.99")), policy)

    items = apply_coupon(baseline, "FESTIVAL", FESTIVAL, policy).unwrap()

    assert amounts(items) == [Decimal("49.99"), Decimal("-49.99"), Decimal("0.00"), Decimal("0.00")]


def test_empty_summary_is_contract_violation() -> None:
    with pytest.raises(ValueError):
        apply_coupon((), "FESTIVAL", FESTIVAL)


@pytest.mark.parametrize("code", ["", "   "])
def test_coupon_rejects_blank_code(code: str) -> None:
    with pytest.raises(ValueError):
        Coupon(code, Decimal(1))


def test_coupon_rejects_negative_amount() -> None:
    with pytest.raises(ValueError):
        Coupon("X", Decimal("-1"))


# ═══════════════════════════════════════════════════════════════════════════════
# Summary helpers
# ═══════════════════════════════════════════════════════════════════════════════


def test_grand_total_of_empty_summary() -> None:
    with pytest.raises(ValueError):
        grand_total(())


def test_is_balanced() -> None:
    assert not is_balanced(())
    assert is_balanced((LineItem("A", 1), LineItem("B", 2), LineItem("T", 3)))
    assert not is_balanced((LineItem("A", 1), LineItem("T", 2)))


# ═══════════════════════════════════════════════════════════════════════════════
# Properties
# ═══════════════════════════════════════════════════════════════════════════════


@given(price=money)
def test_baseline_is_balanced(price: Decimal) -> None:
    items = compute_baseline(Item("Shoe", price))

    assert is_balanced(items)
    assert grand_total(items) == items[0].amount + items[1].amount


@given(price=money, discount=money)
def test_discounted_summary_is_balanced(price: Decimal, discount: Decimal) -> None:
    coupons = (Coupon("CODE", discount),)

    items = apply_coupon(compute_baseline(Item("Shoe", price)), "code", coupons).unwrap()

    assert is_balanced(items)
    assert items[1].amount == -discount
    assert items[2].amount == PricingPolicy().tax_on(price - discount)


@given(price=money, discount=money)
def test_capped_total_never_negative(price: Decimal, discount: Decimal) -> None:
    policy = PricingPolicy().with_discount_cap()
    baseline = compute_baseline(Item("Shoe", price), policy)

    items = apply_coupon(baseline, "CODE", (Coupon("CODE", discount),), policy).unwrap()

    assert grand_total(items) >= 0
    assert is_balanced(items)


@given(price=money, discount=money)
def test_applying_twice_equals_applying_once(price: Decimal, discount: Decimal) -> None:
    coupons = (Coupon("CODE", discount),)
    once = apply_coupon(compute_baseline(Item("Shoe", price)), "CODE", coupons).unwrap()

    assert apply_coupon(once, "CODE", coupons).unwrap() == once
