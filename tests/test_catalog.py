from __future__ import annotations

from decimal import Decimal

import pytest
from kungfu import Some, Nothing

from paysheet.catalog import SHOE_CATALOG, CatalogStore, Item


def test_default_catalog_order_and_prices() -> None:
    store = CatalogStore.default()

    assert len(store) == 5
    assert [i.name for i in store] == [
        "Nike Air Force 1 High LV8",
        "adidas Ultra Boost Clima",
        "Jordan Retro 10",
        "adidas Originals Prophere",
        "New Balance 574 Classic",
    ]
    assert store[1].price == Decimal("139.99")
    assert store[3].price == Decimal("49.99")


def test_lookup_out_of_range_raises() -> None:
    store = CatalogStore.default()

    with pytest.raises(IndexError):
        store[5]


def test_lookup_by_name_is_rejected() -> None:
    with pytest.raises(TypeError):
        CatalogStore.default()["Jordan Retro 10"]  # type: ignore[index]


def test_get_returns_option() -> None:
    store = CatalogStore.default()

    assert isinstance(store.get(2), Some)
    assert store.get(2).unwrap() == SHOE_CATALOG[2]
    assert isinstance(store.get(5), Nothing)
    assert isinstance(store.get(-1), Nothing)


def test_empty_store() -> None:
    store = CatalogStore([])

    assert len(store) == 0
    assert list(store) == []
    assert isinstance(store.get(0), Nothing)


def test_item_normalizes_price() -> None:
    assert Item("Shoe", 90).price == Decimal("90.00")
    assert Item("Shoe", "49.999").price == Decimal("50.00")


@pytest.mark.parametrize("name", ["", "   "])
def test_item_rejects_blank_name(name: str) -> None:
    with pytest.raises(ValueError):
        Item(name, Decimal("1.00"))


def test_item_rejects_negative_price() -> None:
    with pytest.raises(ValueError):
        Item("Shoe", Decimal("-0.01"))


def test_item_rejects_float_price() -> None:
    with pytest.raises(TypeError):
        Item("Shoe", 0.1)  # type: ignore[arg-type]


def test_item_is_immutable() -> None:
    item = Item("Shoe", Decimal("1.00"))

    with pytest.raises(AttributeError):
        item.price = Decimal("2.00")  # type: ignore[misc]
