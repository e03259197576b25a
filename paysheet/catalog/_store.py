"""
Catalog store — fixed, ordered, read-only product list.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from decimal import Decimal

from kungfu import Option, Some, Nothing

from paysheet.catalog._types import Item

# ═══════════════════════════════════════════════════════════════════════════════
# Demo Catalog
# ═══════════════════════════════════════════════════════════════════════════════

SHOE_CATALOG: tuple[Item, ...] = (
    Item("Nike Air Force 1 High LV8", Decimal("110.00")),
    Item("adidas Ultra Boost Clima", Decimal("139.99")),
    Item("Jordan Retro 10", Decimal("190.00")),
    Item("adidas Originals Prophere", Decimal("49.99")),
    Item("New Balance 574 Classic", Decimal("90.00")),
)

# ═══════════════════════════════════════════════════════════════════════════════
# CatalogStore
# ═══════════════════════════════════════════════════════════════════════════════


class CatalogStore(Sequence[Item]):
    """
    Read-only product catalog.

    Lookup is by index only:

        store = CatalogStore.default()
        store[0]                 # Item, IndexError when out of range
        store.get(7)             # Nothing()
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Item]) -> None:
        self._items: tuple[Item, ...] = tuple(items)

    @classmethod
    def default(cls) -> CatalogStore:
        """The demo shoe catalog."""
        return cls(SHOE_CATALOG)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Item:  # type: ignore[override]
        if not isinstance(index, int):
            raise TypeError("catalog lookup is by integer index only")
        return self._items[index]

    def get(self, index: int) -> Option[Item]:
        """Item at index, or Nothing when out of range. Negative indexes miss."""
        if 0 <= index < len(self._items):
            return Some(self._items[index])
        return Nothing()

    def __repr__(self) -> str:
        return f"CatalogStore({len(self._items)} items)"


__all__ = ("SHOE_CATALOG", "CatalogStore")
