"""
Catalog — the fixed list of purchasable items.

    from paysheet import catalog

    store = catalog.CatalogStore.default()
    item = store[0]
"""

from paysheet.catalog._types import Item
from paysheet.catalog._store import SHOE_CATALOG, CatalogStore

__all__ = (
    "Item",
    "SHOE_CATALOG",
    "CatalogStore",
)
