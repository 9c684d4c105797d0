"""
In‑memory store implementations.

These keep rows in plain dictionaries and lists.  They are used by the
test suite and are handy for running the API locally without a
database.  Data lives only as long as the process.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional

from wishlist_api.app.core.errors import DuplicateEntryError
from wishlist_api.app.schemas.notification import Notification
from wishlist_api.app.schemas.product import Product
from wishlist_api.app.schemas.wishlist import WishlistEntry

from .base import CatalogStore, NotificationStore, Page, Stores, WishlistStore


class InMemoryCatalogStore(CatalogStore):
    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._products: Dict[str, Product] = {}
        for product in products or ():
            self.add_product(product)

    def add_product(self, product: Product) -> None:
        """Seed the catalog.  Not part of the handler-facing interface."""
        self._products[product.product_id] = product

    def get_product(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)


class InMemoryWishlistStore(WishlistStore):
    def __init__(self) -> None:
        self._rows: Dict[str, Dict[str, WishlistEntry]] = {}
        self._lock = threading.Lock()

    def put_if_absent(self, entry: WishlistEntry) -> None:
        with self._lock:
            owner_rows = self._rows.setdefault(entry.owner_identity, {})
            if entry.item_key in owner_rows:
                raise DuplicateEntryError()
            owner_rows[entry.item_key] = entry

    def delete(self, owner_identity: str, item_key: str) -> None:
        with self._lock:
            self._rows.get(owner_identity, {}).pop(item_key, None)

    def query(self, owner_identity: str, limit: int, start_key: Optional[str] = None) -> Page:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        with self._lock:
            owner_rows = dict(self._rows.get(owner_identity, {}))
        keys = sorted(owner_rows)
        if start_key is not None:
            keys = [key for key in keys if key > start_key]
        selected = keys[:limit]
        last_key = selected[-1] if len(keys) > limit else None
        return Page(items=[owner_rows[key] for key in selected], last_key=last_key)

    def count(self, owner_identity: str) -> int:
        """Number of rows stored for an owner."""
        return len(self._rows.get(owner_identity, {}))


class InMemoryNotificationStore(NotificationStore):
    def __init__(self) -> None:
        self.notifications: List[Notification] = []

    def append(self, notification: Notification) -> None:
        self.notifications.append(notification)


def build_memory_stores(products: Optional[Iterable[Product]] = None) -> Stores:
    """Create a fresh set of empty in‑memory stores with an optional catalog."""
    return Stores(
        catalog=InMemoryCatalogStore(products),
        wishlist=InMemoryWishlistStore(),
        notifications=InMemoryNotificationStore(),
    )
