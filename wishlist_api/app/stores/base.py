"""
Store interfaces used by the wishlist service.

Each interface exposes only the operations the handler needs:
get‑by‑key on the catalog, conditional put / delete / paginated query
on the wishlist, and append on the notification log.  Implementations
must make ``WishlistStore.put_if_absent`` atomic; it is the only
operation that concurrent requests can race on.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from wishlist_api.app.schemas.notification import Notification
from wishlist_api.app.schemas.product import Product
from wishlist_api.app.schemas.wishlist import WishlistEntry


@dataclass
class Page:
    """One page of a wishlist query.

    ``last_key`` is the item key to resume after, or ``None`` when the
    query is exhausted.
    """

    items: List[WishlistEntry] = field(default_factory=list)
    last_key: Optional[str] = None


class CatalogStore(ABC):
    @abstractmethod
    def get_product(self, product_id: str) -> Optional[Product]:
        """Return the product stored under ``product_id`` or ``None``."""


class WishlistStore(ABC):
    @abstractmethod
    def put_if_absent(self, entry: WishlistEntry) -> None:
        """Store ``entry`` unless a row with the same owner and item key exists.

        Raises ``DuplicateEntryError`` when the row already exists.
        """

    @abstractmethod
    def delete(self, owner_identity: str, item_key: str) -> None:
        """Delete a row.  Deleting a missing row is not an error."""

    @abstractmethod
    def query(self, owner_identity: str, limit: int, start_key: Optional[str] = None) -> Page:
        """Return up to ``limit`` rows for an owner, ordered by item key,
        starting after ``start_key``."""


class NotificationStore(ABC):
    @abstractmethod
    def append(self, notification: Notification) -> None:
        """Append a notification to the log."""


@dataclass
class Stores:
    """The three stores a wishlist service is built from."""

    catalog: CatalogStore
    wishlist: WishlistStore
    notifications: NotificationStore
