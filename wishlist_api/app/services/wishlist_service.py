"""
Service layer for a user's wishlist.

A wishlist entry is created from a catalog product when the user adds
it and removed when they remove it; both changes append a notification
to the user's notification log.  Product identifiers are normalised to
upper case, which is also the key rows are stored under.

Adding an item that is already on the wishlist raises
``DuplicateEntryError`` from the store.  The service lets it
propagate; the application's error handler renders it as a successful
"already in wishlist" response.

Notifications are best effort.  If appending one fails after the
wishlist change has been stored, the failure is logged and the request
still succeeds, since the change the caller asked for did happen.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from wishlist_api.app.core.config import Settings
from wishlist_api.app.core.errors import NotFoundError
from wishlist_api.app.schemas.notification import Notification
from wishlist_api.app.schemas.wishlist import WishlistEntry
from wishlist_api.app.stores.base import Stores

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as ISO‑8601 with millisecond precision and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_product_id(product_id: str) -> str:
    return product_id.upper()


class WishlistService:
    """Wishlist operations for an authenticated caller."""

    def __init__(self, settings: Settings, stores: Stores) -> None:
        self.settings = settings
        self.catalog = stores.catalog
        self.wishlist = stores.wishlist
        self.notifications = stores.notifications

    async def list_items(self, identity: str) -> List[WishlistEntry]:
        """Return every wishlist entry owned by ``identity``.

        Pages through the store until it reports no continuation key,
        so the result is complete regardless of how many rows exist.
        """
        items: List[WishlistEntry] = []
        last_key: Optional[str] = None
        while True:
            page = self.wishlist.query(identity, limit=self.settings.page_size, start_key=last_key)
            items.extend(page.items)
            last_key = page.last_key
            if last_key is None:
                break
        return items

    async def add_item(self, identity: str, product_id: str) -> str:
        """Add a catalog product to the caller's wishlist.

        Raises ``NotFoundError`` if the product is not in the catalog and
        ``DuplicateEntryError`` if it is already on the wishlist.  Returns
        the response message.
        """
        item_key = normalize_product_id(product_id)
        product = self.catalog.get_product(item_key)
        if product is None:
            raise NotFoundError()

        entry = WishlistEntry(
            owner_identity=identity,
            item_key=item_key,
            product_id=item_key,
            product_name=product.product_name,
            price=product.price,
            added_at=utc_timestamp(),
        )
        self.wishlist.put_if_absent(entry)
        logger.info("Added %s to wishlist of %s", item_key, identity)

        await self.save_notification(identity, f"❤️ Added {product.product_name} to wishlist")
        return "Added to wishlist"

    async def remove_item(self, identity: str, product_id: str) -> str:
        """Remove a product from the caller's wishlist.

        The delete is unconditional: removing an item that is not on the
        wishlist succeeds.  The product is looked up first only to name
        it in the notification; if it has since left the catalog the
        item key is used instead.
        """
        item_key = normalize_product_id(product_id)
        product = self.catalog.get_product(item_key)
        name = product.product_name if product is not None else item_key

        self.wishlist.delete(identity, item_key)
        logger.info("Removed %s from wishlist of %s", item_key, identity)

        await self.save_notification(identity, f"❌ Removed {name} from wishlist")
        return "Removed from wishlist"

    async def save_notification(self, identity: str, message: str) -> Optional[Notification]:
        """Append a notification for ``identity``.

        Returns the stored notification, or ``None`` if the store
        rejected it.
        """
        notification = Notification(
            notification_id=str(uuid.uuid4()),
            owner_identity=identity,
            message=message,
            is_read=False,
            created_at=utc_timestamp(),
        )
        try:
            self.notifications.append(notification)
        except Exception:
            logger.exception("Failed to save notification for %s", identity)
            return None
        return notification
