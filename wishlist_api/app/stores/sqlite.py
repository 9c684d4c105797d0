"""
SQLite‑backed store implementations.

Each call opens its own connection, runs one parameterised statement
and closes the connection again, so a store instance holds no open
handles between requests.  The conditional create relies on the
wishlist table's composite primary key: a second ``INSERT`` for the
same owner and item key fails atomically inside SQLite.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from wishlist_api.app.core.config import Settings
from wishlist_api.app.core.db import get_connection, quote_identifier
from wishlist_api.app.core.errors import DuplicateEntryError
from wishlist_api.app.schemas.notification import Notification
from wishlist_api.app.schemas.product import Product
from wishlist_api.app.schemas.wishlist import WishlistEntry

from .base import CatalogStore, NotificationStore, Page, Stores, WishlistStore

logger = logging.getLogger(__name__)


class SQLiteCatalogStore(CatalogStore):
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.table = quote_identifier(settings.products_table)

    def get_product(self, product_id: str) -> Optional[Product]:
        conn = get_connection(self.settings)
        try:
            row = conn.execute(
                f"SELECT product_id, product_name, price FROM {self.table} WHERE product_id = ?",
                (product_id,),
            ).fetchone()
            if not row:
                return None
            return Product(product_id=row["product_id"], product_name=row["product_name"], price=row["price"])
        finally:
            conn.close()


class SQLiteWishlistStore(WishlistStore):
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.table = quote_identifier(settings.wishlist_table)

    def put_if_absent(self, entry: WishlistEntry) -> None:
        conn = get_connection(self.settings)
        try:
            conn.execute(
                f"""
                INSERT INTO {self.table}
                    (owner_identity, item_key, product_id, product_name, price, added_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    entry.owner_identity,
                    entry.item_key,
                    entry.product_id,
                    entry.product_name,
                    entry.price,
                    entry.added_at,
                ),
            )
            conn.commit()
        except sqlite3.IntegrityError as exc:
            # The primary key is the only uniqueness constraint on the table;
            # NOT NULL and other violations are real failures.
            if not str(exc).startswith("UNIQUE constraint failed"):
                raise
            logger.debug("Conditional create failed for %s/%s: %s", entry.owner_identity, entry.item_key, exc)
            raise DuplicateEntryError() from exc
        finally:
            conn.close()

    def delete(self, owner_identity: str, item_key: str) -> None:
        conn = get_connection(self.settings)
        try:
            conn.execute(
                f"DELETE FROM {self.table} WHERE owner_identity = ? AND item_key = ?",
                (owner_identity, item_key),
            )
            conn.commit()
        finally:
            conn.close()

    def query(self, owner_identity: str, limit: int, start_key: Optional[str] = None) -> Page:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        conn = get_connection(self.settings)
        try:
            # Fetch one row beyond the page to know whether another page exists.
            if start_key is None:
                rows = conn.execute(
                    f"SELECT * FROM {self.table} WHERE owner_identity = ? ORDER BY item_key LIMIT ?",
                    (owner_identity, limit + 1),
                ).fetchall()
            else:
                rows = conn.execute(
                    f"""
                    SELECT * FROM {self.table}
                    WHERE owner_identity = ? AND item_key > ?
                    ORDER BY item_key LIMIT ?
                    """,
                    (owner_identity, start_key, limit + 1),
                ).fetchall()
        finally:
            conn.close()
        items = [self._row_to_entry(row) for row in rows[:limit]]
        last_key = items[-1].item_key if len(rows) > limit else None
        return Page(items=items, last_key=last_key)

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> WishlistEntry:
        return WishlistEntry(
            owner_identity=row["owner_identity"],
            item_key=row["item_key"],
            product_id=row["product_id"],
            product_name=row["product_name"],
            price=row["price"],
            added_at=row["added_at"],
        )


class SQLiteNotificationStore(NotificationStore):
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.table = quote_identifier(settings.notifications_table)

    def append(self, notification: Notification) -> None:
        conn = get_connection(self.settings)
        try:
            conn.execute(
                f"""
                INSERT INTO {self.table} (notification_id, owner_identity, message, is_read, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    notification.notification_id,
                    notification.owner_identity,
                    notification.message,
                    int(notification.is_read),
                    notification.created_at,
                ),
            )
            conn.commit()
        finally:
            conn.close()


def build_sqlite_stores(settings: Settings) -> Stores:
    """Create the three SQLite stores for the given settings."""
    return Stores(
        catalog=SQLiteCatalogStore(settings),
        wishlist=SQLiteWishlistStore(settings),
        notifications=SQLiteNotificationStore(settings),
    )
