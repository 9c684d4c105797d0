"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations (``init_db``) for the
catalog, wishlist and notification tables used by the bundled SQLite
stores.  Table names come from ``Settings`` so one database file can
host several deployments side by side.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Callable, List, Tuple

from .config import Settings
from wishlist_api.app.schemas.product import Product

logger = logging.getLogger(__name__)


def quote_identifier(name: str) -> str:
    """Quote a table name for interpolation into SQL."""
    return '"' + name.replace('"', '""') + '"'


def get_database_path(settings: Settings) -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path (or the special
    ``:memory:`` name), use it directly.  Otherwise resolve it relative
    to the project root.
    """
    db_url = settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(settings: Settings) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    """
    conn = sqlite3.connect(get_database_path(settings))
    conn.row_factory = sqlite3.Row
    return conn


def _migrations(settings: Settings) -> List[Tuple[int, Callable[[sqlite3.Cursor], None]]]:
    products = quote_identifier(settings.products_table)
    wishlist = quote_identifier(settings.wishlist_table)
    notifications = quote_identifier(settings.notifications_table)

    def initial_schema(cursor: sqlite3.Cursor) -> None:
        cursor.executescript(
            f"""
            CREATE TABLE IF NOT EXISTS {products} (
                product_id TEXT PRIMARY KEY,
                product_name TEXT NOT NULL,
                price REAL NOT NULL
            );

            CREATE TABLE IF NOT EXISTS {wishlist} (
                owner_identity TEXT NOT NULL,
                item_key TEXT NOT NULL,
                product_id TEXT NOT NULL,
                product_name TEXT NOT NULL,
                price REAL NOT NULL,
                added_at TEXT NOT NULL,
                PRIMARY KEY (owner_identity, item_key)
            );

            CREATE TABLE IF NOT EXISTS {notifications} (
                notification_id TEXT PRIMARY KEY,
                owner_identity TEXT NOT NULL,
                message TEXT NOT NULL,
                is_read INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL
            );
            """
        )

    def notifications_owner_index(cursor: sqlite3.Cursor) -> None:
        index_name = quote_identifier(f"idx_{settings.notifications_table}_owner")
        cursor.execute(
            f"CREATE INDEX IF NOT EXISTS {index_name} ON {notifications} (owner_identity, created_at)"
        )

    return [
        (1, initial_schema),
        (2, notifications_owner_index),
    ]


def init_db(settings: Settings) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks which
    versions have been applied for this set of table names, and applies
    the rest in order.
    """
    scope = f"{settings.products_table}:{settings.wishlist_table}:{settings.notifications_table}"
    conn = get_connection(settings)
    try:
        cursor = conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS migrations (
                scope TEXT NOT NULL,
                version INTEGER NOT NULL,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                PRIMARY KEY (scope, version)
            )
            """
        )
        applied = {
            row["version"]
            for row in cursor.execute("SELECT version FROM migrations WHERE scope = ?", (scope,))
        }
        for version, migrate in _migrations(settings):
            if version in applied:
                continue
            migrate(cursor)
            cursor.execute("INSERT INTO migrations (scope, version) VALUES (?, ?)", (scope, version))
            logger.info("Applied migration %s for %s", version, scope)
        conn.commit()
    finally:
        conn.close()


def upsert_product(settings: Settings, product: Product) -> None:
    """Insert or replace a catalog product.

    The wishlist handler never writes the catalog; this is used by
    ``manage.py add-product`` and tests to seed it.
    """
    conn = get_connection(settings)
    try:
        conn.execute(
            f"""
            INSERT INTO {quote_identifier(settings.products_table)} (product_id, product_name, price)
            VALUES (?, ?, ?)
            ON CONFLICT(product_id) DO UPDATE SET product_name = excluded.product_name, price = excluded.price
            """,
            (product.product_id.upper(), product.product_name, product.price),
        )
        conn.commit()
    finally:
        conn.close()
