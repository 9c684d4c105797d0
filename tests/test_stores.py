import sqlite3
import threading

import pytest

from wishlist_api.app.core.config import Settings
from wishlist_api.app.core.db import get_connection, init_db, upsert_product
from wishlist_api.app.core.errors import DuplicateEntryError
from wishlist_api.app.schemas.notification import Notification
from wishlist_api.app.schemas.product import Product
from wishlist_api.app.schemas.wishlist import WishlistEntry
from wishlist_api.app.stores.memory import build_memory_stores
from wishlist_api.app.stores.sqlite import build_sqlite_stores


def entry(owner, key):
    return WishlistEntry(
        owner_identity=owner,
        item_key=key,
        product_id=key,
        product_name=f"Product {key}",
        price=1.5,
        added_at="2026-01-01T00:00:00.000Z",
    )


@pytest.fixture
def sqlite_settings(tmp_path):
    settings = Settings(
        database_url=str(tmp_path / "wishlist.db"),
        wishlist_table="test_wishlist",
        products_table="test_products",
        notifications_table="test_notifications",
    )
    init_db(settings)
    return settings


@pytest.fixture(params=["memory", "sqlite"])
def stores(request, sqlite_settings):
    if request.param == "memory":
        return build_memory_stores([Product(product_id="ABC123", product_name="Widget", price=9.99)])
    upsert_product(sqlite_settings, Product(product_id="abc123", product_name="Widget", price=9.99))
    return build_sqlite_stores(sqlite_settings)


def collect(wishlist, owner, limit):
    items, start_key, pages = [], None, 0
    while True:
        page = wishlist.query(owner, limit=limit, start_key=start_key)
        items.extend(page.items)
        pages += 1
        start_key = page.last_key
        if start_key is None:
            return items, pages


def test_catalog_lookup(stores):
    product = stores.catalog.get_product("ABC123")
    assert product.product_name == "Widget"
    assert product.price == 9.99
    assert stores.catalog.get_product("MISSING") is None


def test_conditional_create_rejects_duplicates(stores):
    stores.wishlist.put_if_absent(entry("a@x.com", "ABC123"))
    with pytest.raises(DuplicateEntryError):
        stores.wishlist.put_if_absent(entry("a@x.com", "ABC123"))
    # Same item for another owner is a different row.
    stores.wishlist.put_if_absent(entry("b@x.com", "ABC123"))

    items, _ = collect(stores.wishlist, "a@x.com", limit=10)
    assert len(items) == 1


def test_delete_is_idempotent(stores):
    stores.wishlist.put_if_absent(entry("a@x.com", "ABC123"))
    stores.wishlist.delete("a@x.com", "ABC123")
    stores.wishlist.delete("a@x.com", "ABC123")
    items, _ = collect(stores.wishlist, "a@x.com", limit=10)
    assert items == []


@pytest.mark.parametrize("count,limit,expected_pages", [(0, 3, 1), (3, 3, 1), (4, 3, 2), (10, 3, 4), (10, 1, 10)])
def test_pagination_covers_every_row_once(stores, count, limit, expected_pages):
    keys = [f"K{index:02d}" for index in range(count)]
    for key in keys:
        stores.wishlist.put_if_absent(entry("a@x.com", key))
    stores.wishlist.put_if_absent(entry("other@x.com", "K00"))

    items, pages = collect(stores.wishlist, "a@x.com", limit=limit)

    assert [item.item_key for item in items] == keys
    assert pages == expected_pages


def test_sqlite_notifications_are_appended(sqlite_settings):
    stores = build_sqlite_stores(sqlite_settings)
    stores.notifications.append(
        Notification(
            notification_id="n-1",
            owner_identity="a@x.com",
            message="hello",
            created_at="2026-01-01T00:00:00.000Z",
        )
    )
    conn = get_connection(sqlite_settings)
    try:
        rows = conn.execute("SELECT * FROM test_notifications").fetchall()
    finally:
        conn.close()
    assert len(rows) == 1
    assert rows[0]["owner_identity"] == "a@x.com"
    assert rows[0]["is_read"] == 0


def test_init_db_is_repeatable(sqlite_settings):
    init_db(sqlite_settings)
    conn = get_connection(sqlite_settings)
    try:
        versions = [row["version"] for row in conn.execute("SELECT version FROM migrations ORDER BY version")]
    finally:
        conn.close()
    assert versions == [1, 2]


def test_concurrent_adds_store_exactly_one_row(stores):
    workers = 8
    barrier = threading.Barrier(workers)
    outcomes = []
    outcomes_lock = threading.Lock()

    def add():
        barrier.wait()
        try:
            stores.wishlist.put_if_absent(entry("a@x.com", "ABC123"))
            outcome = "stored"
        except DuplicateEntryError:
            outcome = "duplicate"
        except Exception as exc:  # surfaced by the assertion below
            outcome = repr(exc)
        with outcomes_lock:
            outcomes.append(outcome)

    threads = [threading.Thread(target=add) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(outcomes) == ["duplicate"] * (workers - 1) + ["stored"]
    items, _ = collect(stores.wishlist, "a@x.com", limit=10)
    assert len(items) == 1


def test_query_rejects_non_positive_limit(stores):
    with pytest.raises(ValueError):
        stores.wishlist.query("a@x.com", limit=0)


def test_sqlite_constraint_failures_other_than_duplicates_propagate(sqlite_settings):
    stores = build_sqlite_stores(sqlite_settings)
    broken = WishlistEntry.model_construct(
        owner_identity="a@x.com",
        item_key="ABC123",
        product_id="ABC123",
        product_name=None,
        price=1.5,
        added_at="2026-01-01T00:00:00.000Z",
    )

    with pytest.raises(sqlite3.IntegrityError) as excinfo:
        stores.wishlist.put_if_absent(broken)

    items, _ = collect(stores.wishlist, "a@x.com", limit=10)
    assert items == []
