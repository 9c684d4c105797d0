import asyncio

import pytest

from wishlist_api.app.core.config import Settings
from wishlist_api.app.core.errors import DuplicateEntryError, NotFoundError
from wishlist_api.app.schemas.product import Product
from wishlist_api.app.services.wishlist_service import WishlistService, utc_timestamp
from wishlist_api.app.stores.memory import build_memory_stores


@pytest.fixture
def stores():
    return build_memory_stores([Product(product_id="ABC123", product_name="Widget", price=9.99)])


@pytest.fixture
def service(stores):
    return WishlistService(Settings(page_size=2), stores)


def run(coro):
    return asyncio.run(coro)


def test_add_then_list(service):
    assert run(service.add_item("a@x.com", "abc123")) == "Added to wishlist"
    items = run(service.list_items("a@x.com"))
    assert [(item.item_key, item.product_name, item.price) for item in items] == [("ABC123", "Widget", 9.99)]


def test_add_unknown_product_raises(service, stores):
    with pytest.raises(NotFoundError):
        run(service.add_item("a@x.com", "missing"))
    assert stores.wishlist.count("a@x.com") == 0


def test_duplicate_add_raises_without_second_notification(service, stores):
    run(service.add_item("a@x.com", "abc123"))
    with pytest.raises(DuplicateEntryError):
        run(service.add_item("a@x.com", "Abc123"))
    assert len(stores.notifications.notifications) == 1


def test_entry_is_a_snapshot_of_the_catalog(service, stores):
    run(service.add_item("a@x.com", "abc123"))
    stores.catalog.add_product(Product(product_id="ABC123", product_name="Widget v2", price=12.0))

    item = run(service.list_items("a@x.com"))[0]
    assert item.product_name == "Widget"
    assert item.price == 9.99


def test_list_pages_through_store(service, stores):
    for index in range(5):
        stores.catalog.add_product(Product(product_id=f"P{index}", product_name=f"P{index}", price=1.0))
        run(service.add_item("a@x.com", f"p{index}"))

    items = run(service.list_items("a@x.com"))
    assert [item.item_key for item in items] == ["P0", "P1", "P2", "P3", "P4"]


def test_save_notification_builds_unread_notification(service, stores):
    notification = run(service.save_notification("a@x.com", "hello"))
    assert notification.is_read is False
    assert notification.owner_identity == "a@x.com"
    assert len(notification.notification_id) == 36
    assert stores.notifications.notifications == [notification]


def test_utc_timestamp_format():
    stamp = utc_timestamp()
    assert stamp.endswith("Z")
    assert len(stamp) == len("2026-01-01T00:00:00.000Z")
