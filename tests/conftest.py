import pytest
from fastapi.testclient import TestClient

from wishlist_api.app.core.config import Settings
from wishlist_api.app.core.security import create_access_token
from wishlist_api.app.main import create_app
from wishlist_api.app.schemas.product import Product
from wishlist_api.app.stores.memory import build_memory_stores

SECRET = "test-secret"
WISHLIST_URL = "/api/v1/wishlist"


@pytest.fixture
def settings():
    return Settings(jwt_secret=SECRET, page_size=3, debug=False)


@pytest.fixture
def stores():
    return build_memory_stores(
        [
            Product(product_id="ABC123", product_name="Widget", price=9.99),
            Product(product_id="XYZ789", product_name="Gadget", price=24.5),
        ]
    )


@pytest.fixture
def app(settings, stores):
    return create_app(settings=settings, stores=stores)


@pytest.fixture
def client(app):
    return TestClient(app)


def make_token(email="a@x.com", secret=SECRET, **claims):
    payload = {"email": email, **claims}
    return create_access_token(payload, secret, expires_delta=3600)


def auth_headers(email="a@x.com"):
    return {"Authorization": f"Bearer {make_token(email)}"}
