"""Pytest configuration for storefront tests."""

import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.core.context import build_context
from storefront.database.admin import AdminSessionStore
from storefront.database.carts import CartStore
from storefront.database.products import CatalogStore
from storefront.database.storage import MemoryStorage
from storefront.main import create_app
from storefront.models.product import Product
from storefront.services.notifications import Notifier


@pytest.fixture
def settings():
    return Settings(checkout_processing_delay=0, storage_path=None)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def catalog(storage, notifier):
    return CatalogStore(storage, notifier)


@pytest.fixture
def cart(storage, notifier, catalog):
    return CartStore(storage, notifier, catalog=catalog)


@pytest.fixture
def admin(storage, notifier):
    return AdminSessionStore(storage, notifier)


@pytest.fixture
def context(settings, storage):
    return build_context(settings, storage)


@pytest.fixture
def client(settings, storage):
    app = create_app(settings=settings, storage=storage)
    return TestClient(app)


@pytest.fixture
def admin_client(client):
    r = client.post("/api/admin/login", json={"username": "onlineshop@admin", "password": "password"})
    assert r.status_code == 200
    return client


def _make_product(**overrides) -> Product:
    fields = {
        "id": "p-1",
        "name": "Desk Lamp",
        "description": "Adjustable LED desk lamp.",
        "price": 10.0,
        "image_url": "https://example.com/lamp.png",
        "category": "Home",
        "in_stock": 5,
    }
    fields.update(overrides)
    return Product(**fields)


@pytest.fixture
def make_product():
    return _make_product
