import json

from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.database.products import CatalogStore
from storefront.database.storage import FileStorage, MemoryStorage, create_storage
from storefront.database.admin import AdminSessionStore
from storefront.database.carts import CartStore
from storefront.main import create_app
from storefront.services.notifications import Notifier


def test_memory_storage_basics():
    storage = MemoryStorage({"a": "1"})
    assert storage.get_item("a") == "1"
    storage.set_item("b", "2")
    storage.remove_item("a")
    storage.remove_item("missing")
    assert storage.get_item("a") is None
    assert storage.get_item("b") == "2"
    storage.clear()
    assert storage.get_item("b") is None


def test_file_storage_survives_restart(tmp_path):
    path = tmp_path / "state" / "storage.json"
    storage = FileStorage(str(path))
    storage.set_item("adminAuth", "true")
    storage.set_item("adminUser", "onlineshop@admin")
    storage.remove_item("adminUser")

    reopened = FileStorage(str(path))

    assert reopened.get_item("adminAuth") == "true"
    assert reopened.get_item("adminUser") is None
    assert json.loads(path.read_text()) == {"adminAuth": "true"}


def test_file_storage_ignores_corrupt_file(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{not json")
    assert FileStorage(str(path)).items == {}

    path.write_text("[1, 2, 3]")
    assert FileStorage(str(path)).items == {}


def test_catalog_and_session_restart_from_file(tmp_path):
    path = str(tmp_path / "storage.json")
    notifier = Notifier()

    catalog = CatalogStore(FileStorage(path), notifier)
    product = catalog.add({"name": "Lamp", "category": "Home", "price": "19.99", "inStock": "3"})
    assert AdminSessionStore(FileStorage(path), notifier).login("onlineshop@admin", "password")

    storage = FileStorage(path)
    assert CatalogStore(storage, notifier).get(product.id) == product
    assert AdminSessionStore(storage, notifier).is_authenticated is True


def test_create_storage_follows_settings(tmp_path):
    assert isinstance(create_storage(Settings(storage_path=None)), MemoryStorage)
    storage = create_storage(Settings(storage_path=str(tmp_path / "s.json")))
    assert isinstance(storage, FileStorage)


class ReadOnlyStorage(MemoryStorage):
    """Storage whose writes fail, like a full or read-only disk"""

    def set_item(self, key, value):
        raise OSError("read-only file system")

    def remove_item(self, key):
        raise OSError("read-only file system")


def messages(notifier):
    return [n.message for n in notifier.drain()]


def test_catalog_write_failure_is_reported_not_raised():
    notifier = Notifier()
    catalog = CatalogStore(ReadOnlyStorage(), notifier)
    assert "Failed to save product changes" in messages(notifier)

    product = catalog.add({"name": "Lamp", "category": "Home", "price": 5, "inStock": 2})

    assert catalog.get(product.id) == product
    assert messages(notifier) == ["Failed to save product changes", "Product added successfully"]

    catalog.update(product.id, {"in_stock": 1})
    assert messages(notifier) == ["Failed to save product changes"]


def test_cart_write_failure_is_reported_not_raised(make_product):
    notifier = Notifier()
    cart = CartStore(ReadOnlyStorage(), notifier)

    assert cart.add_to_cart(make_product(), 2) is True
    assert messages(notifier) == ["Failed to save cart", "Desk Lamp added to cart"]

    cart.clear_cart()
    assert cart.items == []
    assert messages(notifier) == ["Failed to save cart"]


def test_session_write_failure_is_reported_not_raised():
    notifier = Notifier()
    admin = AdminSessionStore(ReadOnlyStorage(), notifier)

    assert admin.login("onlineshop@admin", "password") is True
    assert admin.is_authenticated is True
    assert messages(notifier) == ["Failed to save admin session", "Successfully logged in as admin"]

    admin.logout()
    assert admin.is_authenticated is False
    assert messages(notifier) == ["Failed to save admin session", "Logged out from admin panel"]


def test_file_storage_write_failure_through_api(tmp_path, settings):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    storage = FileStorage(str(tmp_path / "storage.json"))
    client = TestClient(create_app(settings=settings, storage=storage))
    client.post("/api/admin/login", json={"username": "onlineshop@admin", "password": "password"})

    # Parent directory of the storage file is now a regular file
    storage.path = blocker / "storage.json"
    r = client.post("/api/admin/products", json={"name": "Lamp", "category": "Home", "price": 5})

    assert r.status_code == 200
    assert r.json()["product"]["name"] == "Lamp"
    levels = [m["level"] for m in r.json()["messages"]]
    assert "error" in levels
