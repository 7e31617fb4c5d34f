# Database modules

from .storage import KeyValueStorage, MemoryStorage, FileStorage, create_storage
from .products import CatalogStore, SEED_PRODUCTS
from .carts import CartStore
from .admin import AdminSessionStore

__all__ = [
    "KeyValueStorage",
    "MemoryStorage",
    "FileStorage",
    "create_storage",
    "CatalogStore",
    "SEED_PRODUCTS",
    "CartStore",
    "AdminSessionStore",
]
