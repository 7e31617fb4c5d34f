"""Product catalog store"""

import logging
import random
import time
from typing import Optional, Union

from pydantic import TypeAdapter, ValidationError

from ..models.product import (
    Product,
    ProductCreate,
    ProductUpdate,
    CatalogStats,
    coerce_price,
    coerce_stock,
)
from ..services.notifications import Notifier
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)

STORAGE_KEY = "products"

# Catalog used on first start and whenever stored data cannot be trusted
SEED_PRODUCTS: list[Product] = [
    Product(
        id="1",
        name="Wireless Headphones",
        description="Premium wireless headphones with noise cancellation and long battery life.",
        price=129.99,
        image_url="https://picsum.photos/id/3/400/400",
        category="Electronics",
        in_stock=15,
    ),
    Product(
        id="2",
        name="Smart Watch",
        description="Track your fitness goals and stay connected with this sleek smart watch.",
        price=249.99,
        image_url="https://picsum.photos/id/26/400/400",
        category="Electronics",
        in_stock=8,
    ),
    Product(
        id="3",
        name="Leather Wallet",
        description="Handcrafted genuine leather wallet with RFID protection.",
        price=49.99,
        image_url="https://picsum.photos/id/103/400/400",
        category="Accessories",
        in_stock=20,
    ),
    Product(
        id="4",
        name="Portable Bluetooth Speaker",
        description="Waterproof portable speaker with amazing sound quality and 16-hour battery life.",
        price=79.99,
        image_url="https://picsum.photos/id/606/400/400",
        category="Electronics",
        in_stock=12,
    ),
]

_PRODUCT_LIST = TypeAdapter(list[Product])


def placeholder_image_url() -> str:
    return f"https://picsum.photos/id/{random.randrange(1000)}/400/400"


class CatalogStore:
    """Product catalog persisted under the ``products`` storage key"""

    def __init__(self, storage: KeyValueStorage, notifier: Notifier):
        self.storage = storage
        self.notifier = notifier
        self.products: list[Product] = self._load()

    def _load(self) -> list[Product]:
        """
        Read the persisted catalog.

        Anything other than a non-empty list of fully valid products is
        replaced by the seed catalog, which is written back immediately.
        """
        raw = self.storage.get_item(STORAGE_KEY)
        if raw is None:
            logger.info("No products in storage, using defaults")
            return self._reset_to_seed()

        try:
            products = _PRODUCT_LIST.validate_json(raw, strict=True)
        except ValidationError as e:
            logger.warning(f"Invalid product data in storage, using defaults: {e.error_count()} error(s)")
            return self._reset_to_seed()

        if not products:
            logger.info("Empty product list in storage, using defaults")
            return self._reset_to_seed()

        logger.debug(f"Loaded {len(products)} products from storage")
        return products

    def _reset_to_seed(self) -> list[Product]:
        products = [p.model_copy() for p in SEED_PRODUCTS]
        self._persist(products)
        return products

    def _persist(self, products: Optional[list[Product]] = None) -> None:
        snapshot = self.products if products is None else products
        try:
            self.storage.set_item(
                STORAGE_KEY,
                _PRODUCT_LIST.dump_json(snapshot, by_alias=True).decode(),
            )
        except OSError:
            logger.exception("Error saving products to storage")
            self.notifier.error("Failed to save product changes")

    def _new_id(self) -> str:
        """Millisecond timestamp, bumped until it is unused"""
        candidate = int(time.time() * 1000)
        existing = {p.id for p in self.products}
        while str(candidate) in existing:
            candidate += 1
        return str(candidate)

    def get(self, product_id: Optional[str]) -> Optional[Product]:
        """Get a product by ID"""
        if not product_id:
            return None
        return next((p for p in self.products if p.id == product_id), None)

    def add(self, fields: Union[ProductCreate, dict]) -> Optional[Product]:
        """
        Add a product to the catalog.

        Returns:
            The new product, or None if name or category is missing
        """
        if isinstance(fields, dict):
            fields = ProductCreate.model_validate(fields)

        if not fields.name or not fields.category:
            self.notifier.error("Product name and category are required")
            return None

        product = Product(
            id=self._new_id(),
            name=fields.name,
            description=fields.description,
            price=coerce_price(fields.price),
            image_url=fields.image_url or placeholder_image_url(),
            category=fields.category,
            in_stock=coerce_stock(fields.in_stock),
        )

        self.products.append(product)
        self._persist()
        logger.info(f"Added product {product.id}: {product.name}")
        self.notifier.success("Product added successfully")
        return product

    def update(
        self,
        product_id: Optional[str],
        fields: Union[ProductUpdate, dict],
    ) -> Optional[Product]:
        """
        Merge fields into an existing product.

        A stock-only update is treated as a system change (checkout) and
        produces no success notification.

        Returns:
            The updated product, or None if nothing was updated
        """
        if not product_id:
            self.notifier.error("Product ID is required for updates")
            return None

        if isinstance(fields, dict):
            fields = ProductUpdate.model_validate(fields)

        changes = fields.changes()
        if "price" in changes:
            changes["price"] = coerce_price(changes["price"])
        if "in_stock" in changes:
            changes["in_stock"] = coerce_stock(changes["in_stock"])

        for index, product in enumerate(self.products):
            if product.id == product_id:
                updated = product.model_copy(update=changes)
                self.products[index] = updated
                break
        else:
            logger.debug(f"Update ignored, product {product_id} not found")
            return None

        self._persist()

        if fields.model_fields_set != {"in_stock"}:
            self.notifier.success("Product updated successfully")
        return updated

    def delete(self, product_id: str) -> None:
        """Remove a product. Unknown IDs are ignored."""
        self.products = [p for p in self.products if p.id != product_id]
        self._persist()
        self.notifier.success("Product deleted successfully")

    def categories(self) -> list[str]:
        """Distinct categories in catalog order"""
        return list(dict.fromkeys(p.category for p in self.products))

    def search(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
    ) -> list[Product]:
        """Storefront search over name and description, optionally by category"""
        results = list(self.products)

        if query:
            query_lower = query.lower()
            results = [
                p for p in results
                if query_lower in p.name.lower() or query_lower in p.description.lower()
            ]

        if category and category != "All":
            results = [p for p in results if p.category == category]

        return results

    def admin_search(self, term: Optional[str] = None) -> list[Product]:
        """Admin product table filter over name and category"""
        if not term:
            return list(self.products)

        term_lower = term.lower()
        return [
            p for p in self.products
            if term_lower in p.name.lower() or term_lower in p.category.lower()
        ]

    def related(self, product: Product, limit: int = 4) -> list[Product]:
        """Other products in the same category"""
        return [
            p for p in self.products
            if p.category == product.category and p.id != product.id
        ][:limit]

    def stats(self, low_stock_threshold: int = 5) -> CatalogStats:
        """Inventory summary"""
        return CatalogStats(
            total_products=len(self.products),
            total_inventory=sum(p.in_stock for p in self.products),
            inventory_value=round(sum(p.price * p.in_stock for p in self.products), 2),
            low_stock_products=[p for p in self.products if p.in_stock < low_stock_threshold],
        )
