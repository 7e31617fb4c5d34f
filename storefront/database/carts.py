"""Shopping cart store"""

import logging
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from ..models.cart import CartItem
from ..models.product import Product
from ..services.notifications import Notifier
from .products import CatalogStore
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)

STORAGE_KEY = "cart"

_CART_ITEMS = TypeAdapter(list[CartItem])


class CartStore:
    """
    Cart persisted under the ``cart`` storage key.

    Each entry keeps a snapshot of the product it was added with. When a
    catalog is attached, quantity updates check stock against the live
    catalog entry and refresh the snapshot.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        notifier: Notifier,
        catalog: Optional[CatalogStore] = None,
    ):
        self.storage = storage
        self.notifier = notifier
        self.catalog = catalog
        self.items: list[CartItem] = self._load()

    def _load(self) -> list[CartItem]:
        raw = self.storage.get_item(STORAGE_KEY)
        if raw is None:
            return []

        try:
            items = _CART_ITEMS.validate_json(raw, strict=True)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable cart data: {e.error_count()} error(s)")
            self._forget()
            return []

        logger.debug(f"Cart loaded from storage with {len(items)} item(s)")
        return items

    def _persist(self) -> None:
        try:
            self.storage.set_item(STORAGE_KEY, _CART_ITEMS.dump_json(self.items, by_alias=True).decode())
        except OSError:
            logger.exception("Error saving cart to storage")
            self.notifier.error("Failed to save cart")

    def _forget(self) -> None:
        try:
            self.storage.remove_item(STORAGE_KEY)
        except OSError:
            logger.exception("Error removing cart from storage")
            self.notifier.error("Failed to save cart")

    def _find(self, product_id: str) -> Optional[CartItem]:
        return next((item for item in self.items if item.product.id == product_id), None)

    def _live_product(self, item: CartItem) -> Product:
        if self.catalog is not None:
            live = self.catalog.get(item.product.id)
            if live is not None:
                return live
        return item.product

    def add_to_cart(self, product: Optional[Product], quantity: int = 1) -> bool:
        """
        Add a product to the cart, or increase the quantity of an existing entry.

        The request is rejected outright, never clamped, when it would exceed
        the available stock.

        Returns:
            True if the cart changed
        """
        if product is None:
            logger.error("Cannot add undefined product to cart")
            self.notifier.warning("Product not available")
            return False

        if quantity < 1:
            self.notifier.warning("Quantity must be at least 1")
            return False

        if product.in_stock < quantity:
            self.notifier.warning(f"Sorry, only {product.in_stock} items available")
            return False

        existing = self._find(product.id)
        if existing:
            new_quantity = existing.quantity + quantity
            if product.in_stock < new_quantity:
                self.notifier.warning(f"Sorry, only {product.in_stock} items available")
                return False

            index = self.items.index(existing)
            self.items[index] = CartItem(product=product, quantity=new_quantity)
        else:
            self.items.append(CartItem(product=product, quantity=quantity))

        self._persist()
        self.notifier.success(f"{product.name} added to cart")
        return True

    def remove_from_cart(self, product_id: str) -> None:
        """Remove an item from the cart"""
        self.items = [item for item in self.items if item.product.id != product_id]
        self._persist()
        self.notifier.info("Item removed from cart")

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """
        Set the quantity of a cart entry.

        Quantities below 1 remove the entry. Quantities above the available
        stock are clamped down to it.
        """
        if quantity < 1:
            self.remove_from_cart(product_id)
            return

        item = self._find(product_id)
        if not item:
            return

        product = self._live_product(item)
        if product.in_stock < quantity:
            self.notifier.warning(f"Sorry, only {product.in_stock} items available")
            quantity = product.in_stock

        index = self.items.index(item)
        if quantity < 1:
            # Sold out since it was added
            del self.items[index]
        else:
            self.items[index] = CartItem(product=product, quantity=quantity)
        self._persist()

    def clear_cart(self) -> None:
        """Remove every item and the stored cart"""
        self.items = []
        self._forget()

    def get_cart_total(self) -> float:
        return sum(item.line_total for item in self.items)

    def get_cart_count(self) -> int:
        return sum(item.quantity for item in self.items)
