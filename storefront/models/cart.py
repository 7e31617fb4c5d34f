"""Cart models for the storefront"""

from pydantic import BaseModel, Field

from .common import Message
from .product import Product


class CartItem(BaseModel):
    """Item in a shopping cart, holding a snapshot of the product"""
    product: Product
    quantity: int = Field(gt=0)

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    product_id: str
    quantity: int = Field(default=1, gt=0)


class UpdateCartItemRequest(BaseModel):
    """Request to update cart item quantity. Zero or less removes the item."""
    quantity: int


class CartResponse(BaseModel):
    """Cart API response"""
    items: list[CartItem] = []
    total: float = 0.0
    count: int = 0
    messages: list[Message] = []
