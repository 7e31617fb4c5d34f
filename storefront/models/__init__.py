# Storefront Models

from .common import Message
from .product import (
    Product,
    ProductCreate,
    ProductUpdate,
    CatalogStats,
    ProductListResponse,
    ProductDetailResponse,
    ProductResponse,
)
from .cart import CartItem, AddToCartRequest, UpdateCartItemRequest, CartResponse
from .checkout import (
    CheckoutState,
    CheckoutForm,
    CheckoutResponse,
    Order,
    OrderItem,
    ShippingAddress,
    PaymentDetails,
    PaymentMethod,
)
from .admin import LoginRequest, SessionResponse

__all__ = [
    "Message",
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "CatalogStats",
    "ProductListResponse",
    "ProductDetailResponse",
    "ProductResponse",
    "CartItem",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartResponse",
    "CheckoutState",
    "CheckoutForm",
    "CheckoutResponse",
    "Order",
    "OrderItem",
    "ShippingAddress",
    "PaymentDetails",
    "PaymentMethod",
    "LoginRequest",
    "SessionResponse",
]
