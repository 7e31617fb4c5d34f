"""Product models for the storefront catalog"""

import math
import re
from typing import Any, Optional

from pydantic import BaseModel, Field

from .common import Message


class Product(BaseModel):
    """Product in the catalog"""
    id: str
    name: str
    description: str
    price: float = Field(ge=0, allow_inf_nan=False)
    image_url: str = Field(alias="imageUrl")
    category: str
    in_stock: int = Field(ge=0, alias="inStock")

    class Config:
        populate_by_name = True


class ProductCreate(BaseModel):
    """
    Fields for a new product.

    Numeric fields are taken as-is and coerced by the catalog, so form input
    such as "12.50" or "" is accepted rather than rejected.
    """
    name: str = ""
    description: str = ""
    price: Any = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    category: str = ""
    in_stock: Any = Field(default=None, alias="inStock")

    class Config:
        populate_by_name = True


class ProductUpdate(BaseModel):
    """Partial product update. Only fields that are set are applied."""
    name: Optional[str] = None
    description: Optional[str] = None
    price: Any = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    category: Optional[str] = None
    in_stock: Any = Field(default=None, alias="inStock")

    class Config:
        populate_by_name = True

    def changes(self) -> dict[str, Any]:
        """Fields explicitly provided with a value"""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class CatalogStats(BaseModel):
    """Inventory summary for the admin dashboard"""
    total_products: int
    total_inventory: int
    inventory_value: float
    low_stock_products: list[Product]


class ProductListResponse(BaseModel):
    """Product listing API response"""
    products: list[Product]
    total: int
    categories: list[str]


class ProductDetailResponse(BaseModel):
    """Single product with related items"""
    product: Product
    related: list[Product] = []


class ProductResponse(BaseModel):
    """Admin product mutation response"""
    product: Optional[Product] = None
    messages: list[Message] = []


# Leading numeric prefix of form input, so "12abc" reads as 12
_DECIMAL_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_PREFIX = re.compile(r"[+-]?\d+")


def _to_number(value: Any, prefix: re.Pattern = _DECIMAL_PREFIX) -> float:
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, str):
        match = prefix.match(value.strip())
        if not match:
            return 0.0
        value = match.group()

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0

    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def coerce_price(value: Any) -> float:
    """Parse a price, falling back to 0 for anything unusable"""
    return _to_number(value)


def coerce_stock(value: Any) -> int:
    """Parse a stock count, truncating fractions and falling back to 0"""
    return int(_to_number(value, _INTEGER_PREFIX))
