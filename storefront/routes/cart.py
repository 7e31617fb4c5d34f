"""Cart API routes for the storefront"""

from fastapi import APIRouter, HTTPException, Depends

from ..core.context import get_cart, get_catalog, get_notifier
from ..database.carts import CartStore
from ..database.products import CatalogStore
from ..models.cart import AddToCartRequest, UpdateCartItemRequest, CartResponse
from ..models.common import to_messages
from ..services.notifications import Notifier

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def cart_response(cart: CartStore, notifier: Notifier) -> CartResponse:
    return CartResponse(
        items=cart.items,
        total=round(cart.get_cart_total(), 2),
        count=cart.get_cart_count(),
        messages=to_messages(notifier.drain()),
    )


@router.get("", response_model=CartResponse)
async def get_cart_contents(
    cart: CartStore = Depends(get_cart),
    notifier: Notifier = Depends(get_notifier),
):
    """Get the current cart"""
    return cart_response(cart, notifier)


@router.post("/items", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    cart: CartStore = Depends(get_cart),
    catalog: CatalogStore = Depends(get_catalog),
    notifier: Notifier = Depends(get_notifier),
):
    """Add an item to the cart"""
    product = catalog.get(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    if not cart.add_to_cart(product, request.quantity):
        messages = notifier.drain()
        raise HTTPException(
            status_code=400,
            detail=messages[-1].message if messages else "Could not add item to cart",
        )

    return cart_response(cart, notifier)


@router.put("/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    product_id: str,
    request: UpdateCartItemRequest,
    cart: CartStore = Depends(get_cart),
    notifier: Notifier = Depends(get_notifier),
):
    """Update item quantity in cart. Quantities above stock are clamped."""
    cart.update_quantity(product_id, request.quantity)
    return cart_response(cart, notifier)


@router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    product_id: str,
    cart: CartStore = Depends(get_cart),
    notifier: Notifier = Depends(get_notifier),
):
    """Remove an item from the cart"""
    cart.remove_from_cart(product_id)
    return cart_response(cart, notifier)


@router.delete("", response_model=CartResponse)
async def clear_cart(
    cart: CartStore = Depends(get_cart),
    notifier: Notifier = Depends(get_notifier),
):
    """Clear all items from cart"""
    cart.clear_cart()
    return cart_response(cart, notifier)
