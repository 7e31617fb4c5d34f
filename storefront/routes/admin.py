"""Admin API routes: session and catalog management"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Depends

from ..core.context import get_admin_session, get_catalog, get_context, get_notifier, StoreContext
from ..database.admin import AdminSessionStore
from ..database.products import CatalogStore
from ..models.admin import LoginRequest, SessionResponse
from ..models.common import to_messages
from ..models.product import (
    CatalogStats,
    Product,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
)
from ..security.admin_auth import require_admin, optional_admin
from ..services.notifications import Notifier

router = APIRouter(prefix="/api/admin", tags=["Admin"])


def session_response(session: AdminSessionStore, notifier: Notifier) -> SessionResponse:
    return SessionResponse(
        is_authenticated=session.is_authenticated,
        admin_user=session.admin_user,
        messages=to_messages(notifier.drain()),
    )


@router.post("/login", response_model=SessionResponse)
async def login(
    request: LoginRequest,
    session: AdminSessionStore = Depends(get_admin_session),
    notifier: Notifier = Depends(get_notifier),
):
    """Sign in to the admin panel"""
    if not session.login(request.username, request.password):
        messages = notifier.drain()
        raise HTTPException(
            status_code=401,
            detail=messages[-1].message if messages else "Invalid username or password",
        )
    return session_response(session, notifier)


@router.post("/logout", response_model=SessionResponse)
async def logout(
    session: AdminSessionStore = Depends(get_admin_session),
    notifier: Notifier = Depends(get_notifier),
):
    """Sign out of the admin panel"""
    session.logout()
    return session_response(session, notifier)


@router.get("/session", response_model=SessionResponse)
async def get_session(
    session: AdminSessionStore = Depends(optional_admin),
    notifier: Notifier = Depends(get_notifier),
):
    """Current admin session"""
    return session_response(session, notifier)


@router.get("/dashboard", response_model=CatalogStats, dependencies=[Depends(require_admin)])
async def dashboard(context: StoreContext = Depends(get_context)):
    """Inventory totals and low-stock products"""
    return context.catalog.stats(low_stock_threshold=context.settings.low_stock_threshold)


@router.get("/products", response_model=list[Product], dependencies=[Depends(require_admin)])
async def list_products(
    search: Optional[str] = Query(None, description="Filter by name or category"),
    catalog: CatalogStore = Depends(get_catalog),
):
    """Product table for the admin panel"""
    return catalog.admin_search(search)


@router.post("/products", response_model=ProductResponse, dependencies=[Depends(require_admin)])
async def create_product(
    request: ProductCreate,
    catalog: CatalogStore = Depends(get_catalog),
    notifier: Notifier = Depends(get_notifier),
):
    """Add a product to the catalog"""
    product = catalog.add(request)
    if product is None:
        messages = notifier.drain()
        raise HTTPException(
            status_code=400,
            detail=messages[-1].message if messages else "Failed to add product",
        )
    return ProductResponse(product=product, messages=to_messages(notifier.drain()))


@router.put("/products/{product_id}", response_model=ProductResponse, dependencies=[Depends(require_admin)])
async def update_product(
    product_id: str,
    request: ProductUpdate,
    catalog: CatalogStore = Depends(get_catalog),
    notifier: Notifier = Depends(get_notifier),
):
    """Update some or all fields of a product"""
    if not catalog.get(product_id):
        raise HTTPException(status_code=404, detail="Product not found")

    product = catalog.update(product_id, request)
    return ProductResponse(product=product, messages=to_messages(notifier.drain()))


@router.delete("/products/{product_id}", response_model=ProductResponse, dependencies=[Depends(require_admin)])
async def delete_product(
    product_id: str,
    catalog: CatalogStore = Depends(get_catalog),
    notifier: Notifier = Depends(get_notifier),
):
    """Delete a product. Deleting an unknown product is not an error."""
    catalog.delete(product_id)
    return ProductResponse(messages=to_messages(notifier.drain()))
