"""Per-application store wiring"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from .config import Settings
from ..database.admin import AdminSessionStore
from ..database.carts import CartStore
from ..database.products import CatalogStore
from ..database.storage import KeyValueStorage, create_storage
from ..services.checkout import CheckoutService
from ..services.email import EmailService
from ..services.notifications import Notifier

logger = logging.getLogger(__name__)


@dataclass
class StoreContext:
    """All stateful services for one application root"""
    settings: Settings
    storage: KeyValueStorage
    notifier: Notifier
    catalog: CatalogStore
    cart: CartStore
    admin: AdminSessionStore
    email: EmailService
    checkout: CheckoutService


def build_context(
    settings: Settings,
    storage: Optional[KeyValueStorage] = None,
) -> StoreContext:
    """Load every store from storage and wire them together"""
    storage = storage if storage is not None else create_storage(settings)
    notifier = Notifier()

    catalog = CatalogStore(storage, notifier)
    cart = CartStore(storage, notifier, catalog=catalog)
    admin = AdminSessionStore(storage, notifier)
    email = EmailService(notifier)
    checkout = CheckoutService(
        catalog=catalog,
        cart=cart,
        email=email,
        notifier=notifier,
        processing_delay=settings.checkout_processing_delay,
    )

    logger.info(
        f"Stores ready: {len(catalog.products)} products, "
        f"{cart.get_cart_count()} item(s) in cart, "
        f"admin {'signed in' if admin.is_authenticated else 'signed out'}"
    )

    return StoreContext(
        settings=settings,
        storage=storage,
        notifier=notifier,
        catalog=catalog,
        cart=cart,
        admin=admin,
        email=email,
        checkout=checkout,
    )


def get_context(request: Request) -> StoreContext:
    return request.app.state.context


def get_catalog(request: Request) -> CatalogStore:
    return get_context(request).catalog


def get_cart(request: Request) -> CartStore:
    return get_context(request).cart


def get_admin_session(request: Request) -> AdminSessionStore:
    return get_context(request).admin


def get_checkout(request: Request) -> CheckoutService:
    return get_context(request).checkout


def get_notifier(request: Request) -> Notifier:
    return get_context(request).notifier
