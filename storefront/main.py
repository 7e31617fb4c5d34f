"""
Storefront Application

Product catalog, shopping cart and admin session state for a small shop,
persisted to key-value storage. Payments and emails are simulated.
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

from .core.config import Settings, get_settings
from .core.context import build_context
from .database.storage import KeyValueStorage
from .routes import products_router, cart_router, checkout_router, admin_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    context = app.state.context
    logger.info("Storefront starting up...")
    logger.info(f"Storage: {'file ' + context.settings.storage_path if context.settings.persistent else 'in-memory'}")
    yield
    logger.info("Storefront shutting down...")


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[KeyValueStorage] = None,
) -> FastAPI:
    """
    Build the application and its stores.

    Args:
        settings: Defaults to settings from the environment
        storage: Defaults to the backend selected by settings
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Storefront catalog, cart, checkout and admin API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.context = build_context(settings, storage)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(products_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    app.include_router(admin_router)

    @app.get("/")
    async def home():
        """API index"""
        return {
            "message": f"{settings.app_name} API",
            "docs": "/docs",
            "endpoints": {
                "products": "/api/products",
                "cart": "/api/cart",
                "checkout": "/api/checkout",
                "admin": "/api/admin",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "storefront",
            "persistent_storage": settings.persistent,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
