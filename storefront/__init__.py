"""Storefront: persisted catalog, cart and admin session state behind a FastAPI service."""
