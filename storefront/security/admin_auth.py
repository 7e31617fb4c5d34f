"""
Admin route protection

Admin endpoints check the persisted admin session. There are no tokens:
whoever holds the session holds admin rights.
"""

import logging

from fastapi import Request, HTTPException

from ..core.context import get_admin_session
from ..database.admin import AdminSessionStore

logger = logging.getLogger(__name__)


class AdminDependency:
    """
    FastAPI dependency for admin-only routes.

    Returns the session store so handlers can read the admin user.
    """

    def __init__(self, require_admin: bool = True):
        self.require_admin = require_admin

    async def __call__(self, request: Request) -> AdminSessionStore:
        session = get_admin_session(request)

        if self.require_admin and not session.is_authenticated:
            logger.warning(f"Rejected unauthenticated admin request: {request.method} {request.url.path}")
            raise HTTPException(
                status_code=401,
                detail="Admin login required",
            )

        return session


# Dependency instances
require_admin = AdminDependency(require_admin=True)
optional_admin = AdminDependency(require_admin=False)
