"""Admin session store"""

import hmac
import logging
from typing import Optional

from ..services.notifications import Notifier
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)

AUTH_KEY = "adminAuth"
USER_KEY = "adminUser"

# The single admin account. Not a real credential store.
ADMIN_USERNAME = "onlineshop@admin"
ADMIN_PASSWORD = "password"


def _matches(given: str, expected: str) -> bool:
    return hmac.compare_digest(given.encode(), expected.encode())


class AdminSessionStore:
    """
    Admin login state persisted under ``adminAuth`` and ``adminUser``.

    Stored state is trusted as-is on startup: there is no token or expiry.
    """

    def __init__(self, storage: KeyValueStorage, notifier: Notifier):
        self.storage = storage
        self.notifier = notifier
        self.is_authenticated: bool = storage.get_item(AUTH_KEY) == "true"
        self.admin_user: Optional[str] = storage.get_item(USER_KEY) or None

    def login(self, username: str, password: str) -> bool:
        """Check credentials and start a session"""
        username_ok = _matches(username, ADMIN_USERNAME)
        password_ok = _matches(password, ADMIN_PASSWORD)
        if not (username_ok and password_ok):
            self.notifier.error("Invalid username or password")
            return False

        self.is_authenticated = True
        self.admin_user = username
        try:
            self.storage.set_item(AUTH_KEY, "true")
            self.storage.set_item(USER_KEY, username)
        except OSError:
            logger.exception("Error saving admin session to storage")
            self.notifier.error("Failed to save admin session")
        logger.info(f"Admin session started for {username}")
        self.notifier.success("Successfully logged in as admin")
        return True

    def logout(self) -> None:
        """End the session"""
        self.is_authenticated = False
        self.admin_user = None
        try:
            self.storage.remove_item(AUTH_KEY)
            self.storage.remove_item(USER_KEY)
        except OSError:
            logger.exception("Error clearing admin session from storage")
            self.notifier.error("Failed to save admin session")
        self.notifier.info("Logged out from admin panel")
