# Security modules

from .admin_auth import AdminDependency, require_admin, optional_admin

__all__ = ["AdminDependency", "require_admin", "optional_admin"]
