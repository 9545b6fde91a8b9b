from .passwords import PasswordHasher
from .token_service import TokenService
from .auth_service import AuthService
from .permission_service import PermissionAdminService

__all__ = ["PasswordHasher", "TokenService", "AuthService", "PermissionAdminService"]
