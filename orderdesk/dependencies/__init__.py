from .auth import (
    oauth2_scheme,
    get_token_service,
    get_password_hasher,
    get_auth_service,
    get_permission_service,
    require_auth,
    require_permission,
    require_role,
)

__all__ = [
    "oauth2_scheme",
    "get_token_service",
    "get_password_hasher",
    "get_auth_service",
    "get_permission_service",
    "require_auth",
    "require_permission",
    "require_role",
]
