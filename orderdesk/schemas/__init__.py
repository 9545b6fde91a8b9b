from .base import BaseSchema
from .auth import PermissionAction, PermissionClaim, ClaimSet, LoginRequest, LoginResult, ChangePasswordRequest
from .orders import OrderSchema, OrderCreate, OrderUpdate
from .customers import CustomerSchema, CustomerCreate, CustomerUpdate
from .admin import RoleSchema, PermissionSchema, UserWithRoles, PermissionCreate, RolePermissionsUpdate

__all__ = [
    "BaseSchema",
    "PermissionAction", "PermissionClaim", "ClaimSet", "LoginRequest", "LoginResult", "ChangePasswordRequest",
    "OrderSchema", "OrderCreate", "OrderUpdate",
    "CustomerSchema", "CustomerCreate", "CustomerUpdate",
    "RoleSchema", "PermissionSchema", "UserWithRoles", "PermissionCreate", "RolePermissionsUpdate",
]
