"""SQLAlchemy models for the application."""

from orderdesk.db import Base

# Import all models here to ensure they are registered with SQLAlchemy
from .usuarios import User
from .auth import Role, Permission, UserRole, RolePermission
from .orders import Order
from .customers import Customer
