from .auth import router as auth_router
from .orders import router as orders_router
from .customers import router as customers_router
from .admin import router as admin_router

__all__ = ["auth_router", "orders_router", "customers_router", "admin_router"]
