from .base import BaseRepository, Page, PageParams, normalize_page_params
from .orders_repository import OrdersRepository
from .customers_repository import CustomersRepository
from .usuarios_repository import UsersRepository
from .rbac_repository import RbacRepository

__all__ = [
    "BaseRepository", "Page", "PageParams", "normalize_page_params",
    "OrdersRepository", "CustomersRepository", "UsersRepository", "RbacRepository",
]
