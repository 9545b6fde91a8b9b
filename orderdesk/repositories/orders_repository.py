from sqlalchemy.orm import Session

from orderdesk.models import Order
from orderdesk.repositories.base import BaseRepository
from orderdesk.schemas.orders import OrderCreate, OrderUpdate


class OrdersRepository(BaseRepository[Order, OrderCreate, OrderUpdate]):
    """
    Repositório para operações com pedidos.
    """

    sort_whitelist = frozenset({"id", "item", "customer_name", "created_at"})
    default_sort = "created_at"
    search_columns = ("item", "customer_name", "customer_phone", "customer_email")

    def __init__(self, db: Session):
        super().__init__(Order, db)
