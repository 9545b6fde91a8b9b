from sqlalchemy.orm import Session

from orderdesk.models import Customer
from orderdesk.repositories.base import BaseRepository
from orderdesk.schemas.customers import CustomerCreate, CustomerUpdate


class CustomersRepository(BaseRepository[Customer, CustomerCreate, CustomerUpdate]):
    """
    Repositório para operações com clientes.
    """

    sort_whitelist = frozenset({"id", "name", "phone", "email", "created_at"})
    default_sort = "created_at"
    search_columns = ("name", "phone", "email", "address")

    def __init__(self, db: Session):
        super().__init__(Customer, db)
