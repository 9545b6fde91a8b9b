from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from orderdesk.schemas.base import BaseSchema


def _empty_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class OrderBase(BaseSchema):
    """Esquema base para pedidos."""
    item: str = Field(min_length=1, max_length=500)
    customer_name: str = Field(min_length=1, max_length=100)
    customer_phone: Optional[str] = Field(default=None, max_length=20)
    customer_email: Optional[str] = Field(default=None, max_length=100)
    customer_address: Optional[str] = Field(default=None, max_length=255)

    @field_validator("customer_phone", "customer_email", "customer_address", mode="before")
    @classmethod
    def blank_as_none(cls, value):
        return _empty_to_none(value)


class OrderCreate(OrderBase):
    """Esquema para criação de pedidos."""
    pass


class OrderUpdate(OrderBase):
    """Esquema para atualização (substituição completa) de pedidos."""
    pass


class OrderSchema(OrderBase):
    """Esquema para representação de pedidos."""
    id: int
    created_by: Optional[int] = None
    creator_username: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
