from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from orderdesk.schemas.base import BaseSchema
from orderdesk.schemas.orders import _empty_to_none


class CustomerBase(BaseSchema):
    """Esquema base para clientes."""
    name: str = Field(min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[str] = Field(default=None, max_length=100)
    address: Optional[str] = Field(default=None, max_length=255)

    @field_validator("phone", "email", "address", mode="before")
    @classmethod
    def blank_as_none(cls, value):
        return _empty_to_none(value)


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(CustomerBase):
    pass


class CustomerSchema(CustomerBase):
    id: int
    created_by: Optional[int] = None
    creator_username: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
