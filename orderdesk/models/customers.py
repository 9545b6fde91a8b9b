"""SQLAlchemy model for the 'customers' table."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from orderdesk.db import Base


class Customer(Base):
    """
    Representa os clientes, protegidos pelo módulo de permissão "Customer".
    """
    __tablename__ = "customers"
    __table_args__ = (
        Index("idx_customers_created_at", "created_at"),
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    phone = Column(String(20), nullable=True)
    email = Column(String(100), nullable=True)
    address = Column(String(255), nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    creator = relationship("User", foreign_keys="Customer.created_by")

    def __repr__(self):
        return f"<Customer(id={self.id}, name='{self.name}')>"

    @property
    def creator_username(self):
        return self.creator.username if self.creator else None
