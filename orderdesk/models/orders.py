"""SQLAlchemy model for the 'orders' table."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from orderdesk.db import Base


class Order(Base):
    """
    Representa os pedidos, protegidos pelo módulo de permissão "Order".
    """
    __tablename__ = "orders"
    __table_args__ = (
        Index("idx_orders_created_at", "created_at"),
    )

    id = Column(Integer, primary_key=True)
    item = Column(String(500), nullable=False)
    customer_name = Column(String(100), nullable=False)
    customer_phone = Column(String(20), nullable=True)
    customer_email = Column(String(100), nullable=True)
    customer_address = Column(String(255), nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    # Relacionamentos
    creator = relationship("User", foreign_keys="Order.created_by")

    def __repr__(self):
        return f"<Order(id={self.id}, item='{self.item}', customer_name='{self.customer_name}')>"

    @property
    def creator_username(self):
        return self.creator.username if self.creator else None
