"""SQLAlchemy model for the 'users' table."""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from orderdesk.db import Base


class User(Base):
    """
    Representa os usuários do sistema.

    Criados pelo seed/processo administrativo; alterados apenas na troca de senha.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(100), nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)

    # Relacionamentos
    roles = relationship("UserRole", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"

    @property
    def role_names(self):
        """Lista de nomes dos papéis (roles) do usuário."""
        return [ur.role.name_role for ur in self.roles if ur.role]
