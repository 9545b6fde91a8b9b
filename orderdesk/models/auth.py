"""SQLAlchemy models for authentication and authorization."""

from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from orderdesk.db import Base


class Role(Base):
    """
    Representa os papéis (roles) do sistema para RBAC.

    Conjunto de referência estático (Admin, Manager, Staff, Customer).
    """
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True)
    name_role = Column(String(50), nullable=False, unique=True)

    # Relacionamentos
    users = relationship("UserRole", back_populates="role")
    permissions = relationship("RolePermission", back_populates="role")

    def __repr__(self):
        return f"<Role(id={self.id}, name_role='{self.name_role}')>"


class Permission(Base):
    """
    Par (ação, módulo) que controla uma capacidade.

    A unicidade do par é verificada por consulta em create_permission;
    não há constraint no banco.
    """
    __tablename__ = "permissions"

    id = Column(Integer, primary_key=True)
    name_permission = Column(String(20), nullable=False)
    module = Column(String(100), nullable=False)

    roles = relationship("RolePermission", back_populates="permission")

    def __repr__(self):
        return f"<Permission(name_permission='{self.name_permission}', module='{self.module}')>"


class UserRole(Base):
    """
    Associação muitos-para-muitos entre usuários e papéis.
    """
    __tablename__ = "user_roles"

    id = Column(Integer, primary_key=True)
    id_user = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    id_role = Column(Integer, ForeignKey("roles.id", ondelete="CASCADE"), nullable=False)

    # Constraint para garantir que um usuário não tenha o mesmo papel mais de uma vez
    __table_args__ = (
        UniqueConstraint("id_user", "id_role", name="uq_user_role"),
    )

    # Relacionamentos
    user = relationship("User", back_populates="roles")
    role = relationship("Role", back_populates="users")

    def __repr__(self):
        return f"<UserRole(id_user={self.id_user}, id_role={self.id_role})>"


class RolePermission(Base):
    """
    Associação muitos-para-muitos entre papéis e permissões.
    """
    __tablename__ = "role_permissions"

    id = Column(Integer, primary_key=True)
    id_role = Column(Integer, ForeignKey("roles.id", ondelete="CASCADE"), nullable=False)
    id_permission = Column(Integer, ForeignKey("permissions.id", ondelete="CASCADE"), nullable=False)

    __table_args__ = (
        UniqueConstraint("id_role", "id_permission", name="uq_role_permission"),
    )

    role = relationship("Role", back_populates="permissions")
    permission = relationship("Permission", back_populates="roles")

    def __repr__(self):
        return f"<RolePermission(id_role={self.id_role}, id_permission={self.id_permission})>"
