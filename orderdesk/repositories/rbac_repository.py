"""Consultas e escritas sobre papéis, permissões e suas associações."""

import logging
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from orderdesk.models import Role, Permission, UserRole, RolePermission

logger = logging.getLogger("uvicorn")


class RbacRepository:
    def __init__(self, db: Session):
        self.db = db

    # Papéis

    def get_role(self, role_id: int) -> Optional[Role]:
        return self.db.get(Role, role_id)

    def get_role_by_name(self, name_role: str) -> Optional[Role]:
        return self.db.query(Role).filter(Role.name_role == name_role).first()

    def list_roles(self) -> List[Role]:
        return self.db.query(Role).order_by(Role.id.asc()).all()

    def get_user_roles(self, user_id: int) -> List[Role]:
        return (
            self.db.query(Role)
            .join(UserRole, UserRole.id_role == Role.id)
            .filter(UserRole.id_user == user_id)
            .order_by(Role.id)
            .all()
        )

    def add_role_to_user(self, user_id: int, role_id: int) -> bool:
        """Atribui um papel ao usuário; retorna True se já possuía ou foi atribuído."""
        existing = self.db.query(UserRole).filter(
            UserRole.id_user == user_id, UserRole.id_role == role_id
        ).first()
        if existing:
            return True
        self.db.add(UserRole(id_user=user_id, id_role=role_id))
        self.db.commit()
        return True

    # Permissões

    def list_permissions(self) -> List[Permission]:
        return self.db.query(Permission).order_by(Permission.module, Permission.id).all()

    def find_permission(self, name_permission: str, module: str) -> Optional[Permission]:
        return self.db.query(Permission).filter(
            Permission.name_permission == name_permission,
            Permission.module == module,
        ).first()

    def create_permission(self, name_permission: str, module: str) -> Permission:
        permission = Permission(name_permission=name_permission, module=module)
        self.db.add(permission)
        self.db.commit()
        self.db.refresh(permission)
        return permission

    def existing_permission_ids(self, permission_ids: Sequence[int]) -> List[int]:
        if not permission_ids:
            return []
        stmt = select(Permission.id).where(Permission.id.in_(list(permission_ids)))
        return list(self.db.scalars(stmt))

    def list_modules(self) -> List[str]:
        rows = self.db.query(Permission.module).distinct().order_by(Permission.module).all()
        return [r[0] for r in rows]

    def get_permissions_for_roles(self, role_ids: Sequence[int]) -> List[Permission]:
        """União das permissões concedidas pelos papéis, sem repetição."""
        if not role_ids:
            return []
        return (
            self.db.query(Permission)
            .join(RolePermission, RolePermission.id_permission == Permission.id)
            .filter(RolePermission.id_role.in_(list(role_ids)))
            .distinct()
            .order_by(Permission.module, Permission.id)
            .all()
        )

    # Papel x permissão

    def get_permission_ids_by_role(self, role_id: int) -> List[int]:
        stmt = (
            select(RolePermission.id_permission)
            .where(RolePermission.id_role == role_id)
            .order_by(RolePermission.id_permission)
        )
        return list(self.db.scalars(stmt))

    def replace_role_permissions(self, role_id: int, permission_ids: Sequence[int]) -> None:
        """
        Substitui todas as permissões de um papel em uma única transação.

        Remove as associações existentes e insere uma por id. Qualquer falha
        desfaz a transação inteira e o conjunto anterior permanece.
        """
        try:
            self.db.query(RolePermission).filter(
                RolePermission.id_role == role_id
            ).delete(synchronize_session=False)
            for permission_id in permission_ids:
                self.db.add(RolePermission(id_role=role_id, id_permission=permission_id))
                self.db.flush()
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.error("Falha ao substituir permissões do papel %s; transação desfeita", role_id)
            raise
