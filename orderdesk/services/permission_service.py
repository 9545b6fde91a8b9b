import logging
from typing import Any, Dict, List, Sequence

from sqlalchemy.orm import Session

from orderdesk.exceptions import Conflict, NotFound, ValidationFailure
from orderdesk.models import Permission
from orderdesk.repositories import RbacRepository
from orderdesk.schemas.admin import PermissionSchema, RoleSchema
from orderdesk.schemas.auth import PermissionAction
from orderdesk.schemas.base import MAX_ID

logger = logging.getLogger("uvicorn")

MAX_PERMISSIONS_PER_ROLE = 100


class PermissionAdminService:
    """
    Administração de permissões e do vínculo papel x permissão.
    """

    def __init__(self, db: Session):
        self.db = db
        self.rbac = RbacRepository(db)

    def create_permission(self, name_permission: str, module: str) -> Permission:
        """
        Cria uma permissão (ação, módulo).

        Raises:
            ValidationFailure: se a ação não for View, Add, Edit ou Delete
            Conflict: se o par já existir
        """
        name_permission = (name_permission or "").strip()
        module = (module or "").strip()
        if not module:
            raise ValidationFailure("O módulo é obrigatório")
        try:
            action = PermissionAction(name_permission)
        except ValueError:
            raise ValidationFailure(
                f"O nome da permissão deve ser um de: {', '.join(PermissionAction.values())}"
            )

        # TODO: adicionar UniqueConstraint(name_permission, module) com migração;
        # a verificação abaixo não protege contra criações concorrentes.
        if self.rbac.find_permission(action.value, module):
            raise Conflict("Permissão já existe para este módulo")

        permission = self.rbac.create_permission(action.value, module)
        logger.info("Permissão criada: %s:%s", action.value, module)
        return permission

    def get_permission_ids_by_role(self, role_id: int) -> List[int]:
        return self.rbac.get_permission_ids_by_role(role_id)

    def set_role_permissions(self, role_id: int, permission_ids: Sequence[int]) -> List[int]:
        """
        Substitui o conjunto de permissões do papel.

        Ids não positivos são descartados e repetições removidas. Ids que
        não existem geram ValidationFailure antes de qualquer escrita.
        """
        if len(permission_ids) > MAX_PERMISSIONS_PER_ROLE:
            raise ValidationFailure("Permissões demais")
        if role_id > MAX_ID or self.rbac.get_role(role_id) is None:
            raise NotFound("Papel não encontrado")

        ids = list(dict.fromkeys(pid for pid in permission_ids if pid > 0))
        in_range = [pid for pid in ids if pid <= MAX_ID]
        missing = set(ids) - set(self.rbac.existing_permission_ids(in_range))
        if missing:
            raise ValidationFailure(f"Permissões inexistentes: {sorted(missing)}")

        self.rbac.replace_role_permissions(role_id, ids)
        logger.info("Permissões do papel %s substituídas: %s", role_id, ids)
        return ids

    def list_roles(self) -> List[Dict[str, Any]]:
        return [RoleSchema.model_validate(r).model_dump() for r in self.rbac.list_roles()]

    def list_permissions(self) -> List[Dict[str, Any]]:
        """Permissões ordenadas por módulo e id."""
        return [PermissionSchema.model_validate(p).model_dump() for p in self.rbac.list_permissions()]

    def list_modules(self) -> List[str]:
        return self.rbac.list_modules()
