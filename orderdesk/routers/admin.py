from typing import Any, Dict
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from orderdesk.db import get_db
from orderdesk.dependencies import get_permission_service, require_role
from orderdesk.repositories import UsersRepository
from orderdesk.schemas.admin import PermissionCreate, PermissionSchema, RolePermissionsUpdate
from orderdesk.schemas.auth import ClaimSet
from orderdesk.schemas.base import MAX_ID
from orderdesk.services import PermissionAdminService

ADMIN_ROLE = "Admin"

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
)


@router.get("/users", response_model=Dict[str, Any])
def list_users(
    claims: ClaimSet = Depends(require_role(ADMIN_ROLE)),
    db: Session = Depends(get_db),
):
    return {"data": UsersRepository(db).list_with_roles()}


@router.get("/roles", response_model=Dict[str, Any])
def list_roles(
    claims: ClaimSet = Depends(require_role(ADMIN_ROLE)),
    service: PermissionAdminService = Depends(get_permission_service),
):
    return {"data": service.list_roles()}


@router.get("/permissions", response_model=Dict[str, Any])
def list_permissions(
    claims: ClaimSet = Depends(require_role(ADMIN_ROLE)),
    service: PermissionAdminService = Depends(get_permission_service),
):
    return {"data": service.list_permissions()}


@router.post("/permissions", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
def create_permission(
    payload: PermissionCreate,
    claims: ClaimSet = Depends(require_role(ADMIN_ROLE)),
    service: PermissionAdminService = Depends(get_permission_service),
):
    """
    Cria uma permissão. O nome deve ser View, Add, Edit ou Delete (400);
    par já existente retorna 409.
    """
    permission = service.create_permission(payload.name_permission, payload.module)
    return {
        "message": "Permissão criada com sucesso",
        "data": PermissionSchema.model_validate(permission).model_dump(),
    }


@router.get("/modules", response_model=Dict[str, Any])
def list_modules(
    claims: ClaimSet = Depends(require_role(ADMIN_ROLE)),
    service: PermissionAdminService = Depends(get_permission_service),
):
    return {"data": service.list_modules()}


@router.get("/role-permissions", response_model=Dict[str, Any])
def get_role_permissions(
    role_id: int = Query(..., ge=1, le=MAX_ID, alias="roleId"),
    claims: ClaimSet = Depends(require_role(ADMIN_ROLE)),
    service: PermissionAdminService = Depends(get_permission_service),
):
    return {"data": service.get_permission_ids_by_role(role_id)}


@router.post("/role-permissions", response_model=Dict[str, Any])
def set_role_permissions(
    payload: RolePermissionsUpdate,
    claims: ClaimSet = Depends(require_role(ADMIN_ROLE)),
    service: PermissionAdminService = Depends(get_permission_service),
):
    service.set_role_permissions(payload.role_id, payload.permission_ids)
    return {"ok": True}
