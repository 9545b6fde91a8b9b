from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field

from orderdesk.schemas.base import MAX_ID, BaseSchema

PermissionId = Annotated[int, Field(le=MAX_ID)]


class RoleSchema(BaseSchema):
    """Esquema para roles (papéis)."""
    id: int
    name_role: str


class PermissionSchema(BaseSchema):
    id: int
    name_permission: str
    module: str


class UserWithRoles(BaseModel):
    id: int
    username: str
    roles: List[str] = []


class PermissionCreate(BaseSchema):
    """Esquema para criação de permissões; o nome é validado contra PermissionAction."""
    name_permission: str = Field(min_length=1, max_length=100)
    module: str = Field(min_length=1, max_length=100)


class RolePermissionsUpdate(BaseModel):
    """Substituição do conjunto de permissões de um papel."""
    model_config = ConfigDict(populate_by_name=True)

    role_id: int = Field(ge=1, le=MAX_ID, alias="roleId")
    # Ids não positivos são aceitos aqui e descartados pelo serviço
    permission_ids: List[PermissionId] = Field(max_length=100, alias="permissionIds")
