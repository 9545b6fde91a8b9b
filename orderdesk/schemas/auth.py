from enum import Enum
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PermissionAction(str, Enum):
    """Ações permitidas em uma permissão."""
    VIEW = "View"
    ADD = "Add"
    EDIT = "Edit"
    DELETE = "Delete"

    @classmethod
    def values(cls) -> List[str]:
        return [a.value for a in cls]


class PermissionClaim(BaseModel):
    """Par (ação, módulo) embutido no token."""
    model_config = ConfigDict(frozen=True)

    name_permission: PermissionAction
    module: str

    def matches(self, action: Union[PermissionAction, str], module: str) -> bool:
        return self.name_permission == action and self.module == module


class ClaimSet(BaseModel):
    """
    Snapshot congelado de identidade, papéis e permissões do usuário.

    Calculado no login e embutido no token; nunca reconsultado no banco
    durante a validade do token.
    """
    model_config = ConfigDict(frozen=True)

    sub: int
    username: str
    roles: List[str] = Field(default_factory=list)
    permissions: List[PermissionClaim] = Field(default_factory=list)

    def has_permission(self, action: Union[PermissionAction, str], module: str) -> bool:
        return any(p.matches(action, module) for p in self.permissions)

    def has_role(self, role_name: str) -> bool:
        return role_name in self.roles

    def to_payload(self) -> Dict[str, Any]:
        payload = self.model_dump(mode="json")
        # "sub" precisa ser string no JWT
        payload["sub"] = str(self.sub)
        return payload

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ClaimSet":
        return cls(
            sub=int(payload["sub"]),
            username=payload["username"],
            roles=payload.get("roles") or [],
            permissions=payload.get("permissions") or [],
        )


class LoginRequest(BaseModel):
    """Esquema para login de usuários."""
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=255)

    @field_validator("username")
    @classmethod
    def strip_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("username não pode ser vazio")
        return value


class LoginResult(BaseModel):
    token: str
    user: ClaimSet


class ChangePasswordRequest(BaseModel):
    """Esquema para troca de senha."""
    model_config = ConfigDict(populate_by_name=True)

    current_password: str = Field(min_length=1, max_length=255, alias="currentPassword")
    new_password: str = Field(min_length=6, max_length=255, alias="newPassword")
