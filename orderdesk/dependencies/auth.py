from typing import Optional, Union
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from orderdesk.db import get_db
from orderdesk.exceptions import PermissionDenied, RoleDenied, TokenInvalid
from orderdesk.schemas.auth import ClaimSet, PermissionAction
from orderdesk.services import AuthService, PasswordHasher, PermissionAdminService, TokenService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_auth_service(
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(db, tokens, hasher)


def get_permission_service(db: Session = Depends(get_db)) -> PermissionAdminService:
    return PermissionAdminService(db)


def require_auth(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> ClaimSet:
    """
    Exige um token Bearer válido no header Authorization.

    As claims decodificadas ficam em request.state.claims para as
    verificações seguintes; nenhuma consulta ao banco é feita.

    Raises:
        TokenInvalid: se o token estiver ausente ou não puder ser verificado
    """
    if not token:
        raise TokenInvalid("Token ausente")
    claims = tokens.verify(token)
    if claims is None:
        raise TokenInvalid("Token inválido")
    request.state.claims = claims
    return claims


def require_permission(action: Union[PermissionAction, str], module: str):
    """
    Dependência que exige a permissão (ação, módulo) nas claims do token.

    A comparação é exata nos dois campos: View em "Customer" não libera
    View em "Order".

    Args:
        action: View, Add, Edit ou Delete
        module: Nome do módulo (ex.: "Order")
    """
    action = PermissionAction(action)

    def permission_checker(claims: ClaimSet = Depends(require_auth)) -> ClaimSet:
        if not claims.has_permission(action, module):
            raise PermissionDenied(f"Permissão necessária: {action.value}:{module}")
        return claims

    return permission_checker


def require_role(role_name: str):
    """
    Dependência que exige um papel específico nas claims do token.
    """
    def role_checker(claims: ClaimSet = Depends(require_auth)) -> ClaimSet:
        if not claims.has_role(role_name):
            raise RoleDenied(f"Papel necessário: {role_name}")
        return claims

    return role_checker
