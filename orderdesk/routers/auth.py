from typing import Any, Dict
from fastapi import APIRouter, Depends

from orderdesk.dependencies import get_auth_service, require_auth
from orderdesk.exceptions import AuthenticationFailure
from orderdesk.schemas.auth import ChangePasswordRequest, ClaimSet, LoginRequest, LoginResult
from orderdesk.services import AuthService

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


@router.post("/login", response_model=LoginResult)
def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Autentica e devolve o token com as claims do usuário."""
    result = auth_service.authenticate(payload.username, payload.password)
    if result is None:
        raise AuthenticationFailure()
    return result


@router.get("/profile", response_model=ClaimSet)
async def profile(claims: ClaimSet = Depends(require_auth)):
    return claims


@router.post("/change-password", response_model=Dict[str, Any])
def change_password(
    payload: ChangePasswordRequest,
    claims: ClaimSet = Depends(require_auth),
    auth_service: AuthService = Depends(get_auth_service),
):
    auth_service.change_password(claims, payload.current_password, payload.new_password)
    return {"message": "Senha alterada com sucesso"}
