"""
Exceções da aplicação.

Cada classe estende HTTPException do FastAPI e carrega o código HTTP
correspondente, de forma que rotas e dependências apenas as levantam.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class AppException(HTTPException):
    """Exceção base para todas as exceções da aplicação."""

    default_status = status.HTTP_400_BAD_REQUEST
    default_detail = "Erro"

    def __init__(self, detail: Any = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(
            status_code=self.default_status,
            detail=detail if detail is not None else self.default_detail,
            headers=headers,
        )


class AuthenticationFailure(AppException):
    """Credenciais inválidas; não distingue usuário inexistente de senha errada."""
    default_status = status.HTTP_401_UNAUTHORIZED
    default_detail = "Credenciais inválidas"

    def __init__(self, detail: Any = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class TokenInvalid(AppException):
    default_status = status.HTTP_401_UNAUTHORIZED
    default_detail = "Não autenticado"

    def __init__(self, detail: Any = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class PermissionDenied(AppException):
    default_status = status.HTTP_403_FORBIDDEN
    default_detail = "Permissão insuficiente"


class RoleDenied(AppException):
    default_status = status.HTTP_403_FORBIDDEN
    default_detail = "Papel necessário"


class ValidationFailure(AppException):
    default_status = status.HTTP_400_BAD_REQUEST
    default_detail = "Dados inválidos"


class NotFound(AppException):
    default_status = status.HTTP_404_NOT_FOUND
    default_detail = "Recurso não encontrado"


class Conflict(AppException):
    default_status = status.HTTP_409_CONFLICT
    default_detail = "Recurso já existe"


class Internal(AppException):
    default_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
