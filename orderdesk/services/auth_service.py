import logging
from typing import Optional

from sqlalchemy.orm import Session

from orderdesk.exceptions import AuthenticationFailure, NotFound, ValidationFailure
from orderdesk.repositories import RbacRepository, UsersRepository
from orderdesk.schemas.auth import ClaimSet, LoginResult, PermissionClaim
from orderdesk.services.passwords import PasswordHasher
from orderdesk.services.token_service import TokenService

logger = logging.getLogger("uvicorn")


class AuthService:
    """
    Serviço para autenticação de usuários.

    Verifica credenciais contra o hash bcrypt armazenado e monta o
    snapshot de papéis e permissões embutido no token.
    """

    def __init__(self, db: Session, tokens: TokenService, hasher: PasswordHasher):
        self.db = db
        self.tokens = tokens
        self.hasher = hasher
        self.users = UsersRepository(db)
        self.rbac = RbacRepository(db)

    def authenticate(self, username: str, password: str) -> Optional[LoginResult]:
        """
        Autentica um usuário.

        Args:
            username: Nome de usuário
            password: Senha do usuário

        Returns:
            LoginResult com token e claims, ou None se as credenciais forem
            inválidas (usuário inexistente ou senha errada, sem distinção)
        """
        user = self.users.get_by_username(username)
        if user is None:
            self.hasher.dummy_verify()
            logger.warning("Falha na autenticação para %s", username)
            return None
        if not self.hasher.verify(password, user.password_hash):
            logger.warning("Falha na autenticação para %s", username)
            return None

        claims = self.build_claims(user.id, user.username)
        return LoginResult(token=self.tokens.issue(claims), user=claims)

    def build_claims(self, user_id: int, username: str) -> ClaimSet:
        """Monta as claims a partir dos papéis do usuário e da união das suas permissões."""
        roles = self.rbac.get_user_roles(user_id)
        permissions = self.rbac.get_permissions_for_roles([r.id for r in roles])
        return ClaimSet(
            sub=user_id,
            username=username,
            roles=[r.name_role for r in roles],
            permissions=[
                PermissionClaim(name_permission=p.name_permission, module=p.module)
                for p in permissions
            ],
        )

    def change_password(self, claims: ClaimSet, current_password: str, new_password: str) -> None:
        """
        Troca a senha do usuário autenticado.

        A senha nova igual à atual é rejeitada antes de qualquer acesso ao banco.
        """
        if current_password == new_password:
            raise ValidationFailure("A nova senha deve ser diferente da senha atual")

        user = self.users.get_by_username(claims.username)
        if user is None:
            raise NotFound("Usuário não encontrado")
        if not self.hasher.verify(current_password, user.password_hash):
            raise AuthenticationFailure("Senha atual incorreta")

        self.users.update_password(user, self.hasher.hash(new_password))
        logger.info("Senha alterada para o usuário %s", user.username)
