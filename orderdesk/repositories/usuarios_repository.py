from typing import List, Optional, Dict, Any
from sqlalchemy.orm import Session, selectinload

from orderdesk.models import User, UserRole
from orderdesk.schemas.admin import UserWithRoles


class UsersRepository:
    """
    Repositório para operações com usuários.
    """

    def __init__(self, db: Session):
        self.db = db
        self.model = User

    def get_by_username(self, username: str) -> Optional[User]:
        """
        Obtém um usuário pelo username.

        Args:
            username: Nome de usuário

        Returns:
            Instância do usuário ou None se não encontrado
        """
        return self.db.query(self.model).filter(self.model.username == username).first()

    def create(self, username: str, password_hash: str) -> User:
        user = self.model(username=username, password_hash=password_hash)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_password(self, user: User, password_hash: str) -> User:
        user.password_hash = password_hash
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def list_with_roles(self) -> List[Dict[str, Any]]:
        """Lista usuários com os nomes dos seus papéis, ordenados por id."""
        users = (
            self.db.query(self.model)
            .options(selectinload(self.model.roles).selectinload(UserRole.role))
            .order_by(self.model.id)
            .all()
        )
        return [
            UserWithRoles(id=u.id, username=u.username, roles=u.role_names).model_dump()
            for u in users
        ]
