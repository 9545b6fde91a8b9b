from typing import Dict, Iterable, Tuple

import pytest
from fastapi.testclient import TestClient

from orderdesk.config import Settings
from orderdesk.db import Database
from orderdesk.main import create_app
from orderdesk.models import Permission, Role, RolePermission, User, UserRole
from orderdesk.schemas.auth import ClaimSet, PermissionClaim
from orderdesk.services import PasswordHasher

ROLE_ACTIONS = {
    "Admin": ["View", "Add", "Edit", "Delete"],
    "Manager": ["View", "Add", "Edit"],
    "Staff": ["View", "Add"],
    "Customer": ["View"],
}
MODULES = ["Order", "Customer"]
PASSWORDS = {
    "admin": "admin@ued",
    "staff": "staff@ued",
    "customer": "customer@ued",
    "multi": "multi@ued",
}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        database_url="sqlite://",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
    )


@pytest.fixture
def database(settings):
    database = Database(settings)
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def db_session(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def seeded(db_session, hasher) -> Dict[str, Dict]:
    """
    Papéis, permissões (4 ações x Order/Customer), matriz papel -> ações e
    usuários admin, staff, customer e multi (Staff + Customer).
    """
    roles = {name: Role(name_role=name) for name in ROLE_ACTIONS}
    db_session.add_all(roles.values())
    permissions = {
        (action, module): Permission(name_permission=action, module=module)
        for module in MODULES
        for action in ["View", "Add", "Edit", "Delete"]
    }
    db_session.add_all(permissions.values())
    db_session.flush()

    for role_name, actions in ROLE_ACTIONS.items():
        for module in MODULES:
            for action in actions:
                db_session.add(RolePermission(
                    id_role=roles[role_name].id,
                    id_permission=permissions[(action, module)].id,
                ))

    users = {}
    for username, password in PASSWORDS.items():
        users[username] = User(username=username, password_hash=hasher.hash(password))
    db_session.add_all(users.values())
    db_session.flush()

    assignments = {
        "admin": ["Admin"],
        "staff": ["Staff"],
        "customer": ["Customer"],
        "multi": ["Staff", "Customer"],
    }
    for username, role_names in assignments.items():
        for role_name in role_names:
            db_session.add(UserRole(id_user=users[username].id, id_role=roles[role_name].id))
    db_session.commit()

    return {
        "roles": {name: r.id for name, r in roles.items()},
        "permissions": {key: p.id for key, p in permissions.items()},
        "users": {name: u.id for name, u in users.items()},
    }


def make_claims(roles=(), perms=(), sub: int = 1, username: str = "test") -> ClaimSet:
    return ClaimSet(
        sub=sub,
        username=username,
        roles=list(roles),
        permissions=[PermissionClaim(name_permission=a, module=m) for a, m in perms],
    )


@pytest.fixture
def make_token(app):
    """Gera um token assinado pela aplicação de teste para as claims dadas."""
    def _make_token(roles: Iterable[str] = (), perms: Iterable[Tuple[str, str]] = (), **kwargs) -> str:
        return app.state.token_service.issue(make_claims(roles, perms, **kwargs))
    return _make_token


@pytest.fixture
def auth_headers(make_token):
    def _auth_headers(roles=(), perms=(), **kwargs) -> Dict[str, str]:
        return {"Authorization": f"Bearer {make_token(roles, perms, **kwargs)}"}
    return _auth_headers


@pytest.fixture
def login(client):
    """Faz login real e devolve o cabeçalho Authorization."""
    def _login(username: str) -> Dict[str, str]:
        response = client.post("/auth/login", json={"username": username, "password": PASSWORDS[username]})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _login
