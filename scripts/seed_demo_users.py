#!/usr/bin/env python3
"""
Cria (ou atualiza a senha de) os usuários de demonstração e atribui os papéis.

Requer o schema criado pelas migrações (alembic upgrade head), que também
semeia os papéis e a matriz de permissões.

Usage:
  python scripts/seed_demo_users.py
"""
from __future__ import annotations

import sys
from pathlib import Path

# Adiciona o diretório raiz ao sys.path para importar o pacote
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from orderdesk.config import get_settings
from orderdesk.db import Database, mask_database_url
from orderdesk.repositories import RbacRepository, UsersRepository
from orderdesk.services import PasswordHasher

DEMO_USERS = {
    # username: (senha, papel)
    "admin": ("admin@ued", "Admin"),
    "manager": ("manager@ued", "Manager"),
    "staff": ("staff@ued", "Staff"),
    "customer": ("customer@ued", "Customer"),
}


def seed() -> int:
    settings = get_settings()
    database = Database(settings)
    hasher = PasswordHasher(settings.bcrypt_rounds)
    print(f"🔧 Seeding demo users into {mask_database_url(settings.database_url)}")

    db = database.session()
    try:
        users = UsersRepository(db)
        rbac = RbacRepository(db)
        for username, (password, role_name) in DEMO_USERS.items():
            role = rbac.get_role_by_name(role_name)
            if role is None:
                print(f"❌ Papel '{role_name}' não encontrado; rode as migrações primeiro")
                return 1
            user = users.get_by_username(username)
            if user is None:
                user = users.create(username, hasher.hash(password))
            else:
                users.update_password(user, hasher.hash(password))
            rbac.add_role_to_user(user.id, role.id)
            print(f"  ✓ {username} ({role_name})")
    finally:
        db.close()
        database.dispose()

    print("✅ Demo users ready")
    return 0


if __name__ == "__main__":
    sys.exit(seed())
