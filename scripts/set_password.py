#!/usr/bin/env python3
"""
Redefine a senha de um usuário.

Usage:
  python scripts/set_password.py <username> <nova_senha>
"""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from orderdesk.config import get_settings
from orderdesk.db import Database
from orderdesk.repositories import UsersRepository
from orderdesk.services import PasswordHasher


def set_password(username: str, password: str) -> int:
    settings = get_settings()
    database = Database(settings)
    db = database.session()
    try:
        users = UsersRepository(db)
        user = users.get_by_username(username)
        if user is None:
            print(f"❌ Usuário '{username}' não encontrado")
            return 1
        users.update_password(user, PasswordHasher(settings.bcrypt_rounds).hash(password))
        print(f"✅ Senha atualizada para {username}")
        return 0
    finally:
        db.close()
        database.dispose()


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(2)
    sys.exit(set_password(sys.argv[1], sys.argv[2]))
