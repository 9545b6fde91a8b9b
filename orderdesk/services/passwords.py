import logging

from passlib.context import CryptContext

logger = logging.getLogger("uvicorn")


class PasswordHasher:
    """
    Hash e verificação de senhas com bcrypt.

    O custo (rounds) vem da configuração; testes usam o mínimo (4).
    """

    def __init__(self, rounds: int = 10):
        self.crypt_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plain_password: str) -> str:
        return self.crypt_context.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verifica se a senha em texto puro corresponde ao hash armazenado."""
        try:
            return self.crypt_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            logger.warning("Hash de senha armazenado em formato inválido")
            return False

    def dummy_verify(self) -> None:
        """Consome o mesmo tempo de uma verificação real (usuário inexistente)."""
        self.crypt_context.dummy_verify()
