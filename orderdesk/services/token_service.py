import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError, ExpiredSignatureError
from pydantic import ValidationError

from orderdesk.schemas.auth import ClaimSet

logger = logging.getLogger("uvicorn")

ALGORITHM = "HS256"
TOKEN_TTL = timedelta(hours=1)


class TokenService:
    """
    Emissão e verificação dos tokens JWT.

    A verificação é stateless: não há lista de revogação, então um token
    continua válido até expirar mesmo que os papéis do usuário mudem.
    """

    def __init__(self, secret_key: str):
        self.secret_key = secret_key

    def issue(self, claims: ClaimSet, now: Optional[datetime] = None) -> str:
        """
        Gera um token assinado com as claims e validade de 1 hora.

        Args:
            claims: Snapshot de identidade, papéis e permissões
            now: Instante de emissão (padrão: agora, UTC)
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = claims.to_payload()
        payload["iat"] = int(issued_at.timestamp())
        payload["exp"] = int((issued_at + TOKEN_TTL).timestamp())
        return jwt.encode(payload, self.secret_key, algorithm=ALGORITHM)

    def verify(self, token: str) -> Optional[ClaimSet]:
        """
        Decodifica e valida um token.

        Returns:
            ClaimSet ou None se o token estiver expirado, malformado, com
            assinatura inválida ou assinado com outro algoritmo
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[ALGORITHM])
            return ClaimSet.from_payload(payload)
        except ExpiredSignatureError:
            logger.warning("Token expirado")
        except JWTError as e:
            logger.warning("Token inválido: %s", str(e))
        except (KeyError, TypeError, ValueError, ValidationError):
            logger.warning("Token com claims inválidas")
        return None
