"""
Jetons d'accès JWT signés (PyJWT).

Le payload reprend le format consommé par le front-end :
{"userId": "<id>", "iat": ..., "exp": ...}
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from loguru import logger

from src.core.exceptions import ConfigurationError, InvalidTokenError, TokenExpiredError
from src.core.ports.security import ITokenService
from src.logging_config import token_preview

USER_ID_CLAIM = "userId"


class JWTTokenService(ITokenService):
    """
    Émission et vérification de jetons HS256.

    Le secret est optionnel à la construction pour que l'application démarre
    sans configuration complète : chaque appel vérifie alors sa présence.
    """

    def __init__(
        self,
        secret: Optional[str],
        algorithm: str = "HS256",
        expires_minutes: int = 60,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(minutes=expires_minutes)

    @property
    def enabled(self) -> bool:
        return bool(self._secret and self._secret.strip())

    def _require_secret(self) -> str:
        if not self.enabled:
            logger.error("Secret JWT non défini (MOVIEXPLORER_JWT_SECRET)")
            raise ConfigurationError("JWT secret is not configured")
        return self._secret

    def issue(self, user_id: str) -> str:
        secret = self._require_secret()
        now = datetime.now(timezone.utc)
        payload = {
            USER_ID_CLAIM: user_id,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, secret, algorithm=self._algorithm)

    def decode(self, token: str) -> str:
        secret = self._require_secret()
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info(f"Jeton expiré: {token_preview(token)}")
            raise TokenExpiredError() from None
        except jwt.InvalidTokenError as e:
            logger.warning(f"Jeton refusé ({type(e).__name__}): {token_preview(token)}")
            raise InvalidTokenError() from None

        user_id = payload.get(USER_ID_CLAIM)
        if not isinstance(user_id, str) or not user_id:
            logger.warning(f"Jeton sans {USER_ID_CLAIM}: {token_preview(token)}")
            raise InvalidTokenError()
        return user_id
