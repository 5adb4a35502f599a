"""
Vérification des ID tokens Google Sign-In via google-auth.

google-auth est synchrone (téléchargement des certificats Google avec
requests) : la vérification tourne dans l'executor par défaut pour ne pas
bloquer la boucle asyncio.
"""

import asyncio
from functools import partial
from typing import Any, Callable, Optional

from google.auth import exceptions as google_exceptions
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token
from loguru import logger

from src.core.exceptions import ConfigurationError, GoogleAuthError
from src.core.ports.security import IGoogleTokenVerifier
from src.core.value_objects.identity import GoogleIdentity

TokenVerifyFn = Callable[..., dict[str, Any]]


class GoogleIdTokenVerifier(IGoogleTokenVerifier):
    """
    Vérifie signature, audience et expiration d'un ID token Google.

    Args:
        client_id: Client ID OAuth attendu en audience (None = non configuré)
        verify_fn: Fonction de vérification (injectable pour les tests)
    """

    def __init__(
        self,
        client_id: Optional[str],
        verify_fn: TokenVerifyFn = id_token.verify_oauth2_token,
    ) -> None:
        self._client_id = client_id
        self._verify_fn = verify_fn
        self._request = google_requests.Request()

    async def verify(self, credential: str) -> GoogleIdentity:
        if not self._client_id:
            logger.error("Client ID Google non défini (MOVIEXPLORER_GOOGLE_CLIENT_ID)")
            raise ConfigurationError("Google client id is not configured")
        if not credential:
            raise GoogleAuthError()

        loop = asyncio.get_running_loop()
        try:
            claims = await loop.run_in_executor(
                None,
                partial(self._verify_fn, credential, self._request, self._client_id),
            )
        except (ValueError, google_exceptions.GoogleAuthError) as e:
            logger.warning(f"ID token Google refusé: {e}")
            raise GoogleAuthError() from None

        subject = claims.get("sub")
        if not subject:
            raise GoogleAuthError()

        return GoogleIdentity(
            subject=str(subject),
            email=claims.get("email"),
            email_verified=bool(claims.get("email_verified", False)),
            name=claims.get("name"),
        )
