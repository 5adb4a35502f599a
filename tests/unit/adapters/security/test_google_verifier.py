"""
Tests pour GoogleIdTokenVerifier.

La fonction de verification google-auth est remplacee par un MagicMock :
aucun appel reseau vers les certificats Google.
"""

from unittest.mock import MagicMock

import pytest
from google.auth import exceptions as google_exceptions

from src.adapters.security.google_verifier import GoogleIdTokenVerifier
from src.core.exceptions import ConfigurationError, GoogleAuthError

CLIENT_ID = "test-client.apps.googleusercontent.com"

CLAIMS = {
    "iss": "https://accounts.google.com",
    "aud": CLIENT_ID,
    "sub": "109876543210987654321",
    "email": "Jane.Doe@gmail.com",
    "email_verified": True,
    "name": "Jane Doe",
}


class TestGoogleIdTokenVerifier:
    @pytest.mark.asyncio
    async def test_verify_returns_identity(self) -> None:
        verify_fn = MagicMock(return_value=CLAIMS)
        verifier = GoogleIdTokenVerifier(CLIENT_ID, verify_fn=verify_fn)

        identity = await verifier.verify("id-token")

        assert identity.subject == "109876543210987654321"
        assert identity.email == "Jane.Doe@gmail.com"
        assert identity.email_verified is True
        assert identity.name == "Jane Doe"
        args = verify_fn.call_args[0]
        assert args[0] == "id-token"
        assert args[2] == CLIENT_ID

    @pytest.mark.asyncio
    async def test_verify_without_client_id(self) -> None:
        verify_fn = MagicMock()
        verifier = GoogleIdTokenVerifier(None, verify_fn=verify_fn)

        with pytest.raises(ConfigurationError):
            await verifier.verify("id-token")
        verify_fn.assert_not_called()

    @pytest.mark.asyncio
    async def test_verify_empty_credential(self) -> None:
        verifier = GoogleIdTokenVerifier(CLIENT_ID, verify_fn=MagicMock())

        with pytest.raises(GoogleAuthError):
            await verifier.verify("")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [ValueError("Token expired"), google_exceptions.TransportError("certs unreachable")],
    )
    async def test_verify_rejected_token(self, error: Exception) -> None:
        verifier = GoogleIdTokenVerifier(CLIENT_ID, verify_fn=MagicMock(side_effect=error))

        with pytest.raises(GoogleAuthError) as exc_info:
            await verifier.verify("id-token")
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_verify_claims_without_subject(self) -> None:
        claims = {k: v for k, v in CLAIMS.items() if k != "sub"}
        verifier = GoogleIdTokenVerifier(CLIENT_ID, verify_fn=MagicMock(return_value=claims))

        with pytest.raises(GoogleAuthError):
            await verifier.verify("id-token")

    @pytest.mark.asyncio
    async def test_unverified_email_flag(self) -> None:
        claims = {"sub": "42", "email": "x@example.com"}
        verifier = GoogleIdTokenVerifier(CLIENT_ID, verify_fn=MagicMock(return_value=claims))

        identity = await verifier.verify("id-token")

        assert identity.email_verified is False
        assert identity.name is None
