"""
Service d'authentification.

AuthService orchestre les comptes utilisateurs :
- inscription et connexion par mot de passe (bcrypt)
- emission et verification des jetons d'acces (JWT)
- connexion Google (ID token Google Sign-In), avec liaison par email
  vers un compte existant

Les erreurs sont des exceptions du domaine (src/core/exceptions.py),
converties en reponses JSON par la couche web.
"""

import re
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from src.adapters.security.password_hasher import BCRYPT_MAX_PASSWORD_BYTES
from src.core.entities.user import User
from src.core.exceptions import (
    AuthenticationRequiredError,
    ConfigurationError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserAlreadyExistsError,
    ValidationError,
)
from src.core.ports.repositories import IUserRepository
from src.core.ports.security import IGoogleTokenVerifier, IPasswordHasher, ITokenService
from src.core.value_objects.identity import GoogleIdentity

BEARER_PREFIX = "Bearer "

# Nombre maximum de suffixes testes pour un username derive d'un compte Google
MAX_USERNAME_ATTEMPTS = 100

_USERNAME_CLEANUP = re.compile(r"[^A-Za-z0-9_.-]+")


@dataclass
class AuthResult:
    """
    Resultat d'une authentification reussie.

    Attributes:
        token: Jeton d'acces signe
        user: Utilisateur authentifie
    """

    token: str
    user: User

    def to_dict(self) -> dict:
        return {"token": self.token, "user": self.user.to_public()}


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extrait le jeton d'un header "Authorization: Bearer <token>"."""
    if not authorization:
        return None
    value = authorization.strip()
    if value[: len(BEARER_PREFIX)].lower() == BEARER_PREFIX.lower():
        value = value[len(BEARER_PREFIX):].strip()
    return value or None


class AuthService:
    """
    Cas d'usage d'authentification.

    Attributes:
        min_password_length: Longueur minimale d'un mot de passe a l'inscription
    """

    def __init__(
        self,
        users: IUserRepository,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
        google_verifier: IGoogleTokenVerifier,
        min_password_length: int = 6,
    ) -> None:
        self._users = users
        self._hasher = password_hasher
        self._tokens = token_service
        self._google = google_verifier
        self.min_password_length = min_password_length

    def _issue(self, user: User) -> AuthResult:
        return AuthResult(token=self._tokens.issue(user.id), user=user)

    async def register(
        self,
        username: Optional[str],
        password: Optional[str],
        email: Optional[str] = None,
    ) -> AuthResult:
        """
        Cree un compte local et retourne un jeton.

        Raises:
            ValidationError: Champ manquant ou mot de passe hors limites
            UserAlreadyExistsError: Nom d'utilisateur deja pris
            EmailAlreadyExistsError: Email deja rattache a un autre compte
        """
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError("Username and password are required")
        if len(password) < self.min_password_length:
            raise ValidationError(
                f"Password must be at least {self.min_password_length} characters"
            )
        if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            )

        if await self._users.get_by_username(username) is not None:
            raise UserAlreadyExistsError()

        email = email.strip().lower() if email and email.strip() else None
        if email and await self._users.get_by_email(email) is not None:
            raise EmailAlreadyExistsError()
        user = await self._users.create(
            User(
                username=username,
                email=email,
                password_hash=self._hasher.hash(password),
            )
        )
        logger.info(f"Nouvel utilisateur inscrit: {user.username} ({user.id})")
        return self._issue(user)

    async def login(self, username: Optional[str], password: Optional[str]) -> AuthResult:
        """
        Connexion par mot de passe.

        Un compte Google sans mot de passe est refuse comme un mot de passe faux.

        Raises:
            ValidationError: Champ manquant
            InvalidCredentialsError: Identifiants incorrects
        """
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError("Username and password are required")

        user = await self._users.get_by_username(username)
        if user is None or not user.has_password:
            logger.info(f"Connexion refusee: utilisateur inconnu ou sans mot de passe ({username})")
            raise InvalidCredentialsError()
        if not self._hasher.verify(password, user.password_hash):
            logger.info(f"Connexion refusee: mot de passe incorrect ({username})")
            raise InvalidCredentialsError()

        logger.info(f"Connexion: {user.username} ({user.id})")
        return self._issue(user)

    def authenticate(self, authorization: Optional[str]) -> str:
        """
        Verifie le header Authorization d'une requete protegee.

        Returns:
            ID de l'utilisateur porte par le jeton

        Raises:
            ConfigurationError: Secret JWT non configure
            AuthenticationRequiredError: Aucun jeton fourni
            InvalidTokenError / TokenExpiredError: Jeton refuse
        """
        if not self._tokens.enabled:
            logger.error("Route protegee appelee sans secret JWT configure")
            raise ConfigurationError("JWT secret is not configured")
        token = extract_bearer_token(authorization)
        if token is None:
            raise AuthenticationRequiredError()
        return self._tokens.decode(token)

    async def validate(self, token: Optional[str]) -> User:
        """
        Retourne l'utilisateur d'un jeton encore valide.

        Raises:
            AuthenticationRequiredError: Aucun jeton fourni
            InvalidTokenError: Jeton refuse ou utilisateur supprime
            TokenExpiredError: Jeton expire
        """
        if not token:
            raise AuthenticationRequiredError("No token provided")
        user_id = self._tokens.decode(token)
        user = await self._users.get_by_id(user_id)
        if user is None:
            logger.warning(f"Jeton valide pour un utilisateur inexistant: {user_id}")
            raise InvalidTokenError()
        return user

    async def google_login(self, credential: Optional[str]) -> AuthResult:
        """
        Connexion via un ID token Google Sign-In.

        Resolution du compte, dans l'ordre :
        1. compte deja lie a cet identifiant Google
        2. compte existant avec le meme email (verifie par Google) et sans
           identifiant Google : liaison
        3. creation d'un compte sans mot de passe

        Raises:
            GoogleAuthError: ID token refuse
            ConfigurationError: Client ID Google non configure
        """
        identity = await self._google.verify(credential or "")

        user = await self._users.get_by_google_id(identity.subject)
        if user is None and identity.email and identity.email_verified:
            existing = await self._users.get_by_email(identity.email.lower())
            if existing is not None and existing.google_id is None:
                user = await self._users.link_google_account(existing.id, identity.subject)
                logger.info(f"Compte Google lie a l'utilisateur existant {existing.username}")
        if user is None:
            user = await self._create_google_user(identity)

        return self._issue(user)

    async def _create_google_user(self, identity: GoogleIdentity) -> User:
        base = _username_base(identity)
        email = identity.email.lower() if identity.email else None
        if email and await self._users.get_by_email(email) is not None:
            # Email non verifie deja utilise par un autre compte : pas de liaison
            email = None

        for attempt in range(MAX_USERNAME_ATTEMPTS):
            candidate = base if attempt == 0 else f"{base}{attempt}"
            if await self._users.get_by_username(candidate) is not None:
                continue
            try:
                user = await self._users.create(
                    User(username=candidate, email=email, google_id=identity.subject)
                )
            except UserAlreadyExistsError:
                # Connexion concurrente avec le meme compte Google
                winner = await self._users.get_by_google_id(identity.subject)
                if winner is not None:
                    return winner
                # Sinon course sur le username : suffixe suivant
                continue
            logger.info(f"Nouvel utilisateur Google: {user.username} ({user.id})")
            return user

        raise UserAlreadyExistsError("Could not allocate a username for this Google account")


def _username_base(identity: GoogleIdentity) -> str:
    """Nom d'utilisateur derive de l'email (partie locale) ou du nom Google."""
    if identity.email and "@" in identity.email:
        raw = identity.email.split("@", 1)[0]
    else:
        raw = identity.name or ""
    cleaned = _USERNAME_CLEANUP.sub("", raw.replace(" ", "."))
    return cleaned or "user"
