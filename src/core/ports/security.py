"""
Interfaces ports pour l'authentification.

Le domaine ne connait ni bcrypt, ni PyJWT, ni google-auth : les services
dependent uniquement de ces contrats.
"""

from abc import ABC, abstractmethod

from src.core.value_objects.identity import GoogleIdentity


class IPasswordHasher(ABC):
    """Hachage de mots de passe avec sel."""

    @abstractmethod
    def hash(self, password: str) -> str:
        ...

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Vrai si password correspond au hash (faux si le hash est illisible)."""
        ...


class ITokenService(ABC):
    """Jetons d'accès signés portant l'ID utilisateur."""

    @abstractmethod
    def issue(self, user_id: str) -> str:
        ...

    @abstractmethod
    def decode(self, token: str) -> str:
        """
        Vérifie le jeton et retourne l'ID utilisateur.

        Raises:
            TokenExpiredError: Jeton expiré
            InvalidTokenError: Jeton illisible ou mal signé
            ConfigurationError: Secret de signature absent
        """
        ...

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Vrai si le service dispose d'un secret de signature."""
        ...


class IGoogleTokenVerifier(ABC):
    """Vérification des ID tokens émis par Google Sign-In."""

    @abstractmethod
    async def verify(self, credential: str) -> GoogleIdentity:
        """
        Raises:
            GoogleAuthError: Jeton refusé (signature, audience, expiration)
            ConfigurationError: Client ID Google non configuré
        """
        ...
