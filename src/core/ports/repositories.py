"""
Interface port pour le repository des utilisateurs.

Les implémentations fournissent le stockage concret (MongoDB via l'API asynchrone
de pymongo, en mémoire pour les tests). Toutes les opérations sont asynchrones.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.user import User


class IUserRepository(ABC):
    """
    Interface de stockage des utilisateurs.

    Les opérations sur les favoris sont atomiques côté stockage : deux requêtes
    concurrentes sur le même utilisateur ne doivent jamais perdre une mise à jour.
    """

    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Crée les index d'unicité (username, email, google_id)."""
        ...

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Récupère un utilisateur par son ID (None si ID invalide ou inconnu)."""
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        ...

    @abstractmethod
    async def get_by_google_id(self, google_id: str) -> Optional[User]:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insère un nouvel utilisateur et retourne l'entité avec son ID.

        Raises:
            UserAlreadyExistsError: Si une contrainte d'unicité est violée
        """
        ...

    @abstractmethod
    async def link_google_account(self, user_id: str, google_id: str) -> Optional[User]:
        """Associe un identifiant Google à un compte existant."""
        ...

    @abstractmethod
    async def add_favorite(self, user_id: str, movie_id: int) -> Optional[User]:
        """Ajoute un favori s'il est absent. Retourne None si l'utilisateur n'existe pas."""
        ...

    @abstractmethod
    async def remove_favorite(self, user_id: str, movie_id: int) -> Optional[User]:
        """Retire un favori. Retourne None si l'utilisateur n'existe pas."""
        ...

    @abstractmethod
    async def clear_favorites(self, user_id: str) -> Optional[User]:
        """Vide la liste des favoris. Retourne None si l'utilisateur n'existe pas."""
        ...
