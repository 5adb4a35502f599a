"""
Service de gestion des favoris.

Les favoris sont stockes comme une liste ordonnee d'IDs TMDB sur le
document utilisateur ; chaque reponse renvoie la liste hydratee avec
les fiches TMDB completes, dans l'ordre d'ajout.
"""

from typing import Any

from loguru import logger

from src.core.entities.user import User
from src.core.exceptions import UserNotFoundError, ValidationError
from src.core.ports.repositories import IUserRepository
from src.services.catalog import CatalogService


def _require_movie_id(movie_id: Any) -> int:
    """Valide un ID TMDB (entier strictement positif, bool exclu)."""
    if isinstance(movie_id, bool) or not isinstance(movie_id, int) or movie_id <= 0:
        raise ValidationError("Movie ID is required")
    return movie_id


class FavoritesService:
    """
    Cas d'usage des favoris d'un utilisateur authentifie.

    Toutes les operations levent UserNotFoundError si le compte a ete
    supprime depuis l'emission du jeton.
    """

    def __init__(self, users: IUserRepository, catalog: CatalogService) -> None:
        self._users = users
        self._catalog = catalog

    @staticmethod
    def _require_user(user: User | None) -> User:
        if user is None:
            raise UserNotFoundError()
        return user

    async def list_all(self, user_id: str) -> list[dict[str, Any]]:
        user = self._require_user(await self._users.get_by_id(user_id))
        return await self._catalog.hydrate(user.favorites)

    async def add(self, user_id: str, movie_id: Any) -> list[dict[str, Any]]:
        """Ajoute un film aux favoris (sans effet s'il y est deja)."""
        movie_id = _require_movie_id(movie_id)
        user = self._require_user(await self._users.add_favorite(user_id, movie_id))
        logger.info(f"Favori ajoute: film {movie_id} pour {user.username}")
        return await self._catalog.hydrate(user.favorites)

    async def remove(self, user_id: str, movie_id: Any) -> list[dict[str, Any]]:
        """Retire un film des favoris (sans erreur s'il n'y etait pas)."""
        movie_id = _require_movie_id(movie_id)
        user = self._require_user(await self._users.remove_favorite(user_id, movie_id))
        logger.info(f"Favori retire: film {movie_id} pour {user.username}")
        return await self._catalog.hydrate(user.favorites)

    async def clear(self, user_id: str) -> list[dict[str, Any]]:
        user = self._require_user(await self._users.clear_favorites(user_id))
        logger.info(f"Favoris vides pour {user.username}")
        return []
