"""
Interface port pour le client de l'API de films.

Le backend relaie TMDB : les films circulent sous forme de dictionnaires
au format TMDB, seule la pagination est typee (MoviePage).
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from src.core.value_objects.movie_page import MoviePage


class IMovieAPIClient(ABC):
    """
    Interface des APIs de métadonnées de films.

    Les erreurs HTTP et réseau de l'implémentation remontent telles quelles :
    la traduction en erreurs du domaine est faite par les services.
    """

    @abstractmethod
    async def trending(self, time_window: str = "week") -> MoviePage:
        """Films tendance sur la fenêtre donnée ("day" ou "week")."""
        ...

    @abstractmethod
    async def search(self, query: str, page: int = 1) -> MoviePage:
        """Recherche plein texte par titre."""
        ...

    @abstractmethod
    async def discover(
        self,
        page: int = 1,
        with_genres: Optional[str] = None,
        primary_release_year: Optional[str] = None,
        sort_by: Optional[str] = None,
    ) -> MoviePage:
        """Découverte par filtres (genres, année, tri)."""
        ...

    @abstractmethod
    async def get_details(
        self,
        movie_id: int,
        append: Sequence[str] = ("credits", "videos"),
    ) -> Optional[dict[str, Any]]:
        """
        Détails complets d'un film.

        Retourne :
            Le film au format TMDB, ou None si l'ID est inconnu
        """
        ...

    @abstractmethod
    async def genres(self) -> list[dict[str, Any]]:
        """Liste des genres de films ({"id", "name"})."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libère les ressources réseau."""
        ...
