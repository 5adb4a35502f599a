"""
Client TMDB pour la navigation de films.

Implemente l'interface IMovieAPIClient pour TMDB (The Movie Database).
Les reponses sont relayees au front-end sans transformation : seul le
format de pagination est type (MoviePage). Aucune reponse n'est mise en cache.

Usage:
    client = TMDBClient(api_key="your_key")
    page = await client.search("Inception")
    details = await client.get_details(27205)
    await client.close()
"""

from typing import Any, Optional, Sequence

import httpx
from loguru import logger

from src.adapters.api.retry import request_with_retry
from src.core.exceptions import ConfigurationError
from src.core.ports.api_clients import IMovieAPIClient
from src.core.value_objects.movie_page import MoviePage
from src.utils.constants import TMDB_BASE_URL, TMDB_TIME_WINDOWS


class TMDBClient(IMovieAPIClient):
    """
    Client API TMDB.

    Implemente IMovieAPIClient avec:
    - Films tendance (jour / semaine)
    - Recherche plein texte et decouverte par filtres
    - Details complets avec credits et videos
    - Liste des genres
    - Retry automatique sur rate limiting (429) et erreurs reseau

    Example:
        client = TMDBClient(api_key="xxx", language="fr-FR")
        page = await client.discover(with_genres="28", sort_by="vote_average.desc")
        await client.close()
    """

    def __init__(
        self,
        api_key: Optional[str],
        language: str = "en-US",
        timeout: float = 30.0,
        max_attempts: int = 5,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB v3 ou Read Access Token v4 (None = non configure)
            language: Langue des titres et resumes (parametre TMDB "language")
            timeout: Timeout HTTP en secondes
            max_attempts: Nombre de tentatives sur 429 / erreur reseau
        """
        self._api_key = api_key
        self._language = language
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer

        Raises:
            ConfigurationError: Si aucune cle TMDB n'est configuree
        """
        if not self._api_key:
            raise ConfigurationError("TMDB API key is not configured")

        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._api_key) > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    async def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        query = {"language": self._language}
        if params:
            query.update({k: v for k, v in params.items() if v is not None})

        logger.debug(f"TMDB GET {path}", params=query)
        response = await request_with_retry(
            self._get_client(),
            "GET",
            path,
            max_attempts=self._max_attempts,
            params=query,
        )
        return response.json()

    async def trending(self, time_window: str = "week") -> MoviePage:
        """
        Films tendance.

        Args:
            time_window: "day" ou "week"
        """
        if time_window not in TMDB_TIME_WINDOWS:
            raise ValueError(f"time_window must be one of {sorted(TMDB_TIME_WINDOWS)}")
        data = await self._get(f"/trending/movie/{time_window}")
        return MoviePage.from_tmdb(data)

    async def search(self, query: str, page: int = 1) -> MoviePage:
        """
        Recherche des films par titre.

        TMDB ne filtre pas par genre sur cet endpoint : le filtrage
        complementaire est fait par CatalogService.
        """
        data = await self._get(
            "/search/movie",
            {"query": query, "page": page, "include_adult": "false"},
        )
        return MoviePage.from_tmdb(data)

    async def discover(
        self,
        page: int = 1,
        with_genres: Optional[str] = None,
        primary_release_year: Optional[str] = None,
        sort_by: Optional[str] = None,
    ) -> MoviePage:
        """Decouverte par filtres. Seuls les filtres fournis sont transmis."""
        data = await self._get(
            "/discover/movie",
            {
                "page": page,
                "include_adult": "false",
                "with_genres": with_genres,
                "primary_release_year": primary_release_year,
                "sort_by": sort_by,
            },
        )
        return MoviePage.from_tmdb(data)

    async def get_details(
        self,
        movie_id: int,
        append: Sequence[str] = ("credits", "videos"),
    ) -> Optional[dict[str, Any]]:
        """
        Recupere les details complets d'un film.

        Args:
            movie_id: ID TMDB du film
            append: Sous-ressources ajoutees via append_to_response

        Returns:
            Le film au format TMDB, ou None si non trouve
        """
        params = {"append_to_response": ",".join(append)} if append else None
        try:
            return await self._get(f"/movie/{movie_id}", params)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise

    async def genres(self) -> list[dict[str, Any]]:
        data = await self._get("/genre/movie/list")
        return list(data.get("genres", []))

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a l'arret de l'application pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
