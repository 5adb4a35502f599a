"""
Service de catalogue : navigation dans les films TMDB.

CatalogService applique les regles de presentation du front-end au-dessus
du client TMDB :
- seuls les films avec poster ET image de fond sont affiches
- la recherche texte est completee par un filtrage et un tri locaux
  (l'endpoint /search/movie de TMDB ignore genres, annee et tri)
- la decouverte delegue filtres et tri a /discover/movie

Les erreurs HTTP et reseau de TMDB sont converties en UpstreamError.
"""

import asyncio
from datetime import date
from typing import Any, Iterable, Optional

import httpx
from loguru import logger

from src.adapters.api.retry import RateLimitError
from src.core.exceptions import MovieNotFoundError, UpstreamError
from src.core.ports.api_clients import IMovieAPIClient
from src.core.value_objects.movie_page import MoviePage
from src.core.value_objects.search import SearchCriteria, SortSpec
from src.utils.constants import DEFAULT_DISCOVER_SORT, DETAILS_APPEND

UPSTREAM_ERRORS = (httpx.HTTPError, RateLimitError)


def is_displayable(movie: dict[str, Any]) -> bool:
    """Vrai si le film a un poster et une image de fond."""
    return bool(movie.get("poster_path")) and bool(movie.get("backdrop_path"))


def matches_genres(movie: dict[str, Any], genre_ids: tuple[int, ...], match_any: bool) -> bool:
    """Filtre genres facon TMDB : "," = tous les genres, "|" = au moins un."""
    if not genre_ids:
        return True
    movie_genres = set(movie.get("genre_ids") or ())
    if match_any:
        return any(g in movie_genres for g in genre_ids)
    return all(g in movie_genres for g in genre_ids)


def matches_year(movie: dict[str, Any], year: Optional[str]) -> bool:
    if not year:
        return True
    return (movie.get("release_date") or "").startswith(year)


def _sort_value(movie: dict[str, Any], field_name: str) -> float:
    if field_name == "release_date":
        try:
            return float(date.fromisoformat(movie.get("release_date") or "").toordinal())
        except ValueError:
            return 0.0
    value = movie.get(field_name)
    return float(value) if isinstance(value, (int, float)) else 0.0


def sort_movies(movies: list[dict[str, Any]], sort: SortSpec) -> list[dict[str, Any]]:
    """
    Tri stable selon popularity, vote_average ou release_date.

    Une valeur absente compte pour 0. Un champ non supporte laisse l'ordre inchange.
    """
    if not sort.is_supported:
        return list(movies)
    return sorted(
        movies,
        key=lambda m: _sort_value(m, sort.field),
        reverse=sort.descending,
    )


class CatalogService:
    """
    Cas d'usage de navigation : tendances, recherche, details, genres.

    Example:
        catalog = CatalogService(api_client=tmdb_client)
        page = await catalog.search(SearchCriteria.build(query="alien", sort_by="vote_average.desc"))
    """

    def __init__(self, api_client: IMovieAPIClient) -> None:
        self._api = api_client

    async def trending(self) -> list[dict[str, Any]]:
        """Films tendance de la semaine, filtres pour l'affichage."""
        try:
            page = await self._api.trending("week")
        except UPSTREAM_ERRORS as e:
            logger.error(f"Erreur TMDB (tendances): {e}")
            raise UpstreamError("Failed to fetch trending movies") from e

        results = [m for m in page.results if is_displayable(m)]
        logger.debug(f"Films tendance: {len(results)}")
        return results

    async def search(self, criteria: SearchCriteria) -> MoviePage:
        """
        Recherche texte ou decouverte selon la presence de criteria.query.

        En recherche texte, total_results compte les films restants apres
        filtrage local de la page ; total_pages reste celui de TMDB pour
        que la pagination du front-end puisse avancer.
        """
        try:
            if criteria.is_text_search:
                page = await self._text_search(criteria)
            else:
                page = await self._discover(criteria)
        except UPSTREAM_ERRORS as e:
            logger.error(f"Erreur TMDB (recherche): {e}")
            raise UpstreamError("Failed to fetch movies from TMDb") from e
        return page

    async def _text_search(self, criteria: SearchCriteria) -> MoviePage:
        page = await self._api.search(criteria.query, page=criteria.page)

        genre_ids = criteria.genre_ids
        match_any = criteria.genres_match_any
        results = [
            m
            for m in page.results
            if matches_genres(m, genre_ids, match_any)
            and matches_year(m, criteria.primary_release_year)
        ]
        if criteria.sort_by is not None:
            results = sort_movies(results, criteria.sort_by)
        results = [m for m in results if is_displayable(m)]

        logger.debug(f"Recherche '{criteria.query}': {len(results)} resultats filtres")
        return MoviePage(
            results=results,
            page=page.page,
            total_pages=page.total_pages,
            total_results=len(results),
        )

    async def _discover(self, criteria: SearchCriteria) -> MoviePage:
        page = await self._api.discover(
            page=criteria.page,
            with_genres=criteria.with_genres,
            primary_release_year=criteria.primary_release_year,
            sort_by=str(criteria.sort_by) if criteria.sort_by else DEFAULT_DISCOVER_SORT,
        )
        filtered = page.filter(is_displayable)
        logger.debug(f"Decouverte: {len(filtered.results)} resultats filtres")
        return filtered

    async def details(self, movie_id: int) -> dict[str, Any]:
        """
        Fiche complete d'un film (credits et videos inclus).

        Raises:
            MovieNotFoundError: ID inconnu de TMDB
            UpstreamError: Echec d'appel TMDB
        """
        try:
            movie = await self._api.get_details(movie_id, append=DETAILS_APPEND)
        except UPSTREAM_ERRORS as e:
            logger.error(f"Erreur TMDB (details {movie_id}): {e}")
            raise UpstreamError("Failed to fetch movie details") from e
        if movie is None:
            raise MovieNotFoundError()
        return movie

    async def genres(self) -> list[dict[str, Any]]:
        try:
            return await self._api.genres()
        except UPSTREAM_ERRORS as e:
            logger.error(f"Erreur TMDB (genres): {e}")
            raise UpstreamError("Failed to fetch genres") from e

    async def hydrate(self, movie_ids: Iterable[int]) -> list[dict[str, Any]]:
        """
        Recupere les fiches d'une liste d'IDs en parallele.

        L'ordre d'entree est conserve. Les IDs inconnus de TMDB (404) sont
        ignores avec un avertissement. Le premier echec annule les appels
        encore en cours.

        Raises:
            UpstreamError: Si un appel TMDB echoue pour une autre raison
        """
        ids = list(movie_ids)
        if not ids:
            return []
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self._api.get_details(movie_id, append=()))
                    for movie_id in ids
                ]
        except ExceptionGroup as failures:
            error = failures.exceptions[0]
            if not isinstance(error, UPSTREAM_ERRORS):
                raise error
            logger.error(f"Erreur TMDB (hydratation de {len(ids)} films): {error}")
            raise UpstreamError("Failed to fetch favorite movies") from error

        hydrated = []
        for movie_id, movie in zip(ids, (task.result() for task in tasks)):
            if movie is None:
                logger.warning(f"Film {movie_id} introuvable sur TMDB, ignore")
                continue
            hydrated.append(movie)
        return hydrated
