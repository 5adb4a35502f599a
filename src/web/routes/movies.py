"""
Routes de navigation des films (relais TMDB).

Routes publiques : tendances, genres, recherche / découverte, fiche détail.
"""

from typing import Any, Optional

from fastapi import APIRouter

from ...core.value_objects.search import SearchCriteria
from ..deps import CatalogServiceDep
from ..schemas import GenresResponse, SearchResponse

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("/trending")
async def trending(catalog: CatalogServiceDep) -> list[dict[str, Any]]:
    """Films tendance de la semaine (avec poster et image de fond)."""
    return await catalog.trending()


@router.get("/genres", response_model=GenresResponse)
async def genres(catalog: CatalogServiceDep):
    return {"genres": await catalog.genres()}


@router.get("/search", response_model=SearchResponse)
async def search(
    catalog: CatalogServiceDep,
    query: Optional[str] = None,
    page: int = 1,
    with_genres: Optional[str] = None,
    primary_release_year: Optional[str] = None,
    sort_by: Optional[str] = None,
):
    """
    Recherche texte si query est renseigné, sinon découverte par filtres.

    Paramètres :
        query : Texte recherché
        page : Page (1 à 500)
        with_genres : IDs de genres ("28,12" = tous, "28|12" = au moins un)
        primary_release_year : Année de sortie (4 chiffres)
        sort_by : Tri "champ.asc|desc" (popularity, vote_average, release_date)
    """
    criteria = SearchCriteria.build(
        query=query,
        page=page,
        with_genres=with_genres,
        primary_release_year=primary_release_year,
        sort_by=sort_by,
    )
    result = await catalog.search(criteria)
    return result.to_dict()


@router.get("/{movie_id}")
async def movie_detail(movie_id: int, catalog: CatalogServiceDep) -> dict[str, Any]:
    """Fiche complète d'un film, crédits et vidéos inclus."""
    return await catalog.details(movie_id)
