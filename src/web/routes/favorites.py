"""
Routes des favoris de l'utilisateur authentifié.

Chaque réponse renvoie la liste complète des favoris, hydratée avec
les fiches TMDB, pour que le front-end remplace son état local.
"""

from fastapi import APIRouter

from ..deps import CurrentUserId, FavoritesServiceDep
from ..schemas import FavoriteRequest, FavoritesResponse

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=FavoritesResponse)
async def list_favorites(user_id: CurrentUserId, favorites: FavoritesServiceDep):
    return {"favorites": await favorites.list_all(user_id)}


@router.post("", response_model=FavoritesResponse)
async def add_favorite(
    body: FavoriteRequest,
    user_id: CurrentUserId,
    favorites: FavoritesServiceDep,
):
    return {"favorites": await favorites.add(user_id, body.movie_id)}


@router.delete("/{movie_id}", response_model=FavoritesResponse)
async def remove_favorite(
    movie_id: int,
    user_id: CurrentUserId,
    favorites: FavoritesServiceDep,
):
    return {"favorites": await favorites.remove(user_id, movie_id)}


@router.delete("", response_model=FavoritesResponse)
async def clear_favorites(user_id: CurrentUserId, favorites: FavoritesServiceDep):
    return {"favorites": await favorites.clear(user_id)}
