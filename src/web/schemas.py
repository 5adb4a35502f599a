"""
Schémas pydantic des requêtes et réponses JSON.

Les champs des requêtes sont optionnels : l'absence d'un champ est
signalée par AuthService / FavoritesService avec le message attendu
par le front-end plutôt que par une erreur de validation générique.
"""

from typing import Any, Optional

from pydantic import BaseModel


class UserOut(BaseModel):
    username: str
    id: str


class AuthResponse(BaseModel):
    token: str
    user: UserOut


class ValidateResponse(BaseModel):
    user: UserOut


class RegisterRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    email: Optional[str] = None


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class GoogleLoginRequest(BaseModel):
    """ID token renvoyé par Google Sign-In (champ "credential" du bouton Google)."""

    credential: Optional[str] = None


class FavoriteRequest(BaseModel):
    """Le front-end envoie l'objet film complet ; seul movie.id est utilisé."""

    movie: Optional[dict[str, Any]] = None

    @property
    def movie_id(self) -> Any:
        return self.movie.get("id") if self.movie else None


class FavoritesResponse(BaseModel):
    favorites: list[dict[str, Any]]


class SearchResponse(BaseModel):
    results: list[dict[str, Any]]
    page: int
    total_pages: int
    total_results: int


class GenresResponse(BaseModel):
    genres: list[dict[str, Any]]
