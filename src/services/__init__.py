"""
Couche services (cas d'usage).

Les services orchestrent la logique du domaine pour les cas d'usage
de l'application :
- AuthService : inscription, connexion, jetons, connexion Google
- CatalogService : tendances, recherche, details, genres (via TMDB)
- FavoritesService : favoris de l'utilisateur authentifie

Les services dependent des ports (interfaces) de core/ ; ils ne
connaissent de adapters/ que les exceptions et limites techniques
(RateLimitError, taille maximale bcrypt).
"""

from src.services.auth import AuthResult, AuthService
from src.services.catalog import CatalogService
from src.services.favorites import FavoritesService

__all__ = [
    "AuthResult",
    "AuthService",
    "CatalogService",
    "FavoritesService",
]
