"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IUserRepository : Stockage des utilisateurs et de leurs favoris

Ports client API : Contrats pour les services externes
- IMovieAPIClient : API de métadonnées de films (TMDB)

Ports sécurité : Contrats pour l'authentification
- IPasswordHasher : Hachage et vérification des mots de passe
- ITokenService : Émission et vérification des jetons d'accès
- IGoogleTokenVerifier : Vérification des ID tokens Google
"""

from src.core.ports.api_clients import IMovieAPIClient
from src.core.ports.repositories import IUserRepository
from src.core.ports.security import (
    IGoogleTokenVerifier,
    IPasswordHasher,
    ITokenService,
)

__all__ = [
    # Repositories
    "IUserRepository",
    # Clients API
    "IMovieAPIClient",
    # Sécurité
    "IPasswordHasher",
    "ITokenService",
    "IGoogleTokenVerifier",
]
