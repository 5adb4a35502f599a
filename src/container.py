"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Les tests remplacent les providers avec override() (repository en memoire,
client TMDB simule).
"""

from dependency_injector import containers, providers

from .adapters.api.tmdb_client import TMDBClient
from .adapters.security.google_verifier import GoogleIdTokenVerifier
from .adapters.security.jwt_service import JWTTokenService
from .adapters.security.password_hasher import BcryptPasswordHasher
from .config import Settings
from .infrastructure.persistence.database import create_client, get_database
from .infrastructure.persistence.repositories import MongoUserRepository
from .services.auth import AuthService
from .services.catalog import CatalogService
from .services.favorites import FavoritesService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Tous les providers sont des Singletons : les services sont sans etat
    et partagent le pool MongoDB et le client HTTP TMDB.

    Utilisation :
        container = Container()
        auth = container.auth_service()
        await container.user_repository().ensure_indexes()

    Tests :
        container.user_repository.override(providers.Object(fake_repo))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # MongoDB - client partage (pool de connexions) et base applicative
    mongo_client = providers.Singleton(
        create_client,
        uri=config.provided.mongo_uri,
    )
    database = providers.Singleton(
        get_database,
        client=mongo_client,
        name=config.provided.mongo_db_name,
    )

    # Repositories
    user_repository = providers.Singleton(
        MongoUserRepository,
        database=database,
    )

    # Client API TMDB - cle optionnelle, verifiee au premier appel
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        language=config.provided.tmdb_language,
    )

    # Securite
    password_hasher = providers.Singleton(
        BcryptPasswordHasher,
        rounds=config.provided.bcrypt_rounds,
    )
    token_service = providers.Singleton(
        JWTTokenService,
        secret=config.provided.jwt_secret,
        algorithm=config.provided.jwt_algorithm,
        expires_minutes=config.provided.jwt_expires_minutes,
    )
    google_verifier = providers.Singleton(
        GoogleIdTokenVerifier,
        client_id=config.provided.google_client_id,
    )

    # Services
    catalog_service = providers.Singleton(
        CatalogService,
        api_client=tmdb_client,
    )
    auth_service = providers.Singleton(
        AuthService,
        users=user_repository,
        password_hasher=password_hasher,
        token_service=token_service,
        google_verifier=google_verifier,
        min_password_length=config.provided.min_password_length,
    )
    favorites_service = providers.Singleton(
        FavoritesService,
        users=user_repository,
        catalog=catalog_service,
    )
