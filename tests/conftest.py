"""
Fixtures pytest partagees pour les tests Movie Explorer.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test (secrets factices, bcrypt rapide, log temporaire)
- Mocks des ports externes (client TMDB, verification Google)
- Repository utilisateur en memoire
- Container DI surcharge et client HTTP de test FastAPI
"""

import asyncio
from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from src.config import Settings
from src.container import Container
from src.core.entities.user import User
from src.core.ports.api_clients import IMovieAPIClient
from src.core.ports.security import IGoogleTokenVerifier
from src.web.app import create_app
from tests.fakes import InMemoryUserRepository


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test.

    bcrypt_rounds=4 (minimum accepte par bcrypt) pour garder les tests rapides.
    """
    return Settings(
        mongo_uri="mongodb://localhost:27017",
        mongo_db_name="movie_explorer_test",
        tmdb_api_key="test_api_key",
        jwt_secret="test-secret",
        jwt_expires_minutes=60,
        bcrypt_rounds=4,
        min_password_length=6,
        google_client_id="test-client.apps.googleusercontent.com",
        cors_origins=["http://localhost:3000"],
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def mock_api_client() -> AsyncMock:
    """
    Mock de IMovieAPIClient.

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    return AsyncMock(spec=IMovieAPIClient)


@pytest.fixture
def mock_google_verifier() -> AsyncMock:
    return AsyncMock(spec=IGoogleTokenVerifier)


@pytest.fixture
def container(
    test_settings: Settings,
    user_repo: InMemoryUserRepository,
    mock_api_client: AsyncMock,
    mock_google_verifier: AsyncMock,
) -> Container:
    """Container DI dont les dependances externes sont remplacees."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.mongo_client.override(providers.Object(AsyncMock()))
    container.user_repository.override(providers.Object(user_repo))
    container.tmdb_client.override(providers.Object(mock_api_client))
    container.google_verifier.override(providers.Object(mock_google_verifier))
    return container


@pytest.fixture
def client(container: Container) -> Iterator[TestClient]:
    """Client HTTP de test (le lifespan de l'application est execute)."""
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def make_user(container: Container, user_repo: InMemoryUserRepository):
    """
    Fabrique synchrone d'utilisateurs pour les tests de routes.

    Ne pas utiliser depuis un test async (asyncio.run dans une boucle active).
    """

    def _make(username: str = "alice", password: str = "secret123", **kwargs) -> User:
        hasher = container.password_hasher()
        return asyncio.run(
            user_repo.create(
                User(username=username, password_hash=hasher.hash(password), **kwargs)
            )
        )

    return _make


@pytest.fixture
def auth_headers(container: Container):
    """Construit les headers Authorization pour un utilisateur."""

    def _headers(user: User) -> dict[str, str]:
        token = container.token_service().issue(user.id)
        return {"Authorization": f"Bearer {token}"}

    return _headers
