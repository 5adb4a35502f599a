"""
Dépendances partagées de l'application web.

Fournit l'accès au Container DI et l'authentification des routes protégées.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header, Request
from loguru import logger

from ..container import Container
from ..logging_config import token_preview
from ..services.auth import AuthService, extract_bearer_token
from ..services.catalog import CatalogService
from ..services.favorites import FavoritesService


def get_container(request: Request) -> Container:
    """Container DI attaché à l'application par create_app()."""
    return request.app.state.container


def get_auth_service(container: Annotated[Container, Depends(get_container)]) -> AuthService:
    return container.auth_service()


def get_catalog_service(
    container: Annotated[Container, Depends(get_container)],
) -> CatalogService:
    return container.catalog_service()


def get_favorites_service(
    container: Annotated[Container, Depends(get_container)],
) -> FavoritesService:
    return container.favorites_service()


def get_bearer_token(
    authorization: Annotated[Optional[str], Header()] = None,
) -> Optional[str]:
    """Jeton du header Authorization (None si absent)."""
    return extract_bearer_token(authorization)


def get_current_user_id(
    auth: Annotated[AuthService, Depends(get_auth_service)],
    authorization: Annotated[Optional[str], Header()] = None,
) -> str:
    """
    ID de l'utilisateur authentifié.

    Lève AuthenticationRequiredError / InvalidTokenError / TokenExpiredError,
    converties en 401 par les handlers d'exceptions.
    """
    logger.debug(f"Authorization reçu: {token_preview(extract_bearer_token(authorization))}")
    return auth.authenticate(authorization)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
FavoritesServiceDep = Annotated[FavoritesService, Depends(get_favorites_service)]
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
BearerToken = Annotated[Optional[str], Depends(get_bearer_token)]
