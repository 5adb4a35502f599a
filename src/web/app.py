"""
Application FastAPI de Movie Explorer.

Initialise l'application web avec le Container DI, configure le CORS pour
le front-end et monte les routes sous /api.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from pymongo.errors import PyMongoError

from .. import __version__
from ..container import Container
from ..infrastructure.persistence.database import close_client
from .errors import register_exception_handlers
from .routes.auth import router as auth_router
from .routes.favorites import router as favorites_router
from .routes.health import router as health_router
from .routes.movies import router as movies_router

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prépare les index MongoDB au démarrage et ferme les clients à l'arrêt."""
    container: Container = app.state.container
    settings = container.config()

    try:
        await container.user_repository().ensure_indexes()
    except PyMongoError as e:
        # L'API TMDB reste utilisable même si MongoDB est indisponible
        logger.error(f"Connexion MongoDB impossible au démarrage: {e}")

    if not settings.jwt_enabled:
        logger.warning("MOVIEXPLORER_JWT_SECRET non défini : les routes authentifiées répondront 500")
    if not settings.tmdb_enabled:
        logger.warning("MOVIEXPLORER_TMDB_API_KEY non défini : les routes films répondront 500")

    logger.info("Démarrage de Movie Explorer", version=__version__)
    yield

    await container.tmdb_client().close()
    await close_client(container.mongo_client())
    logger.info("Arrêt de Movie Explorer")


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI (un nouveau Container si None ; les tests
                   passent un container dont les providers sont surchargés)
    """
    container = container or Container()
    settings = container.config()

    app = FastAPI(title="Movie Explorer", version=__version__, lifespan=lifespan)
    app.state.container = container

    # CORS - le front-end est servi depuis Vercel
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    register_exception_handlers(app)

    # Routes
    api = APIRouter(prefix="/api")
    api.include_router(health_router)
    api.include_router(movies_router)
    api.include_router(auth_router)
    api.include_router(favorites_router)
    app.include_router(api)

    return app


app = create_app()
