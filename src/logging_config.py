"""
Configuration du logging via loguru.

Deux sorties :
- stderr : format lisible et coloré, au niveau configuré
- fichier : JSON avec rotation, tous niveaux (les appels TMDB sont en DEBUG)

Les loggers standard (uvicorn, pymongo, httpx) sont redirigés vers loguru
pour que le serveur et l'application écrivent dans les mêmes journaux.
"""

import inspect
import logging
import sys
from pathlib import Path

from loguru import logger

# Loggers standard redirigés vers loguru
INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "pymongo", "httpx")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Handler logging standard qui republie chaque enregistrement dans loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Remonte jusqu'à l'appelant réel pour conserver module / ligne
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/movie_explorer.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure loguru et redirige les loggers standard.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier de log JSON
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe (vérification Google dans l'executor)
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in INTERCEPTED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
    # httpx journalise chaque requête en INFO, URL et api_key comprises
    logging.getLogger("httpx").setLevel(logging.WARNING)
    # pymongo.command écrit les documents en DEBUG (hash de mot de passe, email)
    logging.getLogger("pymongo").setLevel(logging.INFO)

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)


def token_preview(token: str | None, length: int = 20) -> str:
    """Tronque un jeton pour les logs (jamais de jeton complet dans les journaux)."""
    if not token:
        return "<none>"
    return f"{token[:length]}..."
