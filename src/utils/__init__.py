"""
Utilitaires et constantes pour Movie Explorer.
"""

from src.utils.constants import (
    DEFAULT_DISCOVER_SORT,
    DETAILS_APPEND,
    TMDB_BASE_URL,
    TMDB_TIME_WINDOWS,
)

__all__ = [
    "DEFAULT_DISCOVER_SORT",
    "DETAILS_APPEND",
    "TMDB_BASE_URL",
    "TMDB_TIME_WINDOWS",
]
