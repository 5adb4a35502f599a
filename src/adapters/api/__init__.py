"""
Client API externe pour les metadonnees de films.

Ce module fournit l'adaptateur vers TMDB (The Movie Database) et son
infrastructure de retry:
- TMDBClient: Implementation de IMovieAPIClient
- RateLimitError: Exception pour les erreurs 429
- with_retry / request_with_retry: Backoff exponentiel sur 429 et erreurs reseau
"""

from src.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from src.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "RateLimitError",
    "TMDBClient",
    "request_with_retry",
    "with_retry",
]
