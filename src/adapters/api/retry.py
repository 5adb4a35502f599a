"""
Mecanisme de retry avec backoff exponentiel pour l'API TMDB.

Relance automatiquement :
- les reponses 429 (rate limiting TMDB, ~50 requetes/s)
- les erreurs reseau transitoires (timeout, connexion refusee)

Les autres erreurs HTTP (4xx, 5xx) remontent immediatement.

Usage:
    response = await request_with_retry(client, "GET", "/movie/550")
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


RETRYABLE_ERRORS = (RateLimitError, httpx.TransportError)


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        f"Appel TMDB en echec, nouvelle tentative ({retry_state.attempt_number}): {exc!r}"
    )


def with_retry(max_attempts: int = 5, max_wait: float = 60, min_wait: float = 1):
    """
    Decorateur de retry sur RateLimitError et erreurs reseau.

    Utilise wait_random_exponential (jitter) pour eviter que des requetes
    paralleles, comme l'hydratation des favoris, relancent toutes en meme temps.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)
        min_wait: Delai minimum entre les tentatives en secondes (defaut: 1)
    """
    return retry(
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        wait=wait_random_exponential(multiplier=1, min=min_wait, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: float = 60,
    min_wait: float = 1,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec retry automatique.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL (relative a la base_url du client)
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives
        min_wait: Delai minimum entre deux tentatives
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.TransportError: Si le reseau reste indisponible
        httpx.HTTPStatusError: Pour les autres erreurs HTTP
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait, min_wait=min_wait)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            retry_after_header = response.headers.get("Retry-After")
            retry_after = (
                int(retry_after_header)
                if retry_after_header and retry_after_header.isdigit()
                else None
            )
            raise RateLimitError(retry_after)
        response.raise_for_status()
        return response

    return await _do_request()
