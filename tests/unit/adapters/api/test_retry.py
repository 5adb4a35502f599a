"""
Tests unitaires pour le mecanisme de retry avec backoff exponentiel.

Ces tests verifient:
- RateLimitError capture le header Retry-After (numerique uniquement)
- with_retry relance sur RateLimitError et sur les erreurs reseau
- request_with_retry convertit les 429 en RateLimitError
- Les autres erreurs HTTP remontent sans nouvelle tentative

Les delais sont mis a zero (min_wait=max_wait=0) : aucune attente reelle.
"""

import httpx
import pytest
import respx

from src.adapters.api.retry import RateLimitError, request_with_retry, with_retry

URL = "https://api.themoviedb.org/3/movie/550"
NO_WAIT = {"min_wait": 0, "max_wait": 0}


def _counting(failures: list[Exception], result: str = "success"):
    """Fonction async qui leve successivement chaque exception de failures."""
    calls = {"count": 0}

    async def func() -> str:
        calls["count"] += 1
        if failures:
            raise failures.pop(0)
        return result

    return func, calls


class TestRateLimitError:
    def test_stores_retry_after(self) -> None:
        error = RateLimitError(retry_after=60)

        assert error.retry_after == 60
        assert "60" in str(error)

    def test_without_retry_after(self) -> None:
        assert RateLimitError().retry_after is None


class TestWithRetryDecorator:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [RateLimitError(retry_after=1), httpx.ConnectTimeout("timeout"), httpx.ReadError("reset")],
    )
    async def test_retries_transient_errors(self, error: Exception) -> None:
        func, calls = _counting([error, error])

        result = await with_retry(max_attempts=3, **NO_WAIT)(func)()

        assert result == "success"
        assert calls["count"] == 3

    @pytest.mark.asyncio
    async def test_reraises_after_max_attempts(self) -> None:
        func, calls = _counting([RateLimitError(5) for _ in range(5)])

        with pytest.raises(RateLimitError):
            await with_retry(max_attempts=3, **NO_WAIT)(func)()
        assert calls["count"] == 3

    @pytest.mark.asyncio
    async def test_does_not_retry_other_exceptions(self) -> None:
        func, calls = _counting([ValueError("bug")])

        with pytest.raises(ValueError):
            await with_retry(max_attempts=3, **NO_WAIT)(func)()
        assert calls["count"] == 1


class TestRequestWithRetry:
    @pytest.mark.asyncio
    @respx.mock
    async def test_exhausted_429_keeps_retry_after(self) -> None:
        route = respx.get(URL).mock(return_value=httpx.Response(429, headers={"Retry-After": "30"}))

        async with httpx.AsyncClient() as client:
            with pytest.raises(RateLimitError) as exc_info:
                await request_with_retry(client, "GET", URL, max_attempts=3, **NO_WAIT)

        assert exc_info.value.retry_after == 30
        assert route.call_count == 3

    @pytest.mark.asyncio
    @respx.mock
    async def test_succeeds_after_429(self) -> None:
        route = respx.get(URL).mock(
            side_effect=[httpx.Response(429), httpx.Response(200, json={"id": 550})]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(client, "GET", URL, max_attempts=3, **NO_WAIT)

        assert response.json() == {"id": 550}
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_succeeds_after_network_error(self) -> None:
        route = respx.get(URL).mock(
            side_effect=[httpx.ConnectError("refused"), httpx.Response(200, json={"id": 550})]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(client, "GET", URL, max_attempts=2, **NO_WAIT)

        assert response.status_code == 200
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_not_retried(self) -> None:
        route = respx.get(URL).mock(return_value=httpx.Response(500, text="Internal Server Error"))

        async with httpx.AsyncClient() as client:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await request_with_retry(client, "GET", URL, **NO_WAIT)

        assert exc_info.value.response.status_code == 500
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_http_date_retry_after_ignored(self) -> None:
        respx.get(URL).mock(
            return_value=httpx.Response(429, headers={"Retry-After": "Wed, 21 Oct 2026 07:28:00 GMT"})
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(RateLimitError) as exc_info:
                await request_with_retry(client, "GET", URL, max_attempts=1)

        assert exc_info.value.retry_after is None
