"""Tests de la route /api/health et des en-tetes CORS."""

from src import __version__


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": __version__}


def test_lifespan_ensures_indexes(client, user_repo):
    assert user_repo.indexes_ensured is True


def test_cors_allows_configured_origin(client):
    response = client.options(
        "/api/movies/trending",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_cors_allows_vercel_previews(client):
    response = client.get(
        "/api/health", headers={"Origin": "https://movie-explorer-git-main.vercel.app"}
    )

    assert (
        response.headers["access-control-allow-origin"]
        == "https://movie-explorer-git-main.vercel.app"
    )


def test_cors_rejects_unknown_origin(client):
    response = client.get("/api/health", headers={"Origin": "https://evil.example.com"})

    assert "access-control-allow-origin" not in response.headers


def test_unknown_route_uses_error_format(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
