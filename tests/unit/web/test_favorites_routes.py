"""
Tests des routes /api/favorites.

Routes protegees : le jeton est emis par le service JWT du container de test.
"""

import pytest

from src.adapters.security.jwt_service import JWTTokenService
from tests.fixtures.tmdb_responses import INCEPTION, INTERSTELLAR


@pytest.fixture(autouse=True)
def tmdb_movies(mock_api_client):
    by_id = {27205: INCEPTION, 157336: INTERSTELLAR}
    mock_api_client.get_details.side_effect = lambda movie_id, append: by_id.get(movie_id)


class TestAuthRequired:
    @pytest.mark.parametrize(
        "method, url",
        [
            ("GET", "/api/favorites"),
            ("POST", "/api/favorites"),
            ("DELETE", "/api/favorites"),
            ("DELETE", "/api/favorites/27205"),
        ],
    )
    def test_without_token(self, client, method, url):
        response = client.request(method, url)

        assert response.status_code == 401
        assert response.json() == {"error": "Access denied"}

    def test_expired_token(self, client, make_user):
        user = make_user()
        expired = JWTTokenService(secret="test-secret", expires_minutes=-1).issue(user.id)

        response = client.get("/api/favorites", headers={"Authorization": f"Bearer {expired}"})

        assert response.status_code == 401
        assert response.json() == {"error": "Token expired"}


class TestFavoritesRoutes:
    def test_list(self, client, make_user, auth_headers):
        user = make_user(favorites=[157336, 27205])

        response = client.get("/api/favorites", headers=auth_headers(user))

        assert response.status_code == 200
        assert [m["id"] for m in response.json()["favorites"]] == [157336, 27205]

    def test_add(self, client, make_user, auth_headers, user_repo):
        user = make_user()

        response = client.post(
            "/api/favorites", json={"movie": INCEPTION}, headers=auth_headers(user)
        )

        assert response.status_code == 200
        assert [m["id"] for m in response.json()["favorites"]] == [27205]
        assert user_repo.users[user.id].favorites == [27205]

    def test_add_without_movie(self, client, make_user, auth_headers):
        user = make_user()

        response = client.post("/api/favorites", json={}, headers=auth_headers(user))

        assert response.status_code == 400
        assert response.json() == {"error": "Movie ID is required"}

    def test_remove(self, client, make_user, auth_headers):
        user = make_user(favorites=[27205, 157336])

        response = client.delete("/api/favorites/27205", headers=auth_headers(user))

        assert response.status_code == 200
        assert [m["id"] for m in response.json()["favorites"]] == [157336]

    def test_clear(self, client, make_user, auth_headers, user_repo):
        user = make_user(favorites=[27205, 157336])

        response = client.delete("/api/favorites", headers=auth_headers(user))

        assert response.status_code == 200
        assert response.json() == {"favorites": []}
        assert user_repo.users[user.id].favorites == []

    def test_deleted_user(self, client, make_user, auth_headers, user_repo):
        user = make_user()
        headers = auth_headers(user)
        del user_repo.users[user.id]

        response = client.get("/api/favorites", headers=headers)

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}
