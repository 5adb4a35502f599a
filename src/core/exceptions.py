"""
Exceptions du domaine Movie Explorer.

Chaque exception porte le code HTTP et le message public renvoyes au client.
La couche web (src/web/errors.py) les convertit en reponses JSON
de la forme {"error": message}.
"""

from typing import Optional


class MovieExplorerError(Exception):
    """
    Exception de base de l'application.

    Attributes:
        status_code: Code HTTP associe a l'erreur
        message: Message public (affiche tel quel par le front-end)
    """

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(MovieExplorerError):
    """Donnees d'entree invalides ou manquantes."""

    status_code = 400
    default_message = "Invalid request"


class UserAlreadyExistsError(MovieExplorerError):
    """Nom d'utilisateur (ou compte Google) deja enregistre."""

    status_code = 400
    default_message = "Username already exists"


class EmailAlreadyExistsError(UserAlreadyExistsError):
    """Email deja rattache a un autre compte."""

    default_message = "Email already registered"


class InvalidCredentialsError(MovieExplorerError):
    """Couple identifiant / mot de passe incorrect."""

    status_code = 400
    default_message = "Invalid username or password"


class AuthenticationRequiredError(MovieExplorerError):
    """Aucun jeton fourni sur une route protegee."""

    status_code = 401
    default_message = "Access denied"


class InvalidTokenError(MovieExplorerError):
    """Jeton illisible, mal signe ou pointant vers un utilisateur inexistant."""

    status_code = 401
    default_message = "Invalid token"


class TokenExpiredError(InvalidTokenError):
    """Jeton correctement signe mais expire."""

    default_message = "Token expired"


class GoogleAuthError(MovieExplorerError):
    """ID token Google refuse par la verification."""

    status_code = 401
    default_message = "Invalid Google token"


class UserNotFoundError(MovieExplorerError):
    status_code = 404
    default_message = "User not found"


class MovieNotFoundError(MovieExplorerError):
    status_code = 404
    default_message = "Movie not found"


class ConfigurationError(MovieExplorerError):
    """
    Parametre serveur manquant (secret JWT, cle TMDB, client id Google).

    Le detail est journalise, le client ne recoit qu'un message generique.
    """

    status_code = 500
    default_message = "Server configuration error"

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        super().__init__(None)


class UpstreamError(MovieExplorerError):
    """Echec d'appel a l'API TMDB (HTTP, reseau ou rate limiting)."""

    status_code = 502
    default_message = "Failed to fetch data from TMDb"
