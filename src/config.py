"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MOVIEXPLORER_,
et peut optionnellement être fournie via un fichier .env.

La clé TMDB, le secret JWT et le client ID Google sont optionnels au démarrage :
les routes qui en dépendent répondent "Server configuration error" tant qu'ils ne sont pas définis.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

DEFAULT_CORS_ORIGINS = [
    "https://movie-explorer-tawny-tau.vercel.app",
    "https://movie-explorer-client-f5b5mkara-santhushas-projects-9a02ec71.vercel.app",
]


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MOVIEXPLORER_.
    Exemple : MOVIEXPLORER_JWT_SECRET=change-me

    Les listes (cors_origins) se donnent en JSON :
    MOVIEXPLORER_CORS_ORIGINS='["http://localhost:3000"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIEXPLORER_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Base de données documentaire
    mongo_uri: str = Field(default="mongodb://localhost:27017")
    mongo_db_name: str = Field(default="movie_explorer")

    # API TMDB (clé v3 ou jeton de lecture v4)
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_language: str = Field(default="en-US")

    # Jetons d'accès
    jwt_secret: Optional[str] = Field(default=None)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expires_minutes: int = Field(default=60, ge=1)

    # Mots de passe
    bcrypt_rounds: int = Field(default=10, ge=4, le=15)
    min_password_length: int = Field(default=6, ge=1)

    # Google Sign-In
    google_client_id: Optional[str] = Field(default=None)

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    cors_origin_regex: Optional[str] = Field(default=r"https://.*\.vercel\.app")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/movie_explorer.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return str(v).upper()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_api_key)

    @property
    def jwt_enabled(self) -> bool:
        """Vérifie si un secret de signature JWT est défini."""
        return bool(self.jwt_secret and self.jwt_secret.strip())

    @property
    def google_enabled(self) -> bool:
        """Vérifie si la connexion Google est configurée."""
        return bool(self.google_client_id)
