"""
Adaptateurs de sécurité.

Implémentations concrètes des ports de core/ports/security.py :
- BcryptPasswordHasher : Hachage bcrypt des mots de passe
- JWTTokenService : Jetons d'accès HS256 via PyJWT
- GoogleIdTokenVerifier : Vérification des ID tokens via google-auth
"""

from src.adapters.security.google_verifier import GoogleIdTokenVerifier
from src.adapters.security.jwt_service import JWTTokenService
from src.adapters.security.password_hasher import BcryptPasswordHasher

__all__ = [
    "BcryptPasswordHasher",
    "GoogleIdTokenVerifier",
    "JWTTokenService",
]
