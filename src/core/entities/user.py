"""
Entité utilisateur.

Un utilisateur possede soit un mot de passe (compte local), soit un
identifiant Google (compte OAuth), soit les deux apres liaison par email.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """
    Compte utilisateur et liste de favoris.

    Attributes:
        id: Identifiant en base (ObjectId MongoDB sous forme de chaine)
        username: Nom d'utilisateur unique
        email: Adresse email (obligatoire pour les comptes Google)
        password_hash: Hash bcrypt, None pour un compte Google seul
        google_id: Identifiant Google (claim "sub" de l'ID token)
        favorites: IDs TMDB des films favoris, dans l'ordre d'ajout, sans doublon
        created_at: Date de creation
        updated_at: Date de derniere modification
    """

    username: str
    id: Optional[str] = None
    email: Optional[str] = None
    password_hash: Optional[str] = None
    google_id: Optional[str] = None
    favorites: list[int] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def has_password(self) -> bool:
        """Vrai si le compte peut se connecter par mot de passe."""
        return bool(self.password_hash)

    def to_public(self) -> dict[str, Optional[str]]:
        """Representation exposee au front-end (jamais de hash ni d'email)."""
        return {"username": self.username, "id": self.id}
