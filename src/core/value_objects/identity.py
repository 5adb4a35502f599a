"""Identite Google issue de la verification d'un ID token."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GoogleIdentity:
    """
    Claims utiles d'un ID token Google.

    Attributs :
        subject : Identifiant Google stable (claim "sub")
        email : Adresse email du compte
        email_verified : Vrai si Google garantit la possession de l'email
        name : Nom affiche du compte
    """

    subject: str
    email: Optional[str] = None
    email_verified: bool = False
    name: Optional[str] = None
