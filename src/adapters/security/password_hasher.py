"""
Hachage des mots de passe avec bcrypt.

bcrypt n'utilise que les 72 premiers octets d'un mot de passe : la limite
est verifiee par AuthService avant tout appel a hash().
"""

import bcrypt

from src.core.ports.security import IPasswordHasher

# Limite de bcrypt, en octets UTF-8
BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """
    Hacheur bcrypt avec sel genere a chaque appel.

    Attributes:
        rounds: Facteur de cout (log2 du nombre d'iterations)
    """

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Hash illisible (salt invalide) ou mot de passe trop long
            return False
