"""
Implementations MongoDB des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans src/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit la base MongoDB via injection de dependances
- Convertit entre entites de domaine (dataclass) et documents MongoDB
"""

from src.infrastructure.persistence.repositories.user_repository import (
    MongoUserRepository,
)

__all__ = [
    "MongoUserRepository",
]
