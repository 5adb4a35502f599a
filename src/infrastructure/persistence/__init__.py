"""
Module de persistance MongoDB pour Movie Explorer.

Ce module fournit l'infrastructure de stockage documentaire :

- database.py : Creation et fermeture du client MongoDB, acces a la base
- repositories/ : Implementations des ports repository du domaine

Les documents MongoDB sont des adapters de persistance, distincts des entites
de domaine (dataclass dans core/entities/). La conversion entre les deux se
fait dans les repositories.

Usage:
    from src.infrastructure.persistence import create_client, get_database

    client = create_client("mongodb://localhost:27017")
    repo = MongoUserRepository(get_database(client, "movie_explorer"))
    await repo.ensure_indexes()
"""

from src.infrastructure.persistence.database import (
    USERS_COLLECTION,
    close_client,
    create_client,
    get_database,
)

__all__ = [
    "USERS_COLLECTION",
    "close_client",
    "create_client",
    "get_database",
]
