"""
Connexion a la base MongoDB pour Movie Explorer.

Ce module fournit :
- Creation du client asynchrone (pymongo AsyncMongoClient)
- Acces a la base configuree
- Fermeture propre du client

La connexion est configuree via MOVIEXPLORER_MONGO_URI et MOVIEXPLORER_MONGO_DB_NAME.
Le client ouvre ses connexions paresseusement : le creer ne contacte pas le serveur.
"""

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

USERS_COLLECTION = "users"


def create_client(uri: str, server_selection_timeout_ms: int = 5000) -> AsyncMongoClient:
    """
    Cree le client MongoDB.

    Args:
        uri: Chaine de connexion (mongodb:// ou mongodb+srv://)
        server_selection_timeout_ms: Delai avant echec si aucun serveur ne repond

    Returns:
        Client asynchrone avec dates timezone-aware (UTC)
    """
    return AsyncMongoClient(
        uri,
        tz_aware=True,
        serverSelectionTimeoutMS=server_selection_timeout_ms,
    )


def get_database(client: AsyncMongoClient, name: str) -> AsyncDatabase:
    """Retourne la base applicative."""
    return client[name]


async def close_client(client: AsyncMongoClient) -> None:
    """Ferme le pool de connexions (a appeler a l'arret de l'application)."""
    await client.close()
