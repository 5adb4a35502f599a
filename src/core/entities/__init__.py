"""
Entités métier representant les concepts du domaine.

Les entités sont des objets mutables avec une identité persistante.

Exports:
- User: Compte utilisateur (local ou Google) et ses favoris
"""

from src.core.entities.user import User

__all__ = [
    "User",
]
