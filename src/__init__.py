"""
Movie Explorer - Backend de navigation de films.

Ce package expose une API HTTP qui relaie l'API TMDB (recherche, tendances,
details) et gere les comptes utilisateurs et leurs favoris dans MongoDB.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, exceptions)
- services/ : Couche application (authentification, favoris, catalogue)
- adapters/ : Couche infrastructure (CLI, client TMDB, sécurité)
- infrastructure/ : Persistance MongoDB
- web/ : Application FastAPI
"""

__version__ = "0.1.0"
