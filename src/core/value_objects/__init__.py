"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- SortSpec : Critere de tri "champ.ordre" (ex: popularity.desc)
- SearchCriteria : Parametres normalises d'une recherche de films
- MoviePage : Page de resultats renvoyee par l'API TMDB
- GoogleIdentity : Identite extraite d'un ID token Google verifie
"""

from src.core.value_objects.identity import GoogleIdentity
from src.core.value_objects.movie_page import MoviePage
from src.core.value_objects.search import SearchCriteria, SortSpec

__all__ = [
    "GoogleIdentity",
    "MoviePage",
    "SearchCriteria",
    "SortSpec",
]
