"""
Constantes globales pour Movie Explorer.

Ce module contient les constantes partagees:
- URLs de l'API TMDB
- Fenetres de tendance acceptees
- Tri par defaut du mode decouverte
"""

TMDB_BASE_URL = "https://api.themoviedb.org/3"

# Fenetres acceptees par /trending/movie/{time_window}
TMDB_TIME_WINDOWS = frozenset({"day", "week"})

# Tri applique par /discover/movie quand le client n'en precise pas
DEFAULT_DISCOVER_SORT = "popularity.desc"

# Sous-ressources ajoutees a la fiche detail d'un film
DETAILS_APPEND = ("credits", "videos")
