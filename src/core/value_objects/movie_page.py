"""
Page de resultats de films.

Les films restent des dictionnaires bruts TMDB : le backend est un relais
et le front-end consomme directement le format TMDB (poster_path,
backdrop_path, genre_ids, ...).
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable


@dataclass(frozen=True)
class MoviePage:
    """
    Resultats pagines d'un endpoint TMDB.

    Attributs :
        results : Films de la page (format TMDB)
        page : Numero de page (1-indexe)
        total_pages : Nombre total de pages cote TMDB
        total_results : Nombre total de resultats cote TMDB
    """

    results: list[dict[str, Any]] = field(default_factory=list)
    page: int = 1
    total_pages: int = 0
    total_results: int = 0

    @classmethod
    def from_tmdb(cls, data: dict[str, Any]) -> "MoviePage":
        """Construit une page depuis la reponse JSON TMDB."""
        results = data.get("results") or []
        return cls(
            results=list(results),
            page=data.get("page") or 1,
            total_pages=data.get("total_pages") or 0,
            total_results=data.get("total_results") or len(results),
        )

    def filter(self, predicate: Callable[[dict[str, Any]], bool]) -> "MoviePage":
        """Retourne une copie ne gardant que les films acceptes par predicate."""
        return replace(self, results=[m for m in self.results if predicate(m)])

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": self.results,
            "page": self.page,
            "total_pages": self.total_pages,
            "total_results": self.total_results,
        }
