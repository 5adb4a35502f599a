"""
Objets valeur pour la recherche de films.

SearchCriteria normalise les parametres de requete du front-end
(query, page, with_genres, primary_release_year, sort_by) et rejette
les valeurs hors limites avant tout appel a TMDB.
"""

import re
from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import ValidationError

# TMDB refuse les pages au-dela de 500
MAX_PAGE = 500

SORTABLE_FIELDS = frozenset({"popularity", "vote_average", "release_date"})

_YEAR_PATTERN = re.compile(r"^\d{4}$")


@dataclass(frozen=True)
class SortSpec:
    """
    Critere de tri au format TMDB "champ.ordre".

    Attributs :
        field : Champ a trier (popularity, vote_average, release_date, ...)
        descending : Vrai pour un tri decroissant (".desc")
    """

    field: str
    descending: bool = False

    @classmethod
    def parse(cls, value: str) -> "SortSpec":
        """
        Parse "popularity.desc" en SortSpec.

        Un ordre absent ou inconnu vaut ascendant.
        """
        field_name, _, order = value.strip().partition(".")
        if not field_name:
            raise ValidationError("Invalid sort_by value")
        return cls(field=field_name, descending=order.lower() == "desc")

    @property
    def is_supported(self) -> bool:
        """Vrai si le tri peut etre applique localement."""
        return self.field in SORTABLE_FIELDS

    def __str__(self) -> str:
        return f"{self.field}.{'desc' if self.descending else 'asc'}"


@dataclass(frozen=True)
class SearchCriteria:
    """
    Parametres normalises d'une recherche.

    Attributs :
        query : Texte recherche (None ou vide = mode decouverte)
        page : Page demandee (1 a 500)
        with_genres : Filtre genres brut TMDB ("28,12" = tous, "28|12" = au moins un)
        primary_release_year : Annee de sortie sur 4 chiffres
        sort_by : Critere de tri
    """

    query: Optional[str] = None
    page: int = 1
    with_genres: Optional[str] = None
    primary_release_year: Optional[str] = None
    sort_by: Optional[SortSpec] = None

    @classmethod
    def build(
        cls,
        query: Optional[str] = None,
        page: int = 1,
        with_genres: Optional[str] = None,
        primary_release_year: Optional[str] = None,
        sort_by: Optional[str] = None,
    ) -> "SearchCriteria":
        """
        Valide et construit les criteres depuis les parametres bruts.

        Raises:
            ValidationError: Page hors limites, annee ou genres mal formes
        """
        if page < 1 or page > MAX_PAGE:
            raise ValidationError(f"page must be between 1 and {MAX_PAGE}")

        year = primary_release_year.strip() if primary_release_year else None
        if year and not _YEAR_PATTERN.match(year):
            raise ValidationError("primary_release_year must be a 4-digit year")

        genres = with_genres.strip() if with_genres else None
        if genres:
            # Valide le format avant de le transmettre tel quel a TMDB
            _split_genres(genres)

        return cls(
            query=query.strip() if query and query.strip() else None,
            page=page,
            with_genres=genres or None,
            primary_release_year=year or None,
            sort_by=SortSpec.parse(sort_by) if sort_by and sort_by.strip() else None,
        )

    @property
    def is_text_search(self) -> bool:
        return self.query is not None

    @property
    def genre_ids(self) -> tuple[int, ...]:
        """IDs de genres du filtre (vide si aucun filtre)."""
        if not self.with_genres:
            return ()
        return _split_genres(self.with_genres)

    @property
    def genres_match_any(self) -> bool:
        """Vrai si le filtre genres est un OU ("|"), faux pour un ET (",")."""
        return bool(self.with_genres) and "|" in self.with_genres


def _split_genres(value: str) -> tuple[int, ...]:
    parts = [p.strip() for p in re.split(r"[,|]", value) if p.strip()]
    try:
        return tuple(int(p) for p in parts)
    except ValueError:
        raise ValidationError("with_genres must be a list of genre ids") from None
