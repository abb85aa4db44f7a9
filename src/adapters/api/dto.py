"""
Modeles pydantic des reponses TMDB.

Ils valident la forme des payloads avant conversion en entites du domaine :
une reponse qui ne correspond pas leve ValidationError, que le client
convertit en Failure de type DECODE.

Les champs absents ou null prennent une valeur neutre a la conversion
(titre -> "", note -> 0.0).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _TMDBModel(BaseModel):
    """Base commune : les champs inconnus sont ignores."""

    model_config = ConfigDict(extra="ignore")


class GenreDTO(_TMDBModel):
    id: int
    name: str = ""


class MovieDTO(_TMDBModel):
    """Element de liste ou fiche detail (films et series)."""

    id: int
    title: Optional[str] = None
    name: Optional[str] = None  # series
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date: Optional[str] = None
    first_air_date: Optional[str] = None  # series
    vote_average: Optional[float] = None
    original_language: Optional[str] = None
    genre_ids: list[int] = Field(default_factory=list)  # listes
    genres: list[GenreDTO] = Field(default_factory=list)  # detail


class MovieResponse(_TMDBModel):
    """Reponse paginee (popular, search, discover)."""

    page: int = 1
    results: Optional[list[MovieDTO]] = None
    total_pages: int = 0
    total_results: int = 0


class CastDTO(_TMDBModel):
    id: int
    name: Optional[str] = None
    character: Optional[str] = None
    profile_path: Optional[str] = None


class CreditsResponse(_TMDBModel):
    """Reponse de /movie/{id}/credits."""

    id: Optional[int] = None
    cast: Optional[list[CastDTO]] = None
