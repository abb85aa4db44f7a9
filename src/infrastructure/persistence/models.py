"""
Modeles SQLModel pour la base de donnees Media Explorer.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- favorites: Copie hors-ligne des films mis en favori (cle = id TMDB)
- user_reviews: Avis personnels (cle = movie_id, un avis par film)

Les champs JSON (*_json) permettent de stocker des listes (genres)
de maniere serialisee dans SQLite.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FavoriteModel(SQLModel, table=True):
    """
    Modele representant un favori dans la base de donnees.

    L'id est celui du catalogue TMDB (pas d'autoincrement) : re-sauvegarder
    un meme id remplace l'enregistrement.
    """

    __tablename__ = "favorites"

    id: int = Field(primary_key=True)
    title: str = Field(default="", index=True)
    overview: str = ""
    poster_path: str | None = None
    backdrop_path: str | None = None
    release_date: str = ""
    vote_average: float = 0.0
    genres_json: str | None = None  # JSON: ["Action", "Science Fiction"]
    original_language: str = ""
    saved_at: datetime = Field(default_factory=_utc_now, sa_type=DateTime(timezone=True))

    @property
    def genres(self) -> list[str]:
        """Retourne les genres deserialises."""
        if self.genres_json:
            return json.loads(self.genres_json)
        return []

    @genres.setter
    def genres(self, value: list[str]) -> None:
        """Serialise les genres en JSON."""
        self.genres_json = json.dumps(value) if value else None


class UserReviewModel(SQLModel, table=True):
    """Modele representant l'avis personnel d'un utilisateur sur un film."""

    __tablename__ = "user_reviews"

    movie_id: int = Field(primary_key=True)
    rating: float = 0.0  # 0.0 a 5.0
    comment: str = ""
    created_at: datetime = Field(default_factory=_utc_now, sa_type=DateTime(timezone=True))
