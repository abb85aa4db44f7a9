"""
Media catalog entities.

Entities representing catalog items and the personal reviews a user attaches
to them. Both are keyed by the catalog (TMDB) item id.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass
class CatalogItem:
    """
    One browsable media entry.

    Instances coming from the remote client are value copies; the favorites
    store owns the durable copy once a favorite is committed. Re-saving an id
    overwrites the previous record.

    Attributes:
        id: Catalog id, stable between remote and local representations
        title: Localized title
        overview: Synopsis
        poster_path: Poster image reference (relative TMDB path)
        release_date: ISO-like date, the first 4 characters are the year
        vote_average: Rating between 0.0 and 10.0
        backdrop_path: Backdrop image reference (offline enrichment)
        genres: Genre names (offline enrichment)
        original_language: ISO 639-1 code (offline enrichment)
        saved_at: Set by the store when the item is persisted
    """

    id: int
    title: str = ""
    overview: str = ""
    poster_path: Optional[str] = None
    release_date: str = ""
    vote_average: float = 0.0
    backdrop_path: Optional[str] = None
    genres: tuple[str, ...] = ()
    original_language: str = ""
    saved_at: Optional[datetime] = None

    @property
    def year(self) -> Optional[int]:
        """Release year taken from release_date, None when unknown."""
        prefix = self.release_date[:4]
        if len(prefix) == 4 and prefix.isdigit():
            return int(prefix)
        return None


@dataclass
class PersonalReview:
    """
    A user's own review of a catalog item.

    One review per item: saving again for the same movie_id replaces it.
    At least one of rating / comment must carry a value.

    Attributes:
        movie_id: Catalog id of the reviewed item
        rating: Personal rating between 0.0 and 5.0 (0.0 = not rated)
        comment: Free text, may be empty when rating is set
        created_at: Time of the save action (UTC, timezone-aware)
    """

    movie_id: int
    rating: float = 0.0
    comment: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_empty(self) -> bool:
        """True when neither a rating nor a comment was given."""
        return self.rating == 0 and not self.comment.strip()
