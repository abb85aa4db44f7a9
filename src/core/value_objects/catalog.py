"""
Objets valeur du catalogue distant.

Objets immutables transportes entre le client catalogue et la couche
d'orchestration : membre du casting, page de resultats et genre.
"""

from dataclasses import dataclass, field
from typing import Optional

from src.core.entities.media import CatalogItem


@dataclass(frozen=True)
class CastMember:
    """
    Membre du casting d'un film.

    Transitoire : n'existe que pendant l'affichage d'un detail, jamais persiste.

    Attributs:
        id: ID TMDB de la personne
        name: Nom de l'acteur
        character: Nom du personnage joue
        profile_path: Reference de l'image de profil
    """

    id: int
    name: str = ""
    character: str = ""
    profile_path: Optional[str] = None


@dataclass(frozen=True)
class ItemPage:
    """
    Page de resultats decodee depuis le catalogue distant.

    Attributs:
        items: Elements de la page, dans l'ordre de la reponse
        page: Numero de la page (1-based)
        total_pages: Nombre total de pages annonce par le service
        total_results: Nombre total de resultats annonce par le service
    """

    items: tuple[CatalogItem, ...] = field(default_factory=tuple)
    page: int = 1
    total_pages: int = 0
    total_results: int = 0

    @property
    def is_empty(self) -> bool:
        """Reponse valide mais sans aucun element."""
        return not self.items


@dataclass(frozen=True)
class Genre:
    """
    Genre du catalogue.

    Attributs:
        id: Identifiant TMDB du genre (utilise dans with_genres)
        name: Nom affichable
    """

    id: int
    name: str

    def __str__(self) -> str:
        return self.name
