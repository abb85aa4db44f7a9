"""
Interfaces ports pour le stockage local.

Le store local conserve les favoris (copie hors-ligne complete des fiches) et
les avis personnels. Ses primitives sont synchrones : la couche d'orchestration
les execute toujours sur un worker en arriere-plan, jamais sur la boucle
d'evenements.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.media import CatalogItem, PersonalReview
from src.utils.observable import LiveValue


class IFavoritesStore(ABC):
    """
    Interface de stockage des favoris et des avis personnels.

    Les favoris sont indexes par id d'element (upsert), les avis par movie_id
    (un avis par element).
    """

    @property
    @abstractmethod
    def favorites(self) -> LiveValue[list[CatalogItem]]:
        """Liste vivante des favoris triee par titre, re-emise a chaque mutation."""
        ...

    @abstractmethod
    def upsert_favorite(self, item: CatalogItem) -> CatalogItem:
        """Insere ou remplace un favori ; renseigne saved_at."""
        ...

    @abstractmethod
    def remove_favorite(self, item_id: int) -> bool:
        """Supprime un favori. Retourne True si un enregistrement a ete supprime."""
        ...

    @abstractmethod
    def is_favorite(self, item_id: int) -> bool:
        """Indique si l'element est en favori."""
        ...

    @abstractmethod
    def get_favorite(self, item_id: int) -> Optional[CatalogItem]:
        """Recupere la copie locale d'un favori."""
        ...

    @abstractmethod
    def list_favorites(self) -> list[CatalogItem]:
        """Liste tous les favoris tries par titre."""
        ...

    @abstractmethod
    def count_favorites(self) -> int:
        """Nombre de favoris enregistres."""
        ...

    @abstractmethod
    def upsert_review(self, review: PersonalReview) -> PersonalReview:
        """Insere ou remplace l'avis d'un element."""
        ...

    @abstractmethod
    def get_review(self, movie_id: int) -> Optional[PersonalReview]:
        """Recupere l'avis d'un element."""
        ...

    @abstractmethod
    def delete_review(self, movie_id: int) -> bool:
        """Supprime l'avis d'un element. Retourne True si supprime."""
        ...
