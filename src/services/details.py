"""
Controleur de l'ecran de detail d'un film.

Machine a etats de chargement :

    IDLE -> AWAITING_REMOTE -> POPULATED (fiche distante, casting demande)
                            -> AWAITING_LOCAL -> POPULATED_OFFLINE (copie favori, casting vide)
                                              -> UNAVAILABLE (erreur hors-ligne)

Sous-flux du casting (uniquement depuis POPULATED) :

    IDLE -> AWAITING_CREDITS -> CAST_POPULATED | CAST_EMPTY

Un nouvel appel a load_details() abandonne le chargement precedent : ses
reponses tardives sont ignorees.
"""

from enum import Enum
from typing import Optional

from loguru import logger

from src.core.entities.media import CatalogItem, PersonalReview
from src.core.exceptions import MediaExplorerError
from src.core.value_objects.catalog import CastMember
from src.services.catalog import CatalogService, DetailsLookup, ItemOrigin
from src.utils.observable import LiveValue


class DetailsState(Enum):
    """Etat du chargement de la fiche."""

    IDLE = "idle"
    AWAITING_REMOTE = "awaiting_remote"
    POPULATED = "populated"
    AWAITING_LOCAL = "awaiting_local"
    POPULATED_OFFLINE = "populated_offline"
    UNAVAILABLE = "unavailable"


class CastState(Enum):
    """Etat du chargement du casting."""

    IDLE = "idle"
    AWAITING_CREDITS = "awaiting_credits"
    CAST_POPULATED = "cast_populated"
    CAST_EMPTY = "cast_empty"


class DetailsController:
    """
    Controleur de la fiche detail, des favoris et de l'avis personnel.

    Sorties observables :
        item, cast, is_loading, error, state, cast_state, is_favorite, review
    """

    def __init__(self, catalog: CatalogService) -> None:
        self._catalog = catalog
        self._item_id: Optional[int] = None
        self._generation = 0

        self.item: LiveValue[Optional[CatalogItem]] = LiveValue(None)
        self.cast: LiveValue[list[CastMember]] = LiveValue([])
        self.is_loading: LiveValue[bool] = LiveValue(False)
        self.error: LiveValue[Optional[str]] = LiveValue(None)
        self.state: LiveValue[DetailsState] = LiveValue(DetailsState.IDLE)
        self.cast_state: LiveValue[CastState] = LiveValue(CastState.IDLE)
        self.is_favorite: LiveValue[bool] = LiveValue(False)
        self.review: LiveValue[Optional[PersonalReview]] = LiveValue(None)

    @property
    def item_id(self) -> Optional[int]:
        return self._item_id

    async def load_details(self, item_id: int) -> None:
        """
        Charge la fiche d'un film, avec repli hors-ligne.

        Termine quand la fiche et, le cas echeant, le casting sont publies.
        """
        self._generation += 1
        generation = self._generation
        self._item_id = item_id

        self.item.set_value(None)
        self.cast.set_value([])
        self.cast_state.set_value(CastState.IDLE)
        self.error.set_value(None)
        self.is_loading.set_value(True)
        self.state.set_value(DetailsState.AWAITING_REMOTE)

        def on_fallback() -> None:
            if generation == self._generation:
                self.state.set_value(DetailsState.AWAITING_LOCAL)

        lookup = await self._catalog.get_details(item_id, on_fallback=on_fallback)
        if generation != self._generation:
            logger.debug(f"Fiche {item_id} ignoree: un autre film a ete demande")
            return

        if lookup.item is None:
            self.error.set_value(lookup.error)
            self.state.set_value(DetailsState.UNAVAILABLE)
            self.is_loading.set_value(False)
            return

        self.item.set_value(lookup.item)
        if lookup.origin is ItemOrigin.LOCAL:
            self.cast.set_value([])
            self.state.set_value(DetailsState.POPULATED_OFFLINE)
            self.is_loading.set_value(False)
            return

        self.state.set_value(DetailsState.POPULATED)
        await self._load_cast(generation, lookup)

    async def _load_cast(self, generation: int, lookup: DetailsLookup) -> None:
        self.cast_state.set_value(CastState.AWAITING_CREDITS)
        cast = await lookup.cast
        if generation != self._generation:
            return

        self.cast.set_value(cast)
        self.cast_state.set_value(CastState.CAST_POPULATED if cast else CastState.CAST_EMPTY)
        self.is_loading.set_value(False)

    # ------------------------------------------------------------------
    # Favoris
    # ------------------------------------------------------------------

    async def refresh_favorite_state(self) -> bool:
        """Relit l'appartenance aux favoris du film affiche."""
        if self._item_id is None:
            return False
        is_favorite = await self._catalog.in_background(
            self._catalog.is_in_favorites, self._item_id
        )
        self.is_favorite.set_value(is_favorite)
        return is_favorite

    async def toggle_favorite(self) -> bool:
        """
        Ajoute ou retire le film affiche des favoris.

        Returns:
            Le nouvel etat (True = favori). False si aucune fiche n'est affichee.
        """
        item = self.item.value
        if item is None:
            return False

        if await self._catalog.in_background(self._catalog.is_in_favorites, item.id):
            self._catalog.remove_from_favorites(item)
            is_favorite = False
        else:
            self._catalog.add_to_favorites(item)
            is_favorite = True

        self.is_favorite.set_value(is_favorite)
        return is_favorite

    # ------------------------------------------------------------------
    # Avis personnel
    # ------------------------------------------------------------------

    def _require_item(self) -> int:
        if self._item_id is None:
            raise MediaExplorerError("No movie loaded")
        return self._item_id

    async def load_review(self) -> Optional[PersonalReview]:
        movie_id = self._require_item()
        review = await self._catalog.in_background(self._catalog.get_user_review, movie_id)
        self.review.set_value(review)
        return review

    def save_review(self, rating: float, comment: str = "") -> PersonalReview:
        """
        Enregistre l'avis du film affiche.

        Raises:
            EmptyReviewError: Ni note ni commentaire
            ValueError: Note hors de l'intervalle 0-5
        """
        review = PersonalReview(
            movie_id=self._require_item(),
            rating=rating,
            comment=(comment or "").strip(),
        )
        self._catalog.save_user_review(review)
        self.review.set_value(review)
        return review

    def delete_review(self) -> None:
        self._catalog.delete_user_review(self._require_item())
        self.review.set_value(None)
