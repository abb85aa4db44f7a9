"""
Controleur de l'ecran des favoris.

Expose la liste vivante des favoris (triee par titre) et un message de
confirmation apres chaque ajout ou retrait.
"""

from typing import Optional

from loguru import logger

from src.core.entities.media import CatalogItem
from src.services.catalog import CatalogService
from src.utils.observable import LiveValue


class FavoritesController:
    """Liste des favoris et actions d'ajout/retrait."""

    def __init__(self, catalog: CatalogService) -> None:
        self._catalog = catalog
        self.message: LiveValue[Optional[str]] = LiveValue(None)

    @property
    def favorites(self) -> LiveValue[list[CatalogItem]]:
        """Liste vivante, re-emise apres chaque mutation du store."""
        return self._catalog.favorites

    async def load(self) -> list[CatalogItem]:
        """Charge la liste initiale depuis le store."""
        items = await self._catalog.refresh_favorites()
        logger.debug(f"{len(items)} favoris charges")
        return items

    def add(self, item: CatalogItem) -> None:
        self._catalog.add_to_favorites(item)
        self.message.set_value(f"Added to favorites: {item.title}")

    def remove(self, item: CatalogItem) -> None:
        self._catalog.remove_from_favorites(item)
        self.message.set_value(f"Removed from favorites: {item.title}")

    def clear_message(self) -> None:
        self.message.set_value(None)
