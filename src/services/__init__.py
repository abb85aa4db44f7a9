"""
Couche application (orchestration et contrôleurs d'écran).

- CatalogService : point unique entre le catalogue distant et le store local
- CatalogBrowser : navigation paginée populaires / recherche / filtres
- DetailsController : fiche détail avec repli hors-ligne, casting, avis
- FavoritesController : liste vivante des favoris

Les services dépendent des ports de core/, jamais des adaptateurs concrets.
"""

from src.services.browser import CatalogBrowser, QueryMode, QueryState
from src.services.catalog import (
    CatalogPage,
    CatalogService,
    DetailsLookup,
    ItemOrigin,
    describe_failure,
)
from src.services.details import CastState, DetailsController, DetailsState
from src.services.favorites import FavoritesController

__all__ = [
    "CastState",
    "CatalogBrowser",
    "CatalogPage",
    "CatalogService",
    "DetailsController",
    "DetailsLookup",
    "DetailsState",
    "FavoritesController",
    "ItemOrigin",
    "QueryMode",
    "QueryState",
    "describe_failure",
]
