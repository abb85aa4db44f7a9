"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont l'orchestration a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Port client catalogue : Contrat du service distant
- ICatalogClient : Operations one-shot (populaires, recherche, decouverte, details, casting)
- Failure / FailureKind : Echec type retourne a la place d'une exception

Port stockage : Contrat de persistance locale
- IFavoritesStore : Favoris hors-ligne et avis personnels
"""

from src.core.ports.api_clients import (
    DEFAULT_SORT_KEY,
    Failure,
    FailureKind,
    ICatalogClient,
)
from src.core.ports.repositories import IFavoritesStore

__all__ = [
    # Client catalogue
    "DEFAULT_SORT_KEY",
    "Failure",
    "FailureKind",
    "ICatalogClient",
    # Stockage
    "IFavoritesStore",
]
