"""
Client API du catalogue distant.

Ce module fournit l'adaptateur TMDB qui implemente ICatalogClient
(core/ports/api_clients.py), ainsi que les modeles pydantic utilises
pour valider les payloads.

Aucun retry ni cache : chaque appel est une requete unique dont l'echec
est rendu sous forme de Failure.
"""

from src.adapters.api.tmdb_client import TMDBCatalogClient

__all__ = [
    "TMDBCatalogClient",
]
