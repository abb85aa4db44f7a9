"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ et fournissent
des implementations concretes pour les systemes externes.

Sous-packages :
- api/ : Client du catalogue distant (TMDB, httpx + pydantic)

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""

from src.adapters.api.tmdb_client import TMDBCatalogClient

__all__ = [
    "TMDBCatalogClient",
]
