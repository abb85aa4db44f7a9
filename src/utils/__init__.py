"""
Utilitaires et constantes pour Media Explorer.

Ce module contient les constantes, les fonctions utilitaires partagees et la
valeur observable LiveValue.
"""

from src.utils.constants import (
    API_KEY_MISSING,
    OFFLINE_UNAVAILABLE,
    POPULAR_GENRES,
    TMDB_GENRE_MAPPING,
)
from src.utils.observable import LiveValue

__all__ = [
    "API_KEY_MISSING",
    "OFFLINE_UNAVAILABLE",
    "POPULAR_GENRES",
    "TMDB_GENRE_MAPPING",
    "LiveValue",
]
