"""
Implementations SQLModel des repositories.

Ce module contient l'implementation concrete de l'interface IFavoritesStore
definie dans src/core/ports/repositories.py, utilisant SQLModel pour
la persistance SQLite.

Le store :
- Herite de l'interface ABC correspondante du domaine
- Recoit une fabrique de sessions via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from src.infrastructure.persistence.repositories.favorites_repository import (
    SQLModelFavoritesStore,
)

__all__ = [
    "SQLModelFavoritesStore",
]
