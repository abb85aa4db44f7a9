"""
Module de persistance SQLite pour Media Explorer.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine SQLite, fabrique de sessions, creation des tables
- models.py : Modeles SQLModel (favorites, user_reviews)
- repositories/ : Store des favoris et avis

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans le store.

Usage:
    from src.infrastructure.persistence import create_db_engine, create_tables

    engine = create_db_engine("sqlite:///media_explorer.db")
    create_tables(engine)
"""

from src.infrastructure.persistence.database import (
    create_db_engine,
    create_tables,
    init_db,
    session_factory,
)
from src.infrastructure.persistence.models import FavoriteModel, UserReviewModel

__all__ = [
    "create_db_engine",
    "create_tables",
    "init_db",
    "session_factory",
    "FavoriteModel",
    "UserReviewModel",
]
