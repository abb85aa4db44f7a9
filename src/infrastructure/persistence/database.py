"""
Configuration de la base de donnees SQLite pour Media Explorer.

Ce module fournit :
- Creation de l'engine SQLite, configure pour un acces depuis le worker du store
- Session factory liee a un engine
- Fonction d'initialisation des tables

L'engine est construit une fois par le container (racine de composition) et
passe explicitement : aucun engine global.
"""

from collections.abc import Callable, Generator
from pathlib import Path

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

SessionFactory = Callable[[], Session]


def create_db_engine(database_url: str) -> Engine:
    """
    Cree l'engine SQLite.

    Le repertoire parent est cree si l'URL designe un fichier. Une base
    en memoire utilise un StaticPool pour que toutes les sessions partagent
    la meme connexion.

    Args:
        database_url: URL SQLAlchemy (ex: sqlite:///media_explorer.db)
    """
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    if database_url.startswith("sqlite:///"):
        db_path = Path(database_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def session_factory(engine: Engine) -> SessionFactory:
    """
    Retourne une fabrique de sessions liees a l'engine.

    Chaque operation du store ouvre sa propre session :
        with factory() as session:
            session.get(FavoriteModel, 42)
    """

    def _factory() -> Session:
        return Session(engine, expire_on_commit=False)

    return _factory


def create_tables(engine: Engine) -> None:
    """Cree les tables favorites et user_reviews si elles n'existent pas."""
    # Import des modeles pour enregistrer leurs metadonnees
    from src.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug(f"Tables creees: {engine.url}")


def init_db(engine: Engine) -> Generator[Engine, None, None]:
    """
    Initialise la base de donnees (Resource dependency-injector).

    Les tables sont creees a l'initialisation, l'engine est libere a l'arret.
    """
    create_tables(engine)
    yield engine
    engine.dispose()
