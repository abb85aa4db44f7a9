"""
Fixtures pytest partagees pour les tests Media Explorer.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Store SQLModel sur une base SQLite en memoire
- Mock du client catalogue (ICatalogClient)
- CatalogService branche sur le mock et le store en memoire
- Entites d'exemple
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import Engine

from src.config import Settings
from src.core.entities.media import CatalogItem
from src.core.ports.api_clients import ICatalogClient
from src.core.value_objects.catalog import ItemPage
from src.infrastructure.persistence.database import (
    create_db_engine,
    create_tables,
    session_factory,
)
from src.infrastructure.persistence.repositories import SQLModelFavoritesStore
from src.services.catalog import CatalogService


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test isoles dans tmp_path."""
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        tmdb_api_key="test_api_key",
        language="ru-RU",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire avec les tables creees."""
    engine = create_db_engine("sqlite://")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine: Engine) -> SQLModelFavoritesStore:
    """Store de favoris sur la base en memoire."""
    return SQLModelFavoritesStore(session_factory(engine))


@pytest.fixture
def mock_client() -> MagicMock:
    """
    Mock de ICatalogClient pour les tests.

    Les methodes distantes sont des AsyncMock renvoyant une page vide par
    defaut. Configurer return_value / side_effect dans chaque test.
    """
    mock = MagicMock(spec=ICatalogClient)
    mock.has_credentials = True
    mock.fetch_popular = AsyncMock(return_value=ItemPage())
    mock.search = AsyncMock(return_value=ItemPage())
    mock.discover = AsyncMock(return_value=ItemPage())
    mock.fetch_details = AsyncMock()
    mock.fetch_credits = AsyncMock(return_value=[])
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def inception() -> CatalogItem:
    """CatalogItem pour un film type."""
    return CatalogItem(
        id=27205,
        title="Inception",
        overview="A thief who steals corporate secrets...",
        poster_path="/9gk7adHYeDvHkCSEqAvQNLV5Uge.jpg",
        release_date="2010-07-15",
        vote_average=8.4,
        backdrop_path="/8ZTVqvKDQ8emSGUEMjsS4yHAwrp.jpg",
        genres=("Action", "Science Fiction"),
        original_language="en",
    )


@pytest.fixture
def avatar() -> CatalogItem:
    """Deuxieme film type, titre trie avant Inception."""
    return CatalogItem(
        id=19995,
        title="Avatar",
        release_date="2009-12-15",
        vote_average=7.6,
    )



@pytest.fixture
def store_executor() -> Iterator[ThreadPoolExecutor]:
    """Worker unique du store, arrete en fin de test."""
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="test-store")
    yield executor
    executor.shutdown(wait=True)


@pytest.fixture
def catalog(
    mock_client: MagicMock,
    store: SQLModelFavoritesStore,
    store_executor: ThreadPoolExecutor,
) -> CatalogService:
    """CatalogService branche sur le mock client et le store en memoire."""
    return CatalogService(
        client=mock_client,
        store=store,
        language="ru-RU",
        executor=store_executor,
    )
