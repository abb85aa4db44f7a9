"""
Container d'injection de dependances via dependency-injector.

Racine de composition de Media Explorer : construit l'engine SQLite, le store
des favoris, le client TMDB, le service d'orchestration et les controleurs.
"""

from dependency_injector import containers, providers

from .adapters.api.tmdb_client import TMDBCatalogClient
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db, session_factory
from .infrastructure.persistence.repositories import SQLModelFavoritesStore
from .logging_config import configure_from_settings
from .services.browser import CatalogBrowser
from .services.catalog import CatalogService
from .services.details import DetailsController
from .services.favorites import FavoritesController


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.init_resources()  # Logging + creation des tables
        browser = container.catalog_browser()
        await browser.load_popular()
        ...
        await container.catalog_service().close()
        container.shutdown_resources()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Logging - Resource initialisee par container.init_resources()
    logging = providers.Resource(configure_from_settings, config)

    # Database - engine unique, Resource pour la creation des tables
    engine = providers.Singleton(create_db_engine, config.provided.database_url)
    database = providers.Resource(init_db, engine)
    sessions = providers.Singleton(session_factory, engine)

    # Store local - Singleton : la liste vivante des favoris est partagee
    favorites_store = providers.Singleton(
        SQLModelFavoritesStore,
        session_factory=sessions,
    )

    # Client API - Singleton avec api_key depuis config
    # Sans cle, le client est cree mais CatalogService repond "API key missing"
    catalog_client = providers.Singleton(
        TMDBCatalogClient,
        api_key=config.provided.tmdb_api_key,
        base_url=config.provided.tmdb_base_url,
        timeout=config.provided.request_timeout,
    )

    # Service d'orchestration - Singleton (last_error et worker partages)
    catalog_service = providers.Singleton(
        CatalogService,
        client=catalog_client,
        store=favorites_store,
        language=config.provided.language,
    )

    # Controleurs d'ecran - Factory : un etat par ecran
    catalog_browser = providers.Factory(CatalogBrowser, catalog=catalog_service)
    details_controller = providers.Factory(DetailsController, catalog=catalog_service)
    favorites_controller = providers.Factory(FavoritesController, catalog=catalog_service)
