"""
Service d'orchestration du catalogue.

CatalogService est le point unique entre les controleurs d'ecran et les deux
sources de donnees : le client catalogue distant et le store local des favoris.

Responsabilites:
- Requetes de listes paginees (populaires, recherche, decouverte)
- Fiche detail avec repli sur la copie hors-ligne des favoris
- Casting (jamais disponible hors-ligne)
- Mutations des favoris et des avis, executees sans attendre sur le worker du store
- Signal partage last_error (derniere ecriture gagnante)

Modele d'execution:
- Les coroutines publiques s'executent sur la boucle d'evenements, qui est le
  seul contexte autorise a publier vers les observateurs.
- Les acces au store passent par un ThreadPoolExecutor a un seul worker : les
  ecritures et lectures emises via ce service sont donc traitees dans l'ordre.
"""

import asyncio
import concurrent.futures
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Any, Awaitable, Callable, Iterable, Optional, TypeVar, Union

from loguru import logger

from src.core.entities.media import CatalogItem, PersonalReview
from src.core.exceptions import EmptyReviewError
from src.core.ports.api_clients import (
    DEFAULT_SORT_KEY,
    Failure,
    FailureKind,
    ICatalogClient,
    PageResult,
)
from src.core.ports.repositories import IFavoritesStore
from src.core.value_objects.catalog import CastMember
from src.utils.constants import (
    API_KEY_MISSING,
    DETAILS_LOAD_FAILED,
    EMPTY_QUERY,
    OFFLINE_UNAVAILABLE,
)
from src.utils.helpers import join_genre_ids
from src.utils.observable import LiveValue

T = TypeVar("T")


class ItemOrigin(Enum):
    """Provenance d'une fiche detail."""

    REMOTE = "remote"
    LOCAL = "local"


@dataclass
class CatalogPage:
    """Resultat d'une requete de liste.

    Attributes:
        items: Elements recus (vide en cas d'echec)
        page: Page demandee
        total_pages: Nombre de pages annonce par le service
        total_results: Nombre de resultats annonce par le service
        error: Message d'erreur, None si la requete a abouti
    """

    items: list[CatalogItem] = field(default_factory=list)
    page: int = 1
    total_pages: int = 0
    total_results: int = 0
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class DetailsLookup:
    """Resultat d'une demande de fiche detail.

    Attributes:
        item: Fiche distante ou copie locale, None si indisponible
        origin: REMOTE, LOCAL, ou None si indisponible
        cast: Future du casting ; deja resolue a [] hors-ligne
        error: Message d'erreur quand item est None
    """

    item: Optional[CatalogItem]
    origin: Optional[ItemOrigin]
    cast: "asyncio.Future[list[CastMember]]"
    error: Optional[str] = None


@dataclass(frozen=True)
class _Labels:
    transport: str
    http: str
    decode: str


_OPERATION_LABELS: dict[str, _Labels] = {
    "popular": _Labels("Failed to load popular", "Error loading popular", "Error parsing popular response"),
    "search": _Labels("Failed to search", "Error searching", "Error parsing search response"),
    "discover": _Labels("Failed to discover movies", "Error loading discover", "Error parsing discover response"),
    "details": _Labels("Failed to load details", "Error loading details", "Error parsing details response"),
    "cast": _Labels("Failed to load cast", "Error loading cast", "Error parsing cast response"),
}


def describe_failure(operation: str, failure: Failure) -> str:
    """
    Construit le message d'erreur expose a l'utilisateur.

    La formulation distingue les trois natures d'echec :
    - transport : "Failed to load popular: <detail>"
    - HTTP : "Error loading popular: code=401, message=..., error: <extrait du corps>"
    - decodage : "Error parsing popular response: <detail>"
    """
    labels = _OPERATION_LABELS[operation]
    if failure.kind is FailureKind.TRANSPORT:
        return f"{labels.transport}: {failure.detail}"
    if failure.kind is FailureKind.HTTP:
        return (
            f"{labels.http}: code={failure.status_code}, "
            f"message={failure.detail}, error: {failure.body}"
        )
    return f"{labels.decode}: {failure.detail}"


class CatalogService:
    """
    Orchestration entre le catalogue distant et le store local.

    Example:
        service = CatalogService(client=client, store=store, language="ru-RU")

        page = await service.get_popular(1)
        if page.failed:
            print(service.last_error.value)

        lookup = await service.get_details(42)
        cast = await lookup.cast

        service.add_to_favorites(lookup.item)
        await service.close()
    """

    def __init__(
        self,
        client: ICatalogClient,
        store: IFavoritesStore,
        language: str = "ru-RU",
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> None:
        """
        Initialise le service.

        Args:
            client: Client du catalogue distant
            store: Store local des favoris et avis
            language: Code langue transmis a chaque requete
            executor: Worker du store (par defaut un seul thread, ecritures serialisees).
                Un executor fourni reste a la charge de l'appelant.
        """
        self._client = client
        self._store = store
        self._language = language
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="favorites-store"
        )
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._pending_writes: set[concurrent.futures.Future] = set()

        self.last_error: LiveValue[Optional[str]] = LiveValue(None)
        self.favorites: LiveValue[list[CatalogItem]] = LiveValue(
            list(store.favorites.value or [])
        )
        self._unsubscribe_store = store.favorites.observe(self._on_store_favorites)

    # ------------------------------------------------------------------
    # Boucle d'evenements et worker du store
    # ------------------------------------------------------------------

    def _bind_loop(self) -> asyncio.AbstractEventLoop:
        """Memorise la boucle courante, cible des publications venant du worker."""
        loop = asyncio.get_running_loop()
        self._loop = loop
        return loop

    def _on_store_favorites(self, items: list[CatalogItem]) -> None:
        """Marshalle la liste vivante du store vers la boucle d'evenements."""
        loop = self._loop
        if loop is not None and not loop.is_closed():
            self.favorites.post_value(items, loop)
        else:
            self.favorites.set_value(items)

    def in_background(self, fn: Callable[..., T], *args: Any) -> "asyncio.Future[T]":
        """
        Execute une lecture bloquante sur le worker du store.

        Le worker etant unique, la lecture voit toutes les ecritures emises
        avant elle par ce service.

        Example:
            is_fav = await service.in_background(service.is_in_favorites, 7)
        """
        loop = self._bind_loop()
        return loop.run_in_executor(self._executor, partial(fn, *args))

    def _submit(self, description: str, fn: Callable[..., Any], *args: Any) -> None:
        """Soumet une ecriture sans attendre son resultat."""
        try:
            self._bind_loop()
        except RuntimeError:
            logger.debug(f"Ecriture emise hors boucle d'evenements: {description}")
        future = self._executor.submit(fn, *args)
        self._pending_writes.add(future)
        future.add_done_callback(partial(self._on_write_done, description))

    def _on_write_done(self, description: str, future: concurrent.futures.Future) -> None:
        self._pending_writes.discard(future)
        if future.cancelled():
            logger.warning(f"Ecriture locale annulee: {description}")
            return
        error = future.exception()
        if error is not None:
            logger.opt(exception=error).error(f"Echec de l'ecriture locale: {description}")

    async def drain(self) -> None:
        """Attend la fin de toutes les ecritures en cours."""
        pending = [asyncio.wrap_future(f) for f in list(self._pending_writes)]
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    async def close(self) -> None:
        """
        Termine les ecritures en cours, se detache du store et ferme le client.

        Le worker n'est arrete que s'il a ete cree par ce service ; l'attente
        de son arret se fait hors de la boucle d'evenements.
        """
        await self.drain()
        self._unsubscribe_store()
        if self._owns_executor:
            await asyncio.to_thread(self._executor.shutdown, True)
        await self._client.close()

    # ------------------------------------------------------------------
    # Listes paginees
    # ------------------------------------------------------------------

    async def get_popular(self, page: int) -> CatalogPage:
        """Charge une page des films populaires."""
        logger.debug(f"get_popular(page={page})")
        return await self._list_query(
            "popular", page, lambda: self._client.fetch_popular(page, self._language)
        )

    async def search(self, query: str, page: int) -> CatalogPage:
        """Recherche des films par titre."""
        query = query.strip() if query else ""
        logger.debug(f"search(query={query!r}, page={page})")
        if not query:
            return self._failed_page(page, EMPTY_QUERY)
        return await self._list_query(
            "search", page, lambda: self._client.search(query, page, self._language)
        )

    async def discover(
        self,
        page: int,
        genre_ids: Union[str, Iterable[int], None] = "",
        year: Optional[int] = None,
    ) -> CatalogPage:
        """
        Decouverte filtree par genres et annee, triee par popularite.

        Args:
            page: Numero de page (>= 1)
            genre_ids: IDs joints par des virgules ("28,35") ou iterable d'entiers
            year: Annee de sortie (None = toutes)
        """
        genres = join_genre_ids(genre_ids)
        logger.debug(f"discover(page={page}, genres={genres!r}, year={year})")
        return await self._list_query(
            "discover",
            page,
            lambda: self._client.discover(page, genres, year, DEFAULT_SORT_KEY, self._language),
        )

    async def _list_query(
        self,
        operation: str,
        page: int,
        call: Callable[[], Awaitable[PageResult]],
    ) -> CatalogPage:
        """Execute une requete de liste et met a jour last_error."""
        self._bind_loop()
        if not self._client.has_credentials:
            return self._failed_page(page, API_KEY_MISSING)

        result = await call()
        if isinstance(result, Failure):
            return self._failed_page(page, describe_failure(operation, result))

        self.last_error.set_value(None)
        logger.debug(
            f"{operation}: {len(result.items)} elements "
            f"(page {result.page}/{result.total_pages})"
        )
        return CatalogPage(
            items=list(result.items),
            page=result.page,
            total_pages=result.total_pages,
            total_results=result.total_results,
        )

    def _failed_page(self, page: int, message: str) -> CatalogPage:
        logger.error(message)
        self.last_error.set_value(message)
        return CatalogPage(items=[], page=page, error=message)

    # ------------------------------------------------------------------
    # Detail et casting
    # ------------------------------------------------------------------

    async def get_details(
        self,
        item_id: int,
        on_fallback: Optional[Callable[[], None]] = None,
    ) -> DetailsLookup:
        """
        Recupere la fiche d'un film avec repli hors-ligne.

        Succes distant : la fiche est retournee et le casting est demande
        separement (lookup.cast). Echec ou reponse vide : la copie locale du
        favori est utilisee, sans erreur et avec un casting vide. Sans copie
        locale, last_error recoit le message OFFLINE_UNAVAILABLE.

        Args:
            item_id: ID du film
            on_fallback: Appele au moment de basculer vers le store local
        """
        loop = self._bind_loop()
        logger.debug(f"get_details(id={item_id})")

        if self._client.has_credentials:
            result = await self._client.fetch_details(item_id, self._language)
        else:
            result = Failure(kind=FailureKind.TRANSPORT, detail=API_KEY_MISSING)

        if isinstance(result, CatalogItem) and result.title:
            self.last_error.set_value(None)
            logger.debug(f"Fiche chargee: {result.title}")
            cast_task = loop.create_task(self.get_cast(item_id))
            return DetailsLookup(item=result, origin=ItemOrigin.REMOTE, cast=cast_task)

        reason = (
            describe_failure("details", result)
            if isinstance(result, Failure)
            else "empty details payload"
        )
        logger.warning(f"Fiche {item_id} indisponible en ligne ({reason}), repli local")
        if on_fallback is not None:
            on_fallback()

        no_cast = self._resolved(loop, [])
        try:
            offline_item = await self.in_background(self._store.get_favorite, item_id)
        except Exception:
            logger.exception(f"Lecture du favori {item_id} impossible")
            self.last_error.set_value(DETAILS_LOAD_FAILED)
            return DetailsLookup(None, None, no_cast, error=DETAILS_LOAD_FAILED)

        if offline_item is None:
            logger.info(f"Film {item_id} absent des favoris")
            self.last_error.set_value(OFFLINE_UNAVAILABLE)
            return DetailsLookup(None, None, no_cast, error=OFFLINE_UNAVAILABLE)

        logger.info(f"Fiche hors-ligne utilisee: {offline_item.title}")
        self.last_error.set_value(None)
        return DetailsLookup(item=offline_item, origin=ItemOrigin.LOCAL, cast=no_cast)

    async def get_cast(self, item_id: int) -> list[CastMember]:
        """Recupere le casting ; liste vide et last_error en cas d'echec."""
        self._bind_loop()
        if not self._client.has_credentials:
            self.last_error.set_value(API_KEY_MISSING)
            return []

        result = await self._client.fetch_credits(item_id, self._language)
        if isinstance(result, Failure):
            message = describe_failure("cast", result)
            logger.error(message)
            self.last_error.set_value(message)
            return []

        self.last_error.set_value(None)
        logger.debug(f"Casting charge: {len(result)} membres")
        return result

    @staticmethod
    def _resolved(loop: asyncio.AbstractEventLoop, value: T) -> "asyncio.Future[T]":
        future = loop.create_future()
        future.set_result(value)
        return future

    # ------------------------------------------------------------------
    # Favoris
    # ------------------------------------------------------------------

    def add_to_favorites(self, item: CatalogItem) -> None:
        """Ajoute (ou remplace) un favori, sans attendre l'ecriture."""
        logger.debug(f"Ajout aux favoris: {item.title}")
        self._submit(f"ajout du favori {item.id}", self._store.upsert_favorite, item)

    def remove_from_favorites(self, item: CatalogItem) -> None:
        """Retire un favori, sans attendre l'ecriture."""
        logger.debug(f"Retrait des favoris: {item.title}")
        self._submit(f"retrait du favori {item.id}", self._store.remove_favorite, item.id)

    def is_in_favorites(self, item_id: int) -> bool:
        """Lecture bloquante : a appeler via in_background depuis la boucle."""
        return self._store.is_favorite(item_id)

    def get_favorite(self, item_id: int) -> Optional[CatalogItem]:
        """Lecture bloquante de la copie hors-ligne d'un favori."""
        return self._store.get_favorite(item_id)

    def list_favorites(self) -> list[CatalogItem]:
        """Lecture bloquante de tous les favoris tries par titre."""
        return self._store.list_favorites()

    async def refresh_favorites(self) -> list[CatalogItem]:
        """Recharge la liste des favoris depuis le store et la publie."""
        items = await self.in_background(self._store.list_favorites)
        self.favorites.set_value(items)
        return items

    # ------------------------------------------------------------------
    # Avis personnels
    # ------------------------------------------------------------------

    def save_user_review(self, review: PersonalReview) -> None:
        """
        Enregistre un avis, sans attendre l'ecriture.

        Raises:
            EmptyReviewError: Ni note ni commentaire
            ValueError: Note hors de l'intervalle 0-5
        """
        if review.is_empty:
            raise EmptyReviewError(review.movie_id)
        if not 0.0 <= review.rating <= 5.0:
            raise ValueError(f"Rating must be between 0 and 5, got {review.rating}")
        logger.debug(f"Enregistrement de l'avis du film {review.movie_id}")
        self._submit(f"avis du film {review.movie_id}", self._store.upsert_review, review)

    def get_user_review(self, movie_id: int) -> Optional[PersonalReview]:
        """Lecture bloquante de l'avis d'un film."""
        return self._store.get_review(movie_id)

    def delete_user_review(self, movie_id: int) -> None:
        """Supprime l'avis d'un film, sans attendre l'ecriture."""
        logger.debug(f"Suppression de l'avis du film {movie_id}")
        self._submit(f"suppression de l'avis {movie_id}", self._store.delete_review, movie_id)
