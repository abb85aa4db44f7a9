"""
Controleur de navigation du catalogue.

CatalogBrowser gere les trois modes de requete de l'ecran principal
(populaires, recherche, filtres) et accumule les pages dans un tampon unique.

Regles:
- Changer de mode (ou de parametres) vide le tampon et repart a la page 1.
- Une reponse de page 1 remplace le tampon, les pages suivantes s'y ajoutent.
- Une seule requete de page suivante a la fois (drapeau in_flight).
- Une reponse arrivee apres un changement de mode est ignoree : chaque
  requete porte le numero de generation en vigueur lors de son emission.
- Le curseur de page n'avance que lorsqu'une reponse est appliquee avec succes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Union

from loguru import logger

from src.core.entities.media import CatalogItem
from src.services.catalog import CatalogPage, CatalogService
from src.utils.constants import (
    EMPTY_QUERY,
    NO_FILTER_RESULTS,
    NO_POPULAR_RESULTS,
    NO_SEARCH_RESULTS,
)
from src.utils.helpers import join_genre_ids
from src.utils.observable import LiveValue


class QueryMode(Enum):
    """Mode de requete actif."""

    IDLE = "idle"
    BROWSING = "browsing"
    SEARCHING = "searching"
    FILTERING = "filtering"


_EMPTY_MESSAGES = {
    QueryMode.BROWSING: NO_POPULAR_RESULTS,
    QueryMode.SEARCHING: NO_SEARCH_RESULTS,
    QueryMode.FILTERING: NO_FILTER_RESULTS,
}


@dataclass
class QueryState:
    """
    Etat de la requete en cours.

    Attributes:
        mode: Mode actif
        page: Derniere page appliquee avec succes (0 = rien charge)
        items: Tampon accumule des pages
        query: Texte de recherche (mode SEARCHING)
        genre_ids: IDs de genres joints par des virgules (mode FILTERING)
        year: Annee filtree (mode FILTERING)
        in_flight: Une requete de ce mode est en attente
    """

    mode: QueryMode = QueryMode.IDLE
    page: int = 0
    items: list[CatalogItem] = field(default_factory=list)
    query: str = ""
    genre_ids: str = ""
    year: Optional[int] = None
    in_flight: bool = False


class CatalogBrowser:
    """
    Controleur pagine Browse / Search / Filter.

    Sorties observables :
        items: Tampon accumule (nouvelle liste a chaque publication)
        is_loading: Une requete est en attente
        error: Dernier message d'erreur, efface au prochain succes

    Example:
        browser = CatalogBrowser(service)
        await browser.load_popular()
        await browser.load_next_page()
        await browser.search_movies("matrix")
    """

    def __init__(self, catalog: CatalogService) -> None:
        self._catalog = catalog
        self._state = QueryState()
        self._generation = 0

        self.items: LiveValue[list[CatalogItem]] = LiveValue([])
        self.is_loading: LiveValue[bool] = LiveValue(False)
        self.error: LiveValue[Optional[str]] = LiveValue(None)

    # ------------------------------------------------------------------
    # Etat courant (lecture seule)
    # ------------------------------------------------------------------

    @property
    def mode(self) -> QueryMode:
        return self._state.mode

    @property
    def current_page(self) -> int:
        return self._state.page

    @property
    def current_query(self) -> str:
        return self._state.query

    @property
    def selected_genres(self) -> str:
        return self._state.genre_ids

    @property
    def selected_year(self) -> Optional[int]:
        return self._state.year

    @property
    def is_searching(self) -> bool:
        return self._state.mode is QueryMode.SEARCHING

    @property
    def is_filtering(self) -> bool:
        return self._state.mode is QueryMode.FILTERING

    @property
    def in_flight(self) -> bool:
        return self._state.in_flight

    # ------------------------------------------------------------------
    # Actions utilisateur
    # ------------------------------------------------------------------

    async def load_popular(self, page: int = 1) -> None:
        """
        Charge les films populaires.

        page=1 (re)demarre le mode BROWSING. Une page superieure n'est
        acceptee que si elle suit la derniere page chargee en BROWSING ;
        depuis un autre mode, le chargement repart de la page 1.
        """
        state = self._state
        if page <= 1 or state.mode is not QueryMode.BROWSING or state.page == 0:
            self._enter(QueryMode.BROWSING)
            await self._request(1)
            return

        if state.in_flight:
            logger.debug(f"Page {page} ignoree: requete deja en cours")
            return
        if page != state.page + 1:
            logger.debug(f"Page {page} ignoree: la page suivante est {state.page + 1}")
            return
        await self._request(page)

    async def refresh(self) -> None:
        """Revient aux films populaires depuis la page 1."""
        await self.load_popular(1)

    async def search_movies(self, query: Optional[str]) -> None:
        """Demarre une recherche ; une requete vide est refusee."""
        query = query.strip() if query else ""
        if not query:
            self.reset_state()
            self.error.set_value(EMPTY_QUERY)
            return

        logger.info(f"Recherche: {query!r}")
        self._enter(QueryMode.SEARCHING, query=query)
        await self._request(1)

    async def apply_filters(
        self,
        genre_ids: Union[str, Iterable[int], None],
        year: Optional[int],
    ) -> None:
        """
        Applique un filtre genres + annee.

        Sans genre ni annee, le filtre est retire et le mode BROWSING reprend.
        """
        genres = join_genre_ids(genre_ids)
        if not genres and year is None:
            await self.clear_filters()
            return

        logger.info(f"Filtres: genres={genres!r}, annee={year}")
        self._enter(QueryMode.FILTERING, genre_ids=genres, year=year)
        await self._request(1)

    async def filter_by_genres(self, genre_ids: Union[str, Iterable[int], None]) -> None:
        """Change les genres en conservant l'annee du filtre actif."""
        year = self._state.year if self.is_filtering else None
        await self.apply_filters(genre_ids, year)

    async def filter_by_year(self, year: Optional[int]) -> None:
        """Change l'annee en conservant les genres du filtre actif."""
        genres = self._state.genre_ids if self.is_filtering else ""
        await self.apply_filters(genres, year)

    async def clear_filters(self) -> None:
        """Retire les filtres et recharge les populaires."""
        await self.load_popular(1)

    async def load_next_page(self) -> None:
        """
        Charge la page suivante du mode actif.

        Sans effet si une requete est en cours ou si aucune page n'a
        encore ete chargee.
        """
        state = self._state
        if state.in_flight:
            logger.debug("Page suivante ignoree: requete deja en cours")
            return
        if state.mode is QueryMode.IDLE or state.page == 0:
            return
        await self._request(state.page + 1)

    def reset_state(self) -> None:
        """Abandonne le mode actif, ses parametres et le tampon."""
        self._generation += 1
        self._state = QueryState()
        self.items.set_value([])
        self.is_loading.set_value(False)
        self.error.set_value(None)

    # ------------------------------------------------------------------
    # Mecanique interne
    # ------------------------------------------------------------------

    def _enter(
        self,
        mode: QueryMode,
        query: str = "",
        genre_ids: str = "",
        year: Optional[int] = None,
    ) -> None:
        """Active un mode : nouvelle generation, parametres remplaces, tampon vide."""
        self._generation += 1
        self._state = QueryState(mode=mode, query=query, genre_ids=genre_ids, year=year)
        self.items.set_value([])

    async def _request(self, page: int) -> None:
        state = self._state
        generation = self._generation
        state.in_flight = True
        self.is_loading.set_value(True)
        try:
            result = await self._fetch(state, page)
            if generation != self._generation:
                logger.debug(
                    f"Reponse {state.mode.value} page {page} ignoree: mode change entre-temps"
                )
                return
            self._apply(state, page, result)
        finally:
            if generation == self._generation:
                state.in_flight = False
                self.is_loading.set_value(False)

    async def _fetch(self, state: QueryState, page: int) -> CatalogPage:
        if state.mode is QueryMode.SEARCHING:
            return await self._catalog.search(state.query, page)
        if state.mode is QueryMode.FILTERING:
            return await self._catalog.discover(page, state.genre_ids, state.year)
        return await self._catalog.get_popular(page)

    def _apply(self, state: QueryState, page: int, result: CatalogPage) -> None:
        """Applique une reponse au tampon et publie le resultat."""
        if result.failed:
            # page 1 : le tampon est deja vide ; page > 1 : tampon et curseur conserves
            if page == 1:
                state.items = []
                self.items.set_value([])
            self.error.set_value(result.error)
            return

        if not result.items:
            if page == 1:
                state.items = []
                self.items.set_value([])
                self.error.set_value(_EMPTY_MESSAGES[state.mode])
            else:
                logger.debug(f"Fin de liste atteinte a la page {page - 1}")
                self.error.set_value(None)
            return

        if page == 1:
            state.items = list(result.items)
        else:
            state.items.extend(result.items)
        state.page = page
        self.error.set_value(None)
        self.items.set_value(list(state.items))
        logger.debug(f"{state.mode.value}: page {page}, {len(state.items)} elements")
