"""
Client TMDB pour le catalogue distant de Media Explorer.

Implemente l'interface ICatalogClient pour TMDB (The Movie Database).
Chaque appel emet exactement une requete et se resout une seule fois :
les erreurs de transport, les statuts non 2xx et les payloads invalides
sont convertis en Failure, jamais leves.

Usage:
    client = TMDBCatalogClient(api_key="your_key")
    page = await client.fetch_popular(1, "ru-RU")
    if isinstance(page, Failure):
        print(page.kind, page.detail)
    await client.close()
"""

from typing import Any, Optional, TypeVar, Union

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from src.adapters.api.dto import CreditsResponse, MovieDTO, MovieResponse
from src.core.entities.media import CatalogItem
from src.core.ports.api_clients import (
    CreditsResult,
    DetailsResult,
    Failure,
    FailureKind,
    ICatalogClient,
    PageResult,
)
from src.core.value_objects.catalog import CastMember, ItemPage
from src.utils.constants import ERROR_BODY_EXCERPT, TMDB_GENRE_MAPPING
from src.utils.helpers import clean_title

ModelT = TypeVar("ModelT", bound=BaseModel)


class TMDBCatalogClient(ICatalogClient):
    """
    Client API TMDB pour le catalogue de films.

    Implemente ICatalogClient avec:
    - Liste des films populaires, recherche et decouverte filtree (paginees)
    - Fiche detail et casting d'un film
    - Conversion systematique des erreurs en Failure (aucun retry, aucun cache)

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
        TMDB_IMAGE_BASE_URL: URL de base pour les images (posters)

    Example:
        client = TMDBCatalogClient(api_key="xxx")

        result = await client.search("Matrix", page=1, language="en-US")
        if not isinstance(result, Failure):
            for item in result.items:
                print(f"{item.title} ({item.year})")

        await client.close()
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = TMDB_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API v3 ou Read Access Token v4 (None si non configuree)
            base_url: URL de base du service catalogue
            timeout: Delai maximum par requete en secondes
        """
        self._api_key = api_key.strip() if api_key else None
        self._base_url = base_url
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer

        Returns:
            httpx.AsyncClient configure pour l'API TMDB
        """
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            params = {}

            if self._api_key:
                if len(self._api_key) > 40:
                    headers["Authorization"] = f"Bearer {self._api_key}"
                else:
                    params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    @property
    def has_credentials(self) -> bool:
        return bool(self._api_key)

    async def fetch_popular(self, page: int, language: str) -> PageResult:
        """Recupere une page de films populaires."""
        return await self._fetch_page(
            "/movie/popular", {"page": page, "language": language}
        )

    async def search(self, query: str, page: int, language: str) -> PageResult:
        """Recherche des films par titre."""
        return await self._fetch_page(
            "/search/movie", {"query": query, "page": page, "language": language}
        )

    async def discover(
        self,
        page: int,
        genre_ids: str,
        year: Optional[int],
        sort_key: str,
        language: str,
    ) -> PageResult:
        """
        Decouverte de films filtree par genres et annee.

        with_genres et primary_release_year sont omis quand ils sont vides.
        """
        params: dict[str, Any] = {
            "page": page,
            "sort_by": sort_key,
            "language": language,
        }
        if genre_ids:
            params["with_genres"] = genre_ids
        if year is not None:
            params["primary_release_year"] = year
        return await self._fetch_page("/discover/movie", params)

    async def fetch_details(self, item_id: int, language: str) -> DetailsResult:
        """Recupere la fiche detail d'un film, genres et backdrop inclus."""
        response = await self._get(f"/movie/{item_id}", {"language": language})
        if isinstance(response, Failure):
            return response

        dto = self._decode(response, MovieDTO)
        if isinstance(dto, Failure):
            return dto
        return self._to_item(dto)

    async def fetch_credits(self, item_id: int, language: str) -> CreditsResult:
        """Recupere le casting d'un film (liste vide si absent du payload)."""
        response = await self._get(f"/movie/{item_id}/credits", {"language": language})
        if isinstance(response, Failure):
            return response

        credits = self._decode(response, CreditsResponse)
        if isinstance(credits, Failure):
            return credits

        return [
            CastMember(
                id=member.id,
                name=member.name or "",
                character=member.character or "",
                profile_path=member.profile_path,
            )
            for member in credits.cast or []
        ]

    async def _fetch_page(self, path: str, params: dict[str, Any]) -> PageResult:
        """Execute une requete paginee et convertit les resultats."""
        response = await self._get(path, params)
        if isinstance(response, Failure):
            return response

        decoded = self._decode(response, MovieResponse)
        if isinstance(decoded, Failure):
            return decoded

        if decoded.results is None:
            logger.warning(f"Reponse sans champ results: {path}")

        return ItemPage(
            items=tuple(self._to_item(dto) for dto in decoded.results or []),
            page=decoded.page,
            total_pages=decoded.total_pages,
            total_results=decoded.total_results,
        )

    async def _get(
        self, path: str, params: dict[str, Any]
    ) -> Union[httpx.Response, Failure]:
        """
        Emet une requete GET unique.

        Returns:
            La reponse 2xx, ou une Failure TRANSPORT / HTTP
        """
        client = self._get_client()
        try:
            response = await client.get(path, params=params)
        except httpx.HTTPError as e:
            url = e.request.url if _has_request(e) else path
            logger.warning(f"Echec transport {path}: {e}")
            return Failure(
                kind=FailureKind.TRANSPORT,
                detail=f"{str(e) or type(e).__name__} | URL: {url}",
            )

        logger.debug(f"GET {path} -> {response.status_code}")
        if not response.is_success:
            body = response.text[:ERROR_BODY_EXCERPT] if response.text else "No error body"
            return Failure(
                kind=FailureKind.HTTP,
                detail=response.reason_phrase,
                status_code=response.status_code,
                body=body,
            )
        return response

    @staticmethod
    def _decode(
        response: httpx.Response, model: type[ModelT]
    ) -> Union[ModelT, Failure]:
        """Valide le corps JSON contre un modele DTO."""
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            # ValueError couvre JSONDecodeError et UnicodeDecodeError (corps non UTF-8)
            logger.warning(f"Payload invalide pour {model.__name__}: {e}")
            return Failure(kind=FailureKind.DECODE, detail=str(e))

    @staticmethod
    def _to_item(dto: MovieDTO) -> CatalogItem:
        """
        Convertit un DTO en CatalogItem.

        title retombe sur name et release_date sur first_air_date (series).
        Les genres viennent des objets genres (detail) ou des genre_ids (listes).
        """
        if dto.genres:
            genres = tuple(g.name or TMDB_GENRE_MAPPING.get(g.id, "") for g in dto.genres)
        else:
            genres = tuple(
                TMDB_GENRE_MAPPING[gid] for gid in dto.genre_ids if gid in TMDB_GENRE_MAPPING
            )

        return CatalogItem(
            id=dto.id,
            title=clean_title(dto.title or dto.name),
            overview=dto.overview or "",
            poster_path=dto.poster_path,
            release_date=dto.release_date or dto.first_air_date or "",
            vote_average=float(dto.vote_average or 0.0),
            backdrop_path=dto.backdrop_path,
            genres=tuple(g for g in genres if g),
            original_language=dto.original_language or "",
        )

    def poster_url(self, poster_path: Optional[str]) -> Optional[str]:
        """Construit l'URL complete d'un poster, None si absent."""
        return f"{self.TMDB_IMAGE_BASE_URL}{poster_path}" if poster_path else None

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None


def _has_request(error: httpx.HTTPError) -> bool:
    """httpx.HTTPError.request leve RuntimeError quand la requete n'est pas attachee."""
    try:
        error.request
    except RuntimeError:
        return False
    return True
