"""
Interfaces ports pour le client catalogue distant.

Le port definit les operations one-shot vers le service catalogue (TMDB).
Chaque operation se resout exactement une fois, soit avec une valeur typee,
soit avec une Failure : aucune exception ne traverse la frontiere du client.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from src.core.entities.media import CatalogItem
from src.core.value_objects.catalog import CastMember, ItemPage


class FailureKind(Enum):
    """Nature d'un echec d'appel distant.

    Valeurs:
        TRANSPORT: Aucune reponse n'a ete recue (DNS, connexion, timeout)
        HTTP: Reponse recue avec un statut hors 2xx
        DECODE: Reponse 2xx dont le contenu ne correspond pas au format attendu
    """

    TRANSPORT = "transport"
    HTTP = "http"
    DECODE = "decode"


@dataclass(frozen=True)
class Failure:
    """
    Echec d'un appel au catalogue distant.

    Attributs :
        kind : Nature de l'echec
        detail : Description lisible (message d'exception, URL)
        status_code : Code HTTP (uniquement pour HTTP)
        body : Extrait du corps de reponse (uniquement pour HTTP)
    """

    kind: FailureKind
    detail: str
    status_code: Optional[int] = None
    body: str = ""


# Alias des resultats possibles par operation
PageResult = Union[ItemPage, Failure]
DetailsResult = Union[CatalogItem, Failure]
CreditsResult = Union[list[CastMember], Failure]

DEFAULT_SORT_KEY = "popularity.desc"


class ICatalogClient(ABC):
    """
    Interface du service catalogue distant.

    Pas de retry, pas de cache : un appel = une requete = une resolution.
    """

    @property
    @abstractmethod
    def has_credentials(self) -> bool:
        """True si une cle API est configuree."""
        ...

    @abstractmethod
    async def fetch_popular(self, page: int, language: str) -> PageResult:
        """Recupere une page des elements populaires (page >= 1)."""
        ...

    @abstractmethod
    async def search(self, query: str, page: int, language: str) -> PageResult:
        """Recherche plein texte ; query doit etre non vide."""
        ...

    @abstractmethod
    async def discover(
        self,
        page: int,
        genre_ids: str,
        year: Optional[int],
        sort_key: str,
        language: str,
    ) -> PageResult:
        """
        Decouverte filtree.

        Args :
            page : Numero de page (>= 1)
            genre_ids : IDs de genre joints par des virgules ("" = pas de filtre)
            year : Annee de sortie optionnelle
            sort_key : Cle de tri (ex: "popularity.desc")
            language : Code langue (ex: "ru-RU")
        """
        ...

    @abstractmethod
    async def fetch_details(self, item_id: int, language: str) -> DetailsResult:
        """Recupere la fiche complete d'un element."""
        ...

    @abstractmethod
    async def fetch_credits(self, item_id: int, language: str) -> CreditsResult:
        """Recupere le casting d'un element."""
        ...

    async def close(self) -> None:
        """Libere les ressources reseau (no-op par defaut)."""
        return None
