"""
Fonctions utilitaires partagees dans Media Explorer.

Ce module centralise :
- clean_title : nettoyage des titres renvoyes par l'API
- genre_by_id / genre_by_name : recherche dans le catalogue des genres
- join_genre_ids : construction de la valeur with_genres ("28,35")
"""

import unicodedata
from typing import Iterable, Optional, Union

from src.core.value_objects.catalog import Genre
from src.utils.constants import POPULAR_GENRES


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caracteres Unicode invisibles d'une chaine.

    Supprime les caracteres de controle et les marques directionnelles
    qui peuvent provenir des APIs (LRM, RLM, BOM, etc.).
    """
    return "".join(
        char for char in text if unicodedata.category(char) not in ("Cf", "Cc")
    )


def clean_title(title: Optional[str]) -> str:
    """Nettoie un titre : None devient "", caracteres invisibles et espaces retires."""
    if not title:
        return ""
    return strip_invisible_chars(title).strip()


def genre_by_id(genre_id: int) -> Optional[Genre]:
    """Retourne le genre correspondant a un ID TMDB, None si inconnu."""
    for genre in POPULAR_GENRES:
        if genre.id == genre_id:
            return genre
    return None


def genre_by_name(name: str) -> Optional[Genre]:
    """Retourne le genre correspondant a un nom (insensible a la casse)."""
    wanted = name.strip().casefold()
    for genre in POPULAR_GENRES:
        if genre.name.casefold() == wanted:
            return genre
    return None


def join_genre_ids(genre_ids: Union[str, Iterable[int], None]) -> str:
    """
    Normalise un ensemble d'IDs de genre en valeur with_genres.

    Accepte une chaine deja jointe ("28, 35") ou un iterable d'entiers.
    Les doublons sont retires en conservant l'ordre.

    Examples:
        >>> join_genre_ids([28, 35, 28])
        '28,35'
        >>> join_genre_ids(" 28 ,35 ")
        '28,35'
        >>> join_genre_ids(None)
        ''
    """
    if genre_ids is None:
        return ""
    if isinstance(genre_ids, str):
        parts = [part.strip() for part in genre_ids.split(",")]
    else:
        parts = [str(int(gid)) for gid in genre_ids]
    seen: list[str] = []
    for part in parts:
        if part and part not in seen:
            seen.append(part)
    return ",".join(seen)
