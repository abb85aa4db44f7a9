"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- CastMember : Membre du casting d'un film (transitoire)
- ItemPage : Page de resultats du catalogue distant
- Genre : Genre du catalogue (id TMDB + nom)
"""

from src.core.value_objects.catalog import CastMember, Genre, ItemPage

__all__ = [
    "CastMember",
    "Genre",
    "ItemPage",
]
