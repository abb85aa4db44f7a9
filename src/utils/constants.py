"""
Constantes globales pour Media Explorer.

Ce module contient :
- Les genres populaires du catalogue TMDB (ID -> nom affiche)
- Les parametres par defaut des requetes distantes
- Les messages d'erreur exposes a la couche de rendu
"""

from src.core.value_objects.catalog import Genre

# Genres proposes dans le filtre, avec leurs IDs TMDB
POPULAR_GENRES: tuple[Genre, ...] = (
    Genre(28, "Action"),
    Genre(12, "Adventure"),
    Genre(16, "Animation"),
    Genre(35, "Comedy"),
    Genre(80, "Crime"),
    Genre(18, "Drama"),
    Genre(10751, "Family"),
    Genre(14, "Fantasy"),
    Genre(27, "Horror"),
    Genre(9648, "Mystery"),
    Genre(10749, "Romance"),
    Genre(878, "Science Fiction"),
    Genre(53, "Thriller"),
    Genre(10752, "War"),
    Genre(37, "Western"),
)

TMDB_GENRE_MAPPING: dict[int, str] = {genre.id: genre.name for genre in POPULAR_GENRES}

# Longueur maximale de l'extrait de corps conserve pour une erreur HTTP
ERROR_BODY_EXCERPT = 200

# Messages d'erreur (la formulation distingue reseau et hors-ligne)
API_KEY_MISSING = "API key missing"
OFFLINE_UNAVAILABLE = (
    "Movie is not available offline. Add it to favorites for offline access."
)
DETAILS_LOAD_FAILED = "Failed to load movie details"
EMPTY_QUERY = "Please enter a search query"
NO_POPULAR_RESULTS = "No movies received from API"
NO_SEARCH_RESULTS = "No results found"
NO_FILTER_RESULTS = "No movies found with selected filters"
