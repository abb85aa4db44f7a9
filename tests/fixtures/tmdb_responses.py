"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB API for the popular, search,
discover, details and credits endpoints. These fixtures are used with respx
to mock httpx calls in tests.
"""

# GET /movie/popular?page=1&language=ru-RU
TMDB_POPULAR_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/s3TBrRGB1iav7gFOCNx3H31MoES.jpg",
            "genre_ids": [28, 12, 14, 878],
            "id": 19995,
            "original_language": "en",
            "original_title": "Avatar",
            "overview": "Бывший морпех Джейк Салли прикован к инвалидному креслу...",
            "popularity": 456.92,
            "poster_path": "/jRXYjXNq0Cs2TcJjLkki24MLp7u.jpg",
            "release_date": "2009-12-15",
            "title": "Аватар",
            "video": False,
            "vote_average": 7.6,
            "vote_count": 27000,
        },
        {
            "adult": False,
            "backdrop_path": "/8ZTVqvKDQ8emSGUEMjsS4yHAwrp.jpg",
            "genre_ids": [28, 878, 12],
            "id": 27205,
            "original_language": "en",
            "original_title": "Inception",
            "overview": "Кобб - талантливый вор...",
            "popularity": 98.1,
            "poster_path": "/9gk7adHYeDvHkCSEqAvQNLV5Uge.jpg",
            "release_date": "2010-07-15",
            "title": "Начало",
            "video": False,
            "vote_average": 8.4,
            "vote_count": 35000,
        },
    ],
    "total_pages": 500,
    "total_results": 10000,
}

# GET /movie/popular?page=2&language=ru-RU
TMDB_POPULAR_PAGE_2_RESPONSE = {
    "page": 2,
    "results": [
        {
            "adult": False,
            "genre_ids": [18, 80],
            "id": 238,
            "original_language": "en",
            "original_title": "The Godfather",
            "overview": "Криминальная сага...",
            "poster_path": "/3bhkrj58Vtu7enYsRolD1fZdja1.jpg",
            "release_date": "1972-03-14",
            "title": "Крёстный отец",
            "vote_average": 8.7,
        },
    ],
    "total_pages": 500,
    "total_results": 10000,
}

# GET /search/movie?query=Matrix&page=1&language=ru-RU
TMDB_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/fNG7i7RqMErkcqhohV2a6cV1Ehy.jpg",
            "genre_ids": [28, 878],
            "id": 603,
            "original_language": "en",
            "original_title": "The Matrix",
            "overview": "Жизнь Томаса Андерсона разделена на две части...",
            "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
            "release_date": "1999-03-30",
            "title": "Матрица",
            "vote_average": 8.2,
        },
    ],
    "total_pages": 1,
    "total_results": 1,
}

# Valid response without any result
TMDB_EMPTY_PAGE_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# GET /discover/movie?with_genres=28&primary_release_year=2010&sort_by=popularity.desc
TMDB_DISCOVER_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 27205,
            "title": "Начало",
            "genre_ids": [28, 878, 12],
            "release_date": "2010-07-15",
            "vote_average": 8.4,
            "poster_path": "/9gk7adHYeDvHkCSEqAvQNLV5Uge.jpg",
            "overview": "Кобб - талантливый вор...",
        },
    ],
    "total_pages": 12,
    "total_results": 230,
}

# Series-shaped entry: name / first_air_date instead of title / release_date
TMDB_TV_SHAPED_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 1396,
            "name": "Во все тяжкие",
            "first_air_date": "2008-01-20",
            "genre_ids": [18, 80],
            "vote_average": 8.9,
        },
    ],
    "total_pages": 1,
    "total_results": 1,
}

# GET /movie/27205?language=ru-RU
TMDB_MOVIE_DETAILS_RESPONSE = {
    "adult": False,
    "backdrop_path": "/8ZTVqvKDQ8emSGUEMjsS4yHAwrp.jpg",
    "budget": 160000000,
    "genres": [
        {"id": 28, "name": "боевик"},
        {"id": 878, "name": "фантастика"},
        {"id": 12, "name": "приключения"},
    ],
    "id": 27205,
    "imdb_id": "tt1375666",
    "original_language": "en",
    "original_title": "Inception",
    "overview": "Кобб - талантливый вор, лучший из лучших в опасном искусстве извлечения...",
    "poster_path": "/9gk7adHYeDvHkCSEqAvQNLV5Uge.jpg",
    "release_date": "2010-07-15",
    "runtime": 148,
    "title": "Начало",
    "vote_average": 8.4,
    "vote_count": 35000,
}

# GET /movie/27205/credits?language=ru-RU
TMDB_CREDITS_RESPONSE = {
    "id": 27205,
    "cast": [
        {
            "id": 6193,
            "name": "Leonardo DiCaprio",
            "character": "Dom Cobb",
            "profile_path": "/wo2hJpn04vbtmh0B9utCFdsQhxM.jpg",
            "order": 0,
        },
        {
            "id": 24045,
            "name": "Joseph Gordon-Levitt",
            "character": "Arthur",
            "profile_path": None,
            "order": 1,
        },
    ],
    "crew": [],
}

# 401 body returned when the API key is invalid
TMDB_UNAUTHORIZED_BODY = {
    "status_code": 7,
    "status_message": "Invalid API key: You must be granted a valid key.",
    "success": False,
}
