"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB API for the endpoints relayed
by Movie Explorer (trending, search, discover, details, genres).
These fixtures are used with respx to mock httpx calls in tests.
"""

INCEPTION = {
    "adult": False,
    "backdrop_path": "/8ZTVqvKDQ8emSGUEMjsS4yHAwrp.jpg",
    "genre_ids": [28, 878, 12],
    "id": 27205,
    "original_language": "en",
    "original_title": "Inception",
    "overview": "Cobb, a skilled thief who commits corporate espionage...",
    "popularity": 92.3,
    "poster_path": "/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
    "release_date": "2010-07-15",
    "title": "Inception",
    "video": False,
    "vote_average": 8.4,
    "vote_count": 36000,
}

INTERSTELLAR = {
    "adult": False,
    "backdrop_path": "/xJHokMbljvjADYdit5fK5VQsXEG.jpg",
    "genre_ids": [12, 18, 878],
    "id": 157336,
    "original_language": "en",
    "original_title": "Interstellar",
    "overview": "The adventures of a group of explorers...",
    "popularity": 150.7,
    "poster_path": "/gEU2QniE6E77NI6lCU6MxlNBvIx.jpg",
    "release_date": "2014-11-05",
    "title": "Interstellar",
    "video": False,
    "vote_average": 8.4,
    "vote_count": 34000,
}

# Pas d'image de fond : doit etre ecarte par le filtre d'affichage
INCEPTION_DOCUMENTARY = {
    "adult": False,
    "backdrop_path": None,
    "genre_ids": [99],
    "id": 613092,
    "original_language": "en",
    "original_title": "Inception: The Cobol Job",
    "overview": "Prequel comic...",
    "popularity": 4.1,
    "poster_path": "/sNxqwtyHMNQwKWoFYDqcYTui5Ok.jpg",
    "release_date": "2010-12-07",
    "title": "Inception: The Cobol Job",
    "video": True,
    "vote_average": 7.0,
    "vote_count": 200,
}

# Sans date de sortie ni popularite
INCEPTION_FAN_EDIT = {
    "adult": False,
    "backdrop_path": "/fanedit-backdrop.jpg",
    "genre_ids": [28],
    "id": 999001,
    "original_language": "en",
    "original_title": "Inception Fan Edit",
    "overview": "",
    "poster_path": "/fanedit-poster.jpg",
    "release_date": "",
    "title": "Inception Fan Edit",
    "video": False,
    "vote_count": 0,
}

# GET /trending/movie/week
TMDB_TRENDING_RESPONSE = {
    "page": 1,
    "results": [INTERSTELLAR, INCEPTION_DOCUMENTARY, INCEPTION],
    "total_pages": 500,
    "total_results": 10000,
}

# GET /search/movie?query=Inception
TMDB_SEARCH_RESPONSE = {
    "page": 1,
    "results": [INCEPTION, INCEPTION_DOCUMENTARY, INCEPTION_FAN_EDIT],
    "total_pages": 3,
    "total_results": 52,
}

TMDB_SEARCH_EMPTY_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# GET /discover/movie?with_genres=878&sort_by=popularity.desc
TMDB_DISCOVER_RESPONSE = {
    "page": 2,
    "results": [INTERSTELLAR, INCEPTION_DOCUMENTARY, INCEPTION],
    "total_pages": 120,
    "total_results": 2390,
}

# GET /movie/27205?append_to_response=credits,videos
TMDB_MOVIE_DETAILS_RESPONSE = {
    "adult": False,
    "backdrop_path": "/8ZTVqvKDQ8emSGUEMjsS4yHAwrp.jpg",
    "budget": 160000000,
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 878, "name": "Science Fiction"},
        {"id": 12, "name": "Adventure"},
    ],
    "id": 27205,
    "imdb_id": "tt1375666",
    "original_language": "en",
    "original_title": "Inception",
    "overview": "Cobb, a skilled thief who commits corporate espionage...",
    "popularity": 92.3,
    "poster_path": "/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
    "release_date": "2010-07-15",
    "runtime": 148,
    "status": "Released",
    "tagline": "Your mind is the scene of the crime.",
    "title": "Inception",
    "vote_average": 8.4,
    "vote_count": 36000,
    "credits": {
        "cast": [
            {"id": 6193, "name": "Leonardo DiCaprio", "character": "Cobb"},
            {"id": 24045, "name": "Joseph Gordon-Levitt", "character": "Arthur"},
        ],
        "crew": [
            {"id": 525, "name": "Christopher Nolan", "job": "Director"},
        ],
    },
    "videos": {
        "results": [
            {"key": "YoHD9XEInc0", "site": "YouTube", "type": "Trailer", "name": "Inception Trailer"},
        ],
    },
}

TMDB_NOT_FOUND_RESPONSE = {
    "success": False,
    "status_code": 34,
    "status_message": "The resource you requested could not be found.",
}

# GET /genre/movie/list
TMDB_GENRES_RESPONSE = {
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 12, "name": "Adventure"},
        {"id": 18, "name": "Drama"},
        {"id": 99, "name": "Documentary"},
        {"id": 878, "name": "Science Fiction"},
    ],
}
