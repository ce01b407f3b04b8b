# app/schemas/__init__.py

from .movie import Movie, MovieDetails, MovieForm
from .genre import Genre, GenreCreate

__all__ = [
    "Movie",
    "MovieDetails",
    "MovieForm",
    "Genre",
    "GenreCreate",
]
