# app/models/__init__.py

from .genre import GenreModel
from .movie import MovieModel


__all__ = [
    "GenreModel",
    "MovieModel",
]
