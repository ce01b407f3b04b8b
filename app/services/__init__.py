# app/services/__init__.py

from .movie_service import MovieService
from .genre_service import GenreService
from .poster import PosterFile, encode_poster, validate_poster

__all__ = ["MovieService", "GenreService", "PosterFile", "encode_poster", "validate_poster"]
