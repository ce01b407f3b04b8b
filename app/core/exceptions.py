# app/core/exceptions.py

from enum import Enum
from fastapi import status


class ErrorKind(Enum):
    """Client-visible failures: (HTTP status, message template)"""

    POSTER_REQUIRED = (status.HTTP_400_BAD_REQUEST, "poster is required!")
    POSTER_EXTENSION = (status.HTTP_400_BAD_REQUEST, "only .png or .jpg images are allowed!")
    POSTER_TOO_LARGE = (status.HTTP_400_BAD_REQUEST, "max allowed size for poster is 1MB!")
    INVALID_GENRE_ON_CREATE = (status.HTTP_400_BAD_REQUEST, "Invalid Genre Id!")
    INVALID_GENRE_ON_UPDATE = (status.HTTP_400_BAD_REQUEST, "Invalid genre ID!")
    MOVIE_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "Not Found")
    MOVIE_NOT_FOUND_ON_UPDATE = (status.HTTP_404_NOT_FOUND, "no movies found with ID! {id}")
    MOVIE_NOT_FOUND_ON_DELETE = (status.HTTP_404_NOT_FOUND, "No Movie Was Found {id}")
    GENRE_NOT_FOUND = (status.HTTP_404_NOT_FOUND, "No Genre Was Found {id}")
    GENRE_IN_USE = (status.HTTP_400_BAD_REQUEST, "genre {id} is still used by movies!")
    GENRE_IDS_EXHAUSTED = (status.HTTP_400_BAD_REQUEST, "no genre IDs left, the limit is {limit}!")

    @property
    def status_code(self) -> int:
        return self.value[0]

    def message(self, **params) -> str:
        return self.value[1].format(**params)


class ServiceError(Exception):
    """Raised by services for an ErrorKind; routers map it to an HTTP response"""

    def __init__(self, kind: ErrorKind, **params):
        self.kind = kind
        self.status_code = kind.status_code
        self.detail = kind.message(**params)
        super().__init__(self.detail)
