# app/services/poster.py

import base64
import os
from dataclasses import dataclass
from typing import Optional
from app.core.config import Settings, get_settings
from app.core.exceptions import ErrorKind


@dataclass
class PosterFile:
    """Uploaded poster read fully into memory"""

    filename: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


def poster_extension(filename: str) -> str:
    """Lowercased extension including the dot, '' when there is none"""
    return os.path.splitext(filename or "")[1].lower()


def encode_poster(content: Optional[bytes]) -> Optional[str]:
    """Stored poster bytes as base64 text for JSON responses"""
    if content is None:
        return None
    return base64.b64encode(content).decode("ascii")


def validate_poster(
    poster: Optional[PosterFile], required: bool, settings: Optional[Settings] = None
) -> Optional[ErrorKind]:
    """Check presence, extension and size; None means the poster is acceptable"""
    settings = settings or get_settings()

    if poster is None:
        return ErrorKind.POSTER_REQUIRED if required else None

    if poster_extension(poster.filename) not in settings.poster_allowed_extensions:
        return ErrorKind.POSTER_EXTENSION

    if poster.size > settings.poster_max_size:
        return ErrorKind.POSTER_TOO_LARGE

    return None
