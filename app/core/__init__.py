# app/core/__init__.py

from .config import get_settings, Settings
from .exceptions import ErrorKind, ServiceError

__all__ = [
    "get_settings",
    "Settings",
    "ErrorKind",
    "ServiceError",
]
