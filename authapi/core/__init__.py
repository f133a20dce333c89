"""
Core module untuk Token Auth API.
Berisi komponen inti aplikasi seperti konfigurasi, keamanan, exceptions, dan konstanta.
"""

from authapi.core.config import settings
from authapi.core.exceptions import (
    AuthAPIException,
    AuthenticationError,
    UnauthorizedError,
    ValidationError
)

__all__ = [
    "settings",
    "AuthAPIException",
    "AuthenticationError",
    "UnauthorizedError",
    "ValidationError"
]
