"""
Services module untuk Token Auth API.
Berisi business logic layer yang terpisah dari presentation dan data layers.
"""

from authapi.services.auth import AuthService
from authapi.services.user import UserService
from authapi.services.token import TokenService

__all__ = [
    "AuthService",
    "UserService",
    "TokenService"
]
