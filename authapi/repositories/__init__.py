"""
Repositories module untuk Token Auth API.
Memisahkan akses database dari business logic di services.
"""

from authapi.repositories.user import UserRepository
from authapi.repositories.token import TokenRepository

__all__ = [
    "UserRepository",
    "TokenRepository"
]
