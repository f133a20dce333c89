"""
Models module untuk Token Auth API.
Berisi semua SQLAlchemy models untuk database.
"""

from authapi.models.user import User
from authapi.models.token import PersonalAccessToken

__all__ = [
    "User",
    "PersonalAccessToken"
]
