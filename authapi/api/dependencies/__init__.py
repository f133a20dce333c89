"""
API dependencies module.
Berisi reusable dependencies untuk FastAPI endpoints.
"""

from authapi.api.dependencies.auth import get_current_user
from authapi.api.dependencies.database import get_db
from authapi.api.dependencies.payload import get_payload

__all__ = [
    "get_current_user",
    "get_db",
    "get_payload"
]
