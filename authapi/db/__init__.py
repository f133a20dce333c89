"""
Database module untuk Token Auth API.
Berisi base model, session management, dan konfigurasi database.
"""

from authapi.db.base import Base, BaseModel
from authapi.db.session import (
    engine,
    SessionLocal,
    init_db,
    close_db
)

__all__ = [
    "Base",
    "BaseModel",
    "engine",
    "SessionLocal",
    "init_db",
    "close_db"
]
