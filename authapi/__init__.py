"""
Token Auth API - minimal authentication API dengan opaque bearer tokens.

This package provides:
- User registration dengan argon2 password hashing
- Login yang menerbitkan personal access token
- Logout yang mencabut semua token milik user
- Current user endpoint untuk bearer-authenticated requests

Built with FastAPI dan SQLAlchemy (PostgreSQL atau SQLite).
"""

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__license__",
]
