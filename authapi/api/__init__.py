"""
API module untuk Token Auth API.
Berisi endpoints dan dependencies untuk API.
"""

from authapi.api.routes import auth_router, health_router

__all__ = ["auth_router", "health_router"]
