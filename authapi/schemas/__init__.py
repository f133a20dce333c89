"""
Schemas module untuk Token Auth API.
Berisi semua Pydantic schemas untuk request/response validation.
"""

from authapi.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    StatusResponse,
    RegisterResponse,
    LoginResponse,
    ErrorResponse
)
from authapi.schemas.user import UserResponse

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "StatusResponse",
    "RegisterResponse",
    "LoginResponse",
    "ErrorResponse",
    "UserResponse"
]
