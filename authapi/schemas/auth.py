"""
Authentication schemas untuk Token Auth API.
Menangani validasi untuk register dan login, serta bentuk response-nya.
"""

from typing import Optional, Annotated

from pydantic import BaseModel, ConfigDict, Field, EmailStr, field_validator

from authapi.core.config import settings
from authapi.core.constants import STRING_MAX_LENGTH, TOKEN_TYPE
from authapi.schemas.user import UserResponse


class RegisterRequest(BaseModel):
    """
    Registration request schema.
    Dikirim sebagai multipart form, urlencoded form, atau JSON.
    """
    name: Annotated[str, Field(min_length=1, max_length=STRING_MAX_LENGTH)]
    email: Annotated[str, Field(min_length=1, max_length=STRING_MAX_LENGTH)]
    password: Annotated[str, Field(min_length=settings.PASSWORD_MIN_LENGTH)]
    age: int
    city: Annotated[str, Field(min_length=1, max_length=settings.CITY_MAX_LENGTH)]

    @field_validator('name', 'email', 'city', mode='before')
    def trim_strings(cls, v):
        """Trim whitespace; password sengaja tidak di-trim."""
        return v.strip() if isinstance(v, str) else v

    @field_validator('email')
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return v.lower()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "email": "john@example.com",
                "password": "password123",
                "age": 25,
                "city": "New York"
            }
        }
    )


class LoginRequest(BaseModel):
    """
    Login request schema.
    """
    email: EmailStr
    password: Annotated[str, Field(min_length=1)]

    @field_validator('email', mode='before')
    def trim_email(cls, v):
        """Trim whitespace sebelum validasi format email."""
        return v.strip() if isinstance(v, str) else v

    @field_validator('email')
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return v.lower()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "john@example.com",
                "password": "password123"
            }
        }
    )


class StatusResponse(BaseModel):
    """Envelope dasar untuk semua response: status flag dan pesan."""
    status: bool = Field(..., description="True jika request berhasil")
    message: str = Field(..., description="Human-readable message")


class RegisterResponse(StatusResponse):
    """Response registrasi."""
    user: UserResponse


class LoginResponse(StatusResponse):
    """Response login dengan plain text bearer token."""
    token: str = Field(..., description="Plain text bearer token, format '{id}|{secret}'")
    token_type: str = Field(TOKEN_TYPE, description="Token type (always 'bearer')")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": True,
                "message": "User Logged in Successfully",
                "token": "1|bcnoAAjS9PGkE5aDkxydvr7UpcCAdLr4xGQUymrh",
                "token_type": "bearer"
            }
        }
    )


class ErrorResponse(StatusResponse):
    """Error response; errors hanya ada untuk validation errors."""
    errors: Optional[dict] = Field(None, description="Field-level error messages")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": False,
                "message": "Validation Error",
                "errors": {
                    "email": ["The email has already been taken."]
                }
            }
        }
    )
