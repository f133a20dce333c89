"""
Custom exceptions untuk Token Auth API.
Semua custom exceptions harus inherit dari AuthAPIException.
"""

from typing import Optional, Dict, List


class AuthAPIException(Exception):
    """Base exception untuk semua custom exceptions di Token Auth API."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        errors: Optional[Dict[str, List[str]]] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        """
        Initialize exception.

        Args:
            message: Error message
            status_code: HTTP status code
            errors: Field-level error messages
            headers: Extra response headers
        """
        self.message = message
        self.status_code = status_code
        self.errors = errors
        self.headers = headers
        super().__init__(self.message)


class ValidationError(AuthAPIException):
    """Exception untuk input yang tidak valid (missing, malformed, duplicate)."""

    def __init__(
        self,
        message: str = "Validation Error",
        errors: Optional[Dict[str, List[str]]] = None
    ):
        super().__init__(message, status_code=422, errors=errors or {})


class AuthenticationError(AuthAPIException):
    """Exception untuk kredensial yang tidak cocok. Pesan sengaja generik."""

    def __init__(self, message: str = "Email & Password does not match"):
        super().__init__(message, status_code=401)


class UnauthorizedError(AuthAPIException):
    """Exception untuk bearer token yang tidak ada, tidak valid, atau sudah dicabut."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message,
            status_code=401,
            headers={"WWW-Authenticate": "Bearer"}
        )
