"""
Middleware package untuk Token Auth API.
"""

from authapi.middleware.logging import LoggingMiddleware
from authapi.middleware.error_handler import (
    ErrorHandlerMiddleware,
    auth_api_exception_handler,
    error_response
)

__all__ = [
    "LoggingMiddleware",
    "ErrorHandlerMiddleware",
    "auth_api_exception_handler",
    "error_response"
]
