"""
Global error handling untuk Token Auth API.
Mengubah semua exception menjadi response JSON dengan status flag dan message.
"""

from typing import Callable, Optional, Dict, List
import logging

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from authapi.core.config import settings
from authapi.core.constants import ResponseMessage
from authapi.core.exceptions import AuthAPIException


# Configure logger
logger = logging.getLogger("authapi.error")


def error_response(
    status_code: int,
    message: str,
    errors: Optional[Dict[str, List[str]]] = None,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """
    Create standardized error response.

    Args:
        status_code: HTTP status code
        message: Error message
        errors: Field-level errors (validation only)
        headers: Extra response headers

    Returns:
        JSON error response {status: false, message[, errors]}
    """
    content = {
        "status": False,
        "message": message
    }
    if errors is not None:
        content["errors"] = errors

    return JSONResponse(
        status_code=status_code,
        content=content,
        headers=headers
    )


async def auth_api_exception_handler(request: Request, exc: AuthAPIException) -> JSONResponse:
    """Handle AuthAPIException yang di-raise oleh services dan dependencies."""
    logger.info(
        f"{request.method} {request.url.path} -> {exc.status_code} "
        f"{type(exc).__name__}: {exc.message}"
    )
    return error_response(
        status_code=exc.status_code,
        message=exc.message,
        errors=exc.errors,
        headers=exc.headers
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Global error handler middleware untuk unhandled exceptions.

    Features:
    - Consistent error response format
    - Error logging dengan stack traces
    - Hide internal error details in production
    """

    def __init__(self, app: ASGIApp, debug: Optional[bool] = None):
        """
        Initialize error handler middleware.

        Args:
            app: FastAPI/Starlette application
            debug: Debug mode (shows exception message)
        """
        super().__init__(app)
        self.debug = debug if debug is not None else settings.DEBUG

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request dengan error handling.

        Args:
            request: Incoming request
            call_next: Next middleware/endpoint

        Returns:
            Response atau error response
        """
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                {
                    "request_id": getattr(request.state, "request_id", "unknown"),
                    "method": request.method,
                    "path": request.url.path,
                    "error_type": type(exc).__name__,
                    "error_message": str(exc)
                },
                exc_info=True
            )
            message = str(exc) if self.debug else ResponseMessage.SERVER_ERROR
            return error_response(status_code=500, message=message)
