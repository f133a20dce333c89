"""
Request logging middleware untuk Token Auth API.
Logs all HTTP requests sebagai structured JSON untuk monitoring dan debugging.
"""

from typing import Callable, Optional, Dict, Any
import time
import json
import uuid
import logging
from datetime import datetime, timezone

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp


# Configure logger
logger = logging.getLogger("authapi.access")

REDACTED = "[REDACTED]"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Request/response logging middleware.

    Features:
    - Request ID generation (X-Request-ID header)
    - Request timing
    - Optional body logging dengan redaction untuk password dan token
    """

    def __init__(
        self,
        app: ASGIApp,
        log_request_body: bool = False,
        exclude_paths: Optional[list] = None,
        sensitive_fields: Optional[list] = None,
        max_body_size: int = 1024
    ):
        """
        Initialize logging middleware.

        Args:
            app: FastAPI/Starlette application
            log_request_body: Whether to log JSON request bodies
            exclude_paths: Paths to exclude from logging
            sensitive_fields: Fields to redact from logs
            max_body_size: Maximum body size to log (bytes)
        """
        super().__init__(app)
        self.log_request_body = log_request_body
        self.exclude_paths = exclude_paths or ["/health"]
        self.sensitive_fields = sensitive_fields or [
            "password", "token", "secret", "authorization"
        ]
        self.max_body_size = max_body_size

    def should_log_path(self, path: str) -> bool:
        """Check if path should be logged."""
        return not any(path.startswith(excluded) for excluded in self.exclude_paths)

    def redact_sensitive_data(self, data: Any) -> Any:
        """
        Redact sensitive fields secara rekursif.

        Args:
            data: Data to redact

        Returns:
            Redacted data
        """
        if isinstance(data, dict):
            redacted = {}
            for key, value in data.items():
                if any(sensitive in str(key).lower() for sensitive in self.sensitive_fields):
                    redacted[key] = REDACTED
                else:
                    redacted[key] = self.redact_sensitive_data(value)
            return redacted
        elif isinstance(data, list):
            return [self.redact_sensitive_data(item) for item in data]
        return data

    async def get_request_body(self, request: Request) -> Optional[str]:
        """
        Get JSON request body, sudah di-redact.
        Body non-JSON tidak di-log karena bisa berisi password dari form.
        """
        if "application/json" not in request.headers.get("content-type", ""):
            return None

        body = await request.body()
        if len(body) > self.max_body_size:
            return f"[Body too large: {len(body)} bytes]"

        try:
            return json.dumps(self.redact_sensitive_data(json.loads(body)))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return "[Unparseable JSON body]"

    def create_log_entry(
        self,
        request: Request,
        response: Optional[Response] = None,
        duration_ms: Optional[float] = None,
        request_body: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Create structured log entry.

        Args:
            request: Incoming request
            response: Response (if available)
            duration_ms: Request duration in milliseconds
            request_body: Redacted request body

        Returns:
            Log entry dictionary
        """
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            client_ip = forwarded_for.split(",")[0].strip()
        else:
            client_ip = request.client.host if request.client else "unknown"

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": getattr(request.state, "request_id", "unknown"),
            "method": request.method,
            "path": request.url.path,
            "client_ip": client_ip,
            "user_agent": request.headers.get("user-agent", "unknown"),
        }

        # Diisi oleh bearer dependency
        if hasattr(request.state, "user_id"):
            log_entry["user_id"] = request.state.user_id

        if request_body:
            log_entry["request_body"] = request_body

        if response is not None:
            log_entry["status_code"] = response.status_code

        if duration_ms is not None:
            log_entry["duration_ms"] = round(duration_ms, 2)

        return log_entry

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request with logging.

        Args:
            request: Incoming request
            call_next: Next middleware/endpoint

        Returns:
            Response
        """
        if not self.should_log_path(request.url.path):
            return await call_next(request)

        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        request_body = None
        if self.log_request_body and request.method in ["POST", "PUT", "PATCH"]:
            request_body = await self.get_request_body(request)

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        duration_ms = (time.time() - start_time) * 1000
        log_entry = self.create_log_entry(
            request=request,
            response=response,
            duration_ms=duration_ms,
            request_body=request_body
        )

        if response.status_code >= 500:
            logger.error(json.dumps(log_entry))
        elif response.status_code >= 400:
            logger.warning(json.dumps(log_entry))
        else:
            logger.info(json.dumps(log_entry))

        return response
