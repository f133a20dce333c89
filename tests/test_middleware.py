"""
Tests for logging dan error handler middleware.
"""

import json
import logging

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from authapi.core.config import settings
from authapi.core.exceptions import AuthAPIException, ValidationError
from authapi.middleware.error_handler import ErrorHandlerMiddleware, auth_api_exception_handler
from authapi.middleware.logging import LoggingMiddleware, REDACTED

PREFIX = settings.API_PREFIX


def build_app(debug: bool = False) -> FastAPI:
    """App kecil dengan endpoint yang selalu gagal."""
    app = FastAPI()
    app.add_middleware(ErrorHandlerMiddleware, debug=debug)
    app.add_middleware(LoggingMiddleware, log_request_body=True)
    app.add_exception_handler(AuthAPIException, auth_api_exception_handler)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database exploded")

    @app.post("/invalid")
    async def invalid():
        raise ValidationError(errors={"name": ["The name field is required."]})

    return app


@pytest.mark.unit
class TestRedaction:
    """Test redaction untuk access log."""

    def test_redacts_sensitive_fields(self):
        middleware = LoggingMiddleware(app=FastAPI())
        data = {
            "email": "john@example.com",
            "password": "password123",
            "nested": {"token": "1|abc", "Authorization": "Bearer 1|abc"},
            "items": [{"secret": "x", "city": "Jakarta"}]
        }

        redacted = middleware.redact_sensitive_data(data)

        assert redacted["email"] == "john@example.com"
        assert redacted["password"] == REDACTED
        assert redacted["nested"] == {"token": REDACTED, "Authorization": REDACTED}
        assert redacted["items"] == [{"secret": REDACTED, "city": "Jakarta"}]

    def test_excluded_paths(self):
        middleware = LoggingMiddleware(app=FastAPI())

        assert middleware.should_log_path("/health") is False
        assert middleware.should_log_path("/health/ready") is False
        assert middleware.should_log_path("/login") is True


@pytest.mark.asyncio
class TestMiddleware:
    """Test middleware lewat HTTP."""

    async def test_unhandled_exception_returns_server_error(self):
        transport = ASGITransport(app=build_app(debug=False))
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"status": False, "message": "Server Error"}

    async def test_unhandled_exception_debug_message(self):
        transport = ASGITransport(app=build_app(debug=True))
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/boom")

        assert response.status_code == 500
        assert response.json()["message"] == "database exploded"

    async def test_auth_api_exception_rendered(self):
        transport = ASGITransport(app=build_app())
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/invalid")

        assert response.status_code == 422
        assert response.json() == {
            "status": False,
            "message": "Validation Error",
            "errors": {"name": ["The name field is required."]}
        }

    async def test_request_id_header(self, async_client: AsyncClient):
        response = await async_client.post(f"{PREFIX}/login", json={})

        assert response.headers.get("X-Request-ID")

    async def test_access_log_redacts_password(self, caplog):
        caplog.set_level(logging.INFO, logger="authapi.access")
        app = build_app()

        @app.post("/echo")
        async def echo():
            return {"ok": True}

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            await client.post("/echo", json={"email": "john@example.com", "password": "password123"})

        records = [r for r in caplog.records if r.name == "authapi.access"]
        assert records
        entry = json.loads(records[-1].getMessage())
        assert entry["path"] == "/echo"
        assert entry["status_code"] == 200
        assert "password123" not in entry["request_body"]
        assert json.loads(entry["request_body"])["password"] == REDACTED
