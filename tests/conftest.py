"""
Pytest configuration and fixtures for Token Auth API tests.
"""

import os

# Override settings for testing, sebelum authapi di-import
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("DB_CREATE_TABLES", "false")
os.environ.setdefault("API_PREFIX", "")
os.environ.setdefault("TOKEN_PREFIX", "")
# Argon2 murah supaya test cepat
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "1024")
os.environ.setdefault("ARGON2_PARALLELISM", "1")

from typing import AsyncGenerator, Dict, Any  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from authapi.main import app  # noqa: E402
from authapi.db.base import Base  # noqa: E402
from authapi.models.user import User  # noqa: E402
from authapi.services.user import UserService  # noqa: E402
from authapi.services.token import TokenService  # noqa: E402
from authapi.schemas.auth import RegisterRequest  # noqa: E402
from authapi.api.dependencies.database import get_db  # noqa: E402


TEST_DATABASE_URL = "sqlite+aiosqlite://"

TEST_PASSWORD = "password123"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory database, satu per test. StaticPool supaya semua session berbagi koneksi."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Session factory yang terikat ke test engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db_session(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def override_dependencies(session_factory: async_sessionmaker):
    """Override FastAPI dependencies for testing: satu session baru per request."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    yield

    # Clean up
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(override_dependencies) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def user_data() -> Dict[str, Any]:
    """Registration payload yang valid."""
    return {
        "name": "John Doe",
        "email": "john@example.com",
        "password": TEST_PASSWORD,
        "age": 25,
        "city": "New York"
    }


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession, user_data: Dict[str, Any]) -> User:
    """Create a test user."""
    user_service = UserService(db_session)
    user = await user_service.create_user(RegisterRequest(**user_data))
    await db_session.commit()

    return user


@pytest_asyncio.fixture
async def test_token(db_session: AsyncSession, test_user: User) -> str:
    """Plain text token milik test_user."""
    return await TokenService(db_session).issue_token(test_user)


@pytest.fixture
def auth_headers(test_token: str) -> Dict[str, str]:
    """Create authentication headers with valid token."""
    return {"Authorization": f"Bearer {test_token}"}


@pytest.fixture
def generate_test_user_data():
    """Factory fixture to generate test user data."""
    def _generate(index: int = 0):
        return {
            "name": f"Test User {index}",
            "email": f"testuser{index}@example.com",
            "password": TEST_PASSWORD,
            "age": 20 + index,
            "city": "Jakarta"
        }
    return _generate
