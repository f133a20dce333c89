"""
Konfigurasi aplikasi menggunakan Pydantic Settings.
Semua konfigurasi dimuat dari environment variables atau file .env.
"""

from typing import List, Union
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Konfigurasi aplikasi utama."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    APP_NAME: str = Field(default="Token Auth API", description="Nama aplikasi")
    APP_VERSION: str = Field(default="1.0.0", description="Versi aplikasi")
    DEBUG: bool = Field(default=False, description="Mode debug")
    ENVIRONMENT: str = Field(default="development", description="Environment aplikasi")
    API_PREFIX: str = Field(default="", description="Prefix untuk semua auth routes, misal /api")

    # Database
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./authapi.db",
        description="Async SQLAlchemy connection URL"
    )
    DB_POOL_SIZE: int = Field(default=20, description="Database connection pool size")
    DB_MAX_OVERFLOW: int = Field(default=0, description="Database max overflow connections")
    DB_POOL_PRE_PING: bool = Field(default=True, description="Pre-ping database connections")
    DB_CREATE_TABLES: bool = Field(default=True, description="Create tables saat startup")

    # Registration rules
    PASSWORD_MIN_LENGTH: int = Field(default=6, description="Panjang minimal password")
    CITY_MAX_LENGTH: int = Field(default=30, description="Panjang maksimal city")

    # Password hashing (Argon2)
    ARGON2_TIME_COST: int = Field(default=4, description="Argon2 rounds")
    ARGON2_MEMORY_COST: int = Field(default=65536, description="Argon2 memory cost dalam KiB")
    ARGON2_PARALLELISM: int = Field(default=2, description="Argon2 parallelism")

    # Personal access tokens
    TOKEN_NAME: str = Field(default="API Token", description="Nama token yang dibuat saat login")
    TOKEN_LENGTH: int = Field(default=40, description="Panjang secret token")
    TOKEN_PREFIX: str = Field(default="", description="Prefix opsional untuk plain text token")

    # CORS Settings
    BACKEND_CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins"
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format"
    )

    @field_validator("BACKEND_CORS_ORIGINS", mode='before')
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        """Parse CORS origins dari string atau list."""
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    @field_validator("DATABASE_URL", mode='before')
    def validate_database_url(cls, v: str) -> str:
        """Validate database URL."""
        if not v:
            raise ValueError("DATABASE_URL must be set")
        return v

    @field_validator("API_PREFIX")
    def normalize_api_prefix(cls, v: str) -> str:
        """Pastikan prefix diawali '/' dan tanpa trailing slash."""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    @property
    def is_sqlite(self) -> bool:
        """True jika DATABASE_URL menunjuk ke SQLite."""
        return self.DATABASE_URL.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """
    Mendapatkan cached settings instance.
    Menggunakan lru_cache untuk memastikan settings hanya di-load sekali.
    """
    return Settings()


# Global settings instance
settings = get_settings()
