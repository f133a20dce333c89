"""
Authentication service untuk Token Auth API.
Menangani business logic untuk login dan logout.
"""

import logging
from typing import Any, Mapping, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from authapi.core.constants import ResponseMessage
from authapi.core.exceptions import AuthenticationError
from authapi.core.security import security
from authapi.models.user import User
from authapi.repositories.user import UserRepository
from authapi.schemas.auth import LoginRequest
from authapi.services.token import TokenService
from authapi.utils.validators import validate_payload

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service class untuk authentication operations.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize authentication service.

        Args:
            db: Database session
        """
        self.db = db
        self.users = UserRepository(db)
        self.token_service = TokenService(db)

    async def authenticate_user(self, email: str, password: str) -> User:
        """
        Verifikasi email dan password.

        Email yang tidak terdaftar tetap menjalankan satu verifikasi hash
        supaya kedua jalur gagal punya biaya yang sama.

        Args:
            email: User email
            password: Plain text password

        Returns:
            User yang cocok

        Raises:
            AuthenticationError: Jika kredensial tidak cocok
        """
        user = await self.users.find_user_by_email(email)

        if user is None:
            security.dummy_verify()
            logger.warning("Login failed: unknown email")
            raise AuthenticationError(ResponseMessage.INVALID_CREDENTIALS)

        if not user.verify_password(password):
            logger.warning(f"Login failed: wrong password for user {user.id}")
            raise AuthenticationError(ResponseMessage.INVALID_CREDENTIALS)

        return user

    async def login(self, payload: Mapping[str, Any]) -> Tuple[User, str]:
        """
        Login dan terbitkan token baru.

        Proses:
        1. Validasi input
        2. Verifikasi kredensial
        3. Terbitkan token (token lama tetap berlaku)

        Args:
            payload: Raw request data

        Returns:
            Tuple (user, plain text token)

        Raises:
            ValidationError: Jika input tidak valid
            AuthenticationError: Jika kredensial tidak cocok
        """
        data = validate_payload(LoginRequest, payload)
        user = await self.authenticate_user(data.email, data.password)
        token = await self.token_service.issue_token(user)

        logger.info(f"User {user.id} logged in")
        return user, token

    async def logout(self, user: User) -> int:
        """
        Logout dari semua device: cabut semua token milik user.

        Args:
            user: User yang sudah di-resolve dari bearer token

        Returns:
            Jumlah token yang dicabut
        """
        return await self.token_service.revoke_all_tokens(user)
