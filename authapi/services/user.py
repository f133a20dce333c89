"""
User service untuk Token Auth API.
Menangani business logic untuk registrasi user.
"""

import logging
from typing import Any, Mapping, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError

from authapi.core.exceptions import ValidationError
from authapi.models.user import User
from authapi.repositories.user import UserRepository
from authapi.schemas.auth import RegisterRequest
from authapi.utils.validators import validate_payload, unique_violation

logger = logging.getLogger(__name__)


class UserService:
    """
    Service class untuk user operations.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize user service.

        Args:
            db: Database session
        """
        self.db = db
        self.users = UserRepository(db)

    async def validate_registration(self, payload: Mapping[str, Any]) -> RegisterRequest:
        """
        Validasi data registrasi, termasuk keunikan email.

        Args:
            payload: Raw request data

        Returns:
            Validated RegisterRequest

        Raises:
            ValidationError: Semua pelanggaran rule sekaligus
        """
        extra_errors = None
        email = payload.get("email")
        if isinstance(email, str) and email.strip():
            if await self.users.email_exists(email):
                extra_errors = unique_violation("email")

        return validate_payload(RegisterRequest, payload, extra_errors=extra_errors)

    async def create_user(self, data: RegisterRequest) -> User:
        """
        Create user baru dengan password yang di-hash.

        Args:
            data: Validated registration data

        Returns:
            Created user object

        Raises:
            ValidationError: Jika email sudah terdaftar (termasuk race condition)
        """
        try:
            user = await self.users.create_user(
                name=data.name,
                email=data.email,
                password=data.password,
                age=data.age,
                city=data.city
            )
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            # Registrasi paralel dengan email yang sama
            logger.warning(f"Duplicate registration rejected for {data.email}")
            raise ValidationError(errors=unique_violation("email"))

        await self.db.refresh(user)
        logger.info(f"Registered user {user.id} ({user.email})")
        return user

    async def register(self, payload: Mapping[str, Any]) -> User:
        """
        Validasi lalu simpan user baru.

        Args:
            payload: Raw request data (form atau JSON)

        Returns:
            Created user object
        """
        data = await self.validate_registration(payload)
        return await self.create_user(data)

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        return await self.users.find_user_by_id(user_id)
