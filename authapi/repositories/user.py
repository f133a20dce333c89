"""
User repository untuk Token Auth API.
Satu-satunya tempat yang menjalankan query ke tabel users.
"""

from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from authapi.models.user import User
from authapi.utils.validators import normalize_email


class UserRepository:
    """Credential store berbasis SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: User email

        Returns:
            User object atau None
        """
        result = await self.db.execute(
            select(User).where(User.email == normalize_email(email))
        )
        return result.scalar_one_or_none()

    async def find_user_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        return await self.db.get(User, user_id)

    async def email_exists(self, email: str) -> bool:
        """Check apakah email sudah terdaftar."""
        return await self.count_by_email(email) > 0

    async def count_by_email(self, email: str) -> int:
        """Jumlah user dengan email ini (0 atau 1 karena unique constraint)."""
        result = await self.db.execute(
            select(func.count()).select_from(User).where(User.email == normalize_email(email))
        )
        return result.scalar_one()

    async def create_user(
        self,
        name: str,
        email: str,
        password: str,
        age: int,
        city: str
    ) -> User:
        """
        Create user dan flush supaya id ter-assign.
        Commit dilakukan oleh caller; IntegrityError diteruskan ke caller.

        Args:
            name: Display name
            email: Email (akan dinormalisasi)
            password: Plain text password (akan di-hash)
            age: Umur
            city: Kota

        Returns:
            User yang baru dibuat
        """
        user = User(
            name=name,
            email=normalize_email(email),
            age=age,
            city=city
        )
        user.set_password(password)

        self.db.add(user)
        await self.db.flush()
        return user
