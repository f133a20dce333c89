"""
Token repository untuk Token Auth API.
Query untuk tabel personal_access_tokens.
"""

from typing import Optional

from sqlalchemy import select, delete, func, update
from sqlalchemy.ext.asyncio import AsyncSession

from authapi.db.base import utcnow
from authapi.models.token import PersonalAccessToken


class TokenRepository:
    """Token store berbasis SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_token(self, user_id: int, name: str, token_hash: str) -> PersonalAccessToken:
        """
        Simpan token baru dan flush supaya id ter-assign.

        Args:
            user_id: Pemilik token
            name: Label token
            token_hash: SHA-256 hash dari secret

        Returns:
            PersonalAccessToken yang baru dibuat
        """
        token = PersonalAccessToken(
            user_id=user_id,
            name=name,
            token_hash=token_hash
        )
        self.db.add(token)
        await self.db.flush()
        return token

    async def find_token(self, token_id: int) -> Optional[PersonalAccessToken]:
        """Get token by ID, beserta user pemiliknya."""
        result = await self.db.execute(
            select(PersonalAccessToken).where(PersonalAccessToken.id == token_id)
        )
        return result.scalar_one_or_none()

    async def find_token_by_hash(self, token_hash: str) -> Optional[PersonalAccessToken]:
        """Get token by hash, untuk token tanpa id di depannya."""
        result = await self.db.execute(
            select(PersonalAccessToken).where(PersonalAccessToken.token_hash == token_hash)
        )
        return result.scalar_one_or_none()

    async def delete_tokens_for_user(self, user_id: int) -> int:
        """
        Hapus semua token milik user dalam satu statement DELETE.

        Args:
            user_id: User ID

        Returns:
            Jumlah token yang dihapus
        """
        result = await self.db.execute(
            delete(PersonalAccessToken)
            .where(PersonalAccessToken.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    async def count_for_user(self, user_id: int) -> int:
        """Jumlah token aktif milik user."""
        result = await self.db.execute(
            select(func.count())
            .select_from(PersonalAccessToken)
            .where(PersonalAccessToken.user_id == user_id)
        )
        return result.scalar_one()

    async def touch(self, token: PersonalAccessToken) -> bool:
        """
        Update last_used_at dengan satu statement UPDATE.

        Args:
            token: Token yang baru saja dipakai

        Returns:
            False jika token sudah dihapus (misal logout di request lain)
        """
        result = await self.db.execute(
            update(PersonalAccessToken)
            .where(PersonalAccessToken.id == token.id)
            .values(last_used_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        return bool(result.rowcount)
