"""
Token service untuk Token Auth API.
Menerbitkan, memvalidasi, dan mencabut personal access tokens.
"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from authapi.core.config import settings
from authapi.core.security import security
from authapi.models.token import PersonalAccessToken
from authapi.models.user import User
from authapi.repositories.token import TokenRepository

logger = logging.getLogger(__name__)


class TokenService:
    """
    Service class untuk token lifecycle: ISSUED -> (revoked) -> ABSENT.
    Tidak ada expiry; token berlaku sampai logout.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize token service.

        Args:
            db: Database session
        """
        self.db = db
        self.tokens = TokenRepository(db)

    async def issue_token(self, user: User, name: Optional[str] = None) -> str:
        """
        Buat token baru untuk user dan commit.

        Args:
            user: Pemilik token
            name: Label token, default settings.TOKEN_NAME

        Returns:
            Plain text token '{id}|{secret}'; hanya dikembalikan sekali ini
        """
        secret = security.generate_token_secret()
        token = await self.tokens.create_token(
            user_id=user.id,
            name=name or settings.TOKEN_NAME,
            token_hash=security.hash_token(secret)
        )
        await self.db.commit()

        logger.info(f"Issued token {token.id} for user {user.id}")
        return security.build_plain_text_token(token.id, secret)

    async def find_token(self, plain_text_token: str) -> Optional[PersonalAccessToken]:
        """
        Cari token yang cocok dengan plain text token.

        Token dengan id dicari berdasarkan id lalu hash dibandingkan
        secara constant-time; token tanpa id dicari langsung dengan hash.

        Args:
            plain_text_token: Token dari Authorization header

        Returns:
            PersonalAccessToken atau None
        """
        if not plain_text_token:
            return None

        token_id, secret = security.split_plain_text_token(plain_text_token)
        if not secret:
            return None

        if token_id is None:
            return await self.tokens.find_token_by_hash(security.hash_token(secret))

        token = await self.tokens.find_token(token_id)
        if token is None or not security.token_matches(secret, token.token_hash):
            return None
        return token

    async def authenticate(self, plain_text_token: str) -> Optional[User]:
        """
        Resolve bearer token ke user pemiliknya.

        Args:
            plain_text_token: Token dari Authorization header

        Returns:
            User atau None jika token tidak valid / sudah dicabut
        """
        token = await self.find_token(plain_text_token)
        if token is None:
            return None

        touched = await self.tokens.touch(token)
        await self.db.commit()
        if not touched:
            # Dicabut oleh logout yang berjalan bersamaan
            return None
        return token.user

    async def revoke_all_tokens(self, user: User) -> int:
        """
        Hapus semua token milik user dalam satu transaksi.

        Args:
            user: User yang logout

        Returns:
            Jumlah token yang dihapus
        """
        try:
            deleted = await self.tokens.delete_tokens_for_user(user.id)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"Revoked {deleted} token(s) for user {user.id}")
        return deleted
