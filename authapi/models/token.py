"""
Personal access token model untuk Token Auth API.
Opaque bearer token milik user; hanya SHA-256 hash dari secret yang disimpan.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped

from authapi.db.base import BaseModel

if TYPE_CHECKING:
    from authapi.models.user import User


class PersonalAccessToken(BaseModel):
    """
    Bearer token yang diterbitkan saat login.

    Token berlaku sampai dicabut (logout); tidak ada expiry.

    Attributes:
        id: Token ID, bagian depan dari plain text token
        user_id: Pemilik token
        name: Label token (misal "API Token")
        token_hash: SHA-256 hex digest dari secret
        last_used_at: Terakhir kali token dipakai untuk autentikasi
    """

    __tablename__ = "personal_access_tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    name = Column(String(255), nullable=False)
    token_hash = Column(String(64), unique=True, nullable=False)
    last_used_at = Column(DateTime(timezone=True), nullable=True)

    user: Mapped["User"] = relationship(
        "User",
        back_populates="tokens",
        lazy="joined"
    )

    __table_args__ = (
        Index('idx_personal_access_tokens_user_id', 'user_id'),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<PersonalAccessToken(id={self.id}, user_id={self.user_id}, name={self.name})>"
