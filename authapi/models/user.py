"""
User model untuk Token Auth API.
Credential record: identitas, profile, dan password hash.
"""

from typing import Dict, Any, List, TYPE_CHECKING

from sqlalchemy import Column, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped

from authapi.db.base import BaseModel
from authapi.core.security import pwd_context

if TYPE_CHECKING:
    from authapi.models.token import PersonalAccessToken


class User(BaseModel):
    """
    User model untuk authentication.

    Attributes:
        id: Auto-increment user ID
        name: Display name
        email: Login identifier (unique, lower-case)
        password_hash: Argon2 hash dari password
        age: Umur user
        city: Kota user
        created_at: Account creation timestamp
        updated_at: Last update timestamp
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)

    # Profile fields
    age = Column(Integer, nullable=False)
    city = Column(String(255), nullable=False)

    # Relationships
    tokens: Mapped[List["PersonalAccessToken"]] = relationship(
        "PersonalAccessToken",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise"
    )

    __table_args__ = (
        UniqueConstraint('email', name='uq_users_email'),
    )

    def set_password(self, password: str) -> None:
        """
        Set user password (hashes it).

        Args:
            password: Plain text password
        """
        self.password_hash = pwd_context.hash(password)

    def verify_password(self, password: str) -> bool:
        """
        Verify password against hash.

        Args:
            password: Plain text password to verify

        Returns:
            True if password matches
        """
        return pwd_context.verify(password, self.password_hash)

    def to_dict(self) -> Dict[str, Any]:
        """Convert user to dictionary. Password hash tidak pernah ikut."""
        return self.dict(exclude={"password_hash"})

    def __repr__(self) -> str:
        """String representation."""
        return f"<User(id={self.id}, email={self.email})>"
