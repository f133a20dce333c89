"""
Modul keamanan terpusat untuk Token Auth API.
Menangani password hashing dan pembuatan/hashing personal access token.
"""

import secrets
import string
from typing import Optional, Tuple

from passlib.context import CryptContext
from cryptography.hazmat.primitives import hashes

from authapi.core.config import settings
from authapi.core.constants import MAX_TOKEN_ID, TOKEN_ID_SEPARATOR


# Password hashing context dengan Argon2
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__rounds=settings.ARGON2_TIME_COST,
    argon2__memory_cost=settings.ARGON2_MEMORY_COST,
    argon2__parallelism=settings.ARGON2_PARALLELISM,
    argon2__hash_len=32,
    argon2__salt_len=16
)

TOKEN_ALPHABET = string.ascii_letters + string.digits


class Security:
    """Kelas untuk operasi keamanan."""

    # Password Operations
    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash password menggunakan Argon2.

        Args:
            password: Plain text password

        Returns:
            Hashed password
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verifikasi password terhadap hash.

        Args:
            plain_password: Plain text password
            hashed_password: Hashed password

        Returns:
            True jika password cocok, False jika tidak
        """
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def dummy_verify() -> None:
        """Jalankan satu verifikasi palsu supaya waktu respon tidak membocorkan email."""
        pwd_context.dummy_verify()

    # Personal access tokens
    @staticmethod
    def generate_token_secret(length: Optional[int] = None) -> str:
        """
        Generate random alphanumeric secret untuk personal access token.

        Args:
            length: Panjang secret, default dari TOKEN_LENGTH

        Returns:
            Secret string
        """
        length = length or settings.TOKEN_LENGTH
        return ''.join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))

    @staticmethod
    def build_plain_text_token(token_id: int, secret: str) -> str:
        """Format token yang diberikan ke client: '{prefix}{id}|{secret}'."""
        return f"{settings.TOKEN_PREFIX}{token_id}{TOKEN_ID_SEPARATOR}{secret}"

    @staticmethod
    def split_plain_text_token(token: str) -> Tuple[Optional[int], str]:
        """
        Pisahkan plain text token menjadi (token_id, secret).

        Token tanpa separator dikembalikan sebagai (None, token).
        Token dengan id yang bukan angka, atau di luar range kolom id,
        dianggap tidak valid: (None, "").
        """
        if settings.TOKEN_PREFIX and token.startswith(settings.TOKEN_PREFIX):
            token = token[len(settings.TOKEN_PREFIX):]

        if TOKEN_ID_SEPARATOR not in token:
            return None, token

        token_id, secret = token.split(TOKEN_ID_SEPARATOR, 1)
        if not (token_id.isascii() and token_id.isdigit()):
            return None, ""

        token_id = int(token_id)
        if token_id > MAX_TOKEN_ID:
            return None, ""
        return token_id, secret

    # Hash Operations untuk Token Storage
    @staticmethod
    def hash_token(token: str) -> str:
        """
        Hash token untuk penyimpanan aman di database.
        Menggunakan SHA256 karena tidak perlu verifikasi seperti password.

        Args:
            token: Token yang akan di-hash

        Returns:
            Hashed token
        """
        digest = hashes.Hash(hashes.SHA256())
        digest.update(token.encode())
        return digest.finalize().hex()

    @staticmethod
    def token_matches(secret: str, stored_hash: str) -> bool:
        """Constant-time comparison antara secret dan hash yang tersimpan."""
        return secrets.compare_digest(Security.hash_token(secret), stored_hash)


# Global security instance
security = Security()
