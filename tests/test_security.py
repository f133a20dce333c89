"""
Tests for security functionality.
"""

import pytest

from authapi.core.config import settings
from authapi.core.security import security, pwd_context


@pytest.mark.unit
@pytest.mark.security
class TestPasswordHashing:
    """Test password hashing functionality."""

    def test_hash_password(self):
        """Test password hashing."""
        password = "password123"
        hashed = security.hash_password(password)

        assert hashed != password
        assert hashed.startswith("$argon2")  # Argon2 hash prefix

    def test_verify_password_correct(self):
        """Test verifying correct password."""
        hashed = security.hash_password("password123")

        assert security.verify_password("password123", hashed) is True

    def test_verify_password_incorrect(self):
        """Test verifying incorrect password."""
        hashed = security.hash_password("password123")

        assert security.verify_password("password124", hashed) is False
        assert security.verify_password("", hashed) is False

    def test_hash_is_salted(self):
        """Password yang sama menghasilkan hash yang berbeda."""
        assert security.hash_password("password123") != security.hash_password("password123")

    def test_dummy_verify(self):
        """dummy_verify tidak raise dan tidak butuh hash."""
        security.dummy_verify()

    def test_context_uses_argon2(self):
        assert pwd_context.default_scheme() == "argon2"


@pytest.mark.unit
@pytest.mark.security
class TestPersonalAccessTokens:
    """Test token generation, formatting dan hashing."""

    def test_generate_token_secret(self):
        """Secret alfanumerik dengan panjang TOKEN_LENGTH."""
        secret = security.generate_token_secret()

        assert len(secret) == settings.TOKEN_LENGTH
        assert secret.isalnum()

    def test_generate_token_secret_custom_length(self):
        assert len(security.generate_token_secret(64)) == 64

    def test_generate_token_secret_unique(self):
        secrets = {security.generate_token_secret() for _ in range(100)}
        assert len(secrets) == 100

    def test_build_plain_text_token(self):
        token = security.build_plain_text_token(7, "abc123")
        assert token == f"{settings.TOKEN_PREFIX}7|abc123"

    def test_split_plain_text_token(self):
        """Token dengan id dipisah menjadi (id, secret)."""
        token = security.build_plain_text_token(42, "secretvalue")

        assert security.split_plain_text_token(token) == (42, "secretvalue")

    def test_split_token_without_id(self):
        """Token tanpa separator dianggap secret saja."""
        assert security.split_plain_text_token("secretvalue") == (None, "secretvalue")

    def test_split_token_non_numeric_id(self):
        """Id yang bukan angka membuat token tidak valid."""
        assert security.split_plain_text_token("abc|secretvalue") == (None, "")

    def test_split_token_id_out_of_range(self):
        """Id di luar range kolom Integer dianggap tidak valid."""
        assert security.split_plain_text_token("99999999999999999999|abc") == (None, "")
        assert security.split_plain_text_token(f"{2 ** 31}|abc") == (None, "")
        assert security.split_plain_text_token(f"{2 ** 31 - 1}|abc") == (2 ** 31 - 1, "abc")

    def test_split_token_non_ascii_digits(self):
        """Digit non-ASCII (misal superscript) ditolak tanpa error."""
        assert security.split_plain_text_token("\u00b2|abc") == (None, "")

    def test_split_token_keeps_separator_in_secret(self):
        """Hanya separator pertama yang memisahkan id."""
        assert security.split_plain_text_token("3|a|b") == (3, "a|b")

    def test_split_token_strips_prefix(self, monkeypatch):
        """Prefix opsional dibuang sebelum parsing."""
        monkeypatch.setattr(settings, "TOKEN_PREFIX", "tok_")

        token = security.build_plain_text_token(5, "xyz")
        assert token == "tok_5|xyz"
        assert security.split_plain_text_token(token) == (5, "xyz")

    def test_hash_token(self):
        """SHA-256 hex digest: deterministik, 64 karakter."""
        hashed = security.hash_token("secretvalue")

        assert len(hashed) == 64
        assert hashed == security.hash_token("secretvalue")
        assert hashed != security.hash_token("secretvaluf")
        assert hashed != "secretvalue"

    def test_hash_token_known_value(self):
        assert security.hash_token("abc") == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_token_matches(self):
        stored = security.hash_token("secretvalue")

        assert security.token_matches("secretvalue", stored) is True
        assert security.token_matches("othervalue", stored) is False
