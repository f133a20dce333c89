"""
Tests for validation error formatting.
"""

import pytest

from authapi.core.exceptions import ValidationError
from authapi.schemas.auth import LoginRequest, RegisterRequest
from authapi.utils.validators import normalize_email, unique_violation, validate_payload


@pytest.mark.unit
class TestValidatePayload:
    """Test validate_payload."""

    def test_valid_payload(self, user_data):
        data = validate_payload(RegisterRequest, {**user_data, "age": "30"})

        assert isinstance(data, RegisterRequest)
        assert data.age == 30

    def test_non_string_name(self, user_data):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(RegisterRequest, {**user_data, "name": 123})

        assert exc_info.value.errors == {"name": ["The name field must be a string."]}

    def test_float_age(self, user_data):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(RegisterRequest, {**user_data, "age": 25.5})

        assert exc_info.value.errors == {"age": ["The age field must be an integer."]}

    def test_name_and_email_fit_column(self, user_data):
        """Name dan email dibatasi panjang kolom String(255)."""
        payload = {
            **user_data,
            "name": "n" * 256,
            "email": "e" * 244 + "@example.com"
        }

        with pytest.raises(ValidationError) as exc_info:
            validate_payload(RegisterRequest, payload)

        assert exc_info.value.errors == {
            "name": ["The name field must not be greater than 255 characters."],
            "email": ["The email field must not be greater than 255 characters."],
        }

    def test_name_at_limit(self, user_data):
        data = validate_payload(RegisterRequest, {**user_data, "name": "n" * 255})
        assert len(data.name) == 255

    def test_city_at_limit(self, user_data):
        data = validate_payload(RegisterRequest, {**user_data, "city": "x" * 30})
        assert len(data.city) == 30

    def test_password_at_limit(self, user_data):
        data = validate_payload(RegisterRequest, {**user_data, "password": "123456"})
        assert data.password == "123456"

    def test_password_not_trimmed(self, user_data):
        data = validate_payload(RegisterRequest, {**user_data, "password": " pass word "})
        assert data.password == " pass word "

    def test_extra_errors_merged(self, user_data):
        """Error tambahan digabung tanpa duplikasi."""
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(
                RegisterRequest,
                {**user_data, "password": "abc"},
                extra_errors=unique_violation("email")
            )

        assert exc_info.value.errors == {
            "password": ["The password field must be at least 6 characters."],
            "email": ["The email has already been taken."],
        }

    def test_extra_errors_only(self, user_data):
        """Payload valid tetap gagal jika ada extra errors."""
        with pytest.raises(ValidationError):
            validate_payload(RegisterRequest, user_data, extra_errors=unique_violation("email"))

    def test_login_email_format(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(LoginRequest, {"email": "john@", "password": "x"})

        assert exc_info.value.errors == {
            "email": ["The email field must be a valid email address."]
        }


@pytest.mark.unit
def test_unique_violation():
    assert unique_violation("email") == {"email": ["The email has already been taken."]}


@pytest.mark.unit
def test_normalize_email():
    assert normalize_email("  John@Example.COM ") == "john@example.com"
