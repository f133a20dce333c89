"""
Utils module untuk Token Auth API.
"""

from authapi.utils.validators import (
    format_validation_errors,
    validate_payload,
    unique_violation,
    normalize_email
)

__all__ = [
    "format_validation_errors",
    "validate_payload",
    "unique_violation",
    "normalize_email"
]
