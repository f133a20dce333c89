"""
Validator utilities untuk Token Auth API.
Mengubah pydantic validation errors menjadi pesan per-field yang konsisten.
"""

from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from authapi.core.constants import ValidationMessage
from authapi.core.exceptions import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

INTEGER_ERROR_TYPES = {"int_type", "int_parsing", "int_from_float", "int_parsing_size"}


def _is_blank(value: Any) -> bool:
    """Nilai yang dianggap 'tidak diisi': None, string kosong atau whitespace."""
    return value is None or (isinstance(value, str) and not value.strip())


def _attribute_label(field: str) -> str:
    """Label field di dalam pesan, misal 'first_name' -> 'first name'."""
    return field.replace("_", " ")


def error_message(error: Dict[str, Any]) -> str:
    """
    Terjemahkan satu pydantic error dict menjadi pesan validasi.

    Args:
        error: Satu entry dari ValidationError.errors()

    Returns:
        Human-readable message
    """
    field = _attribute_label(str(error["loc"][0])) if error.get("loc") else "input"
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if error_type == "missing" or (error_type != "string_type" and _is_blank(error.get("input"))):
        return ValidationMessage.REQUIRED.format(field=field)

    if error_type == "string_type":
        return ValidationMessage.STRING.format(field=field)

    if error_type in INTEGER_ERROR_TYPES:
        return ValidationMessage.INTEGER.format(field=field)

    if error_type == "string_too_short":
        return ValidationMessage.MIN_STRING.format(field=field, min=ctx.get("min_length"))

    if error_type == "string_too_long":
        return ValidationMessage.MAX_STRING.format(field=field, max=ctx.get("max_length"))

    if error_type == "value_error" and field == "email":
        return ValidationMessage.EMAIL.format(field=field)

    return ValidationMessage.INVALID.format(field=field)


def format_validation_errors(exc: PydanticValidationError) -> Dict[str, List[str]]:
    """
    Kelompokkan pydantic errors per field.

    Args:
        exc: Pydantic ValidationError

    Returns:
        Dict {field: [message, ...]} dengan urutan field sesuai error
    """
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error.get("loc") else "__root__"
        message = error_message(error)
        messages = errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return errors


def validate_payload(
    schema: Type[SchemaT],
    payload: Mapping[str, Any],
    extra_errors: Optional[Dict[str, List[str]]] = None
) -> SchemaT:
    """
    Validasi payload terhadap schema; semua pelanggaran dilaporkan sekaligus.

    Args:
        schema: Pydantic model class
        payload: Raw request data
        extra_errors: Error tambahan dari pengecekan di luar schema (misal unique)

    Returns:
        Validated schema instance

    Raises:
        ValidationError: Jika ada field yang tidak valid
    """
    errors: Dict[str, List[str]] = {}
    data = None

    try:
        data = schema.model_validate(dict(payload))
    except PydanticValidationError as exc:
        errors = format_validation_errors(exc)

    for field, messages in (extra_errors or {}).items():
        field_errors = errors.setdefault(field, [])
        for message in messages:
            if message not in field_errors:
                field_errors.append(message)

    if errors:
        raise ValidationError(errors=errors)

    return data


def unique_violation(field: str) -> Dict[str, List[str]]:
    """Error dict untuk nilai yang sudah dipakai."""
    return {field: [ValidationMessage.UNIQUE.format(field=_attribute_label(field))]}


def normalize_email(email: str) -> str:
    """
    Normalize email address: trim dan lowercase.

    Args:
        email: Email address

    Returns:
        Normalized email
    """
    return email.strip().lower()
