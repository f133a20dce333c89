"""
Request payload dependency.
Membaca body sebagai JSON, multipart form, atau urlencoded form.
"""

import json
import logging
from typing import Any, Dict

from fastapi import Request

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


async def get_payload(request: Request) -> Dict[str, Any]:
    """
    Ambil semua input dari request body.

    Body yang kosong atau tidak bisa di-parse menghasilkan dict kosong,
    sehingga validasi melaporkan field-field yang wajib diisi.

    Args:
        request: Incoming request

    Returns:
        Dict dengan input fields
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    body = await request.body()
    if not body:
        return {}

    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("Request body is not valid JSON")
        return {}

    return data if isinstance(data, dict) else {}
