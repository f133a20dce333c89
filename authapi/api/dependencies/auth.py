"""
Authentication dependencies untuk FastAPI.
Resolve bearer token ke User dan teruskan secara eksplisit ke endpoint.
"""

from typing import Optional, Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from authapi.api.dependencies.database import get_db
from authapi.core.constants import ResponseMessage
from authapi.core.exceptions import UnauthorizedError
from authapi.models.user import User
from authapi.services.token import TokenService

# Bearer scheme, nama "bearerAuth" muncul di OpenAPI docs
bearer_scheme = HTTPBearer(
    scheme_name="bearerAuth",
    auto_error=False  # Kita handle error sendiri
)


async def get_current_user(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    db: Annotated[AsyncSession, Depends(get_db)]
) -> User:
    """
    Get current user dari bearer token.

    Args:
        request: Request, untuk mencatat user_id di access log
        credentials: Authorization header yang sudah di-parse
        db: Database session

    Returns:
        User pemilik token

    Raises:
        UnauthorizedError: Jika token tidak ada, tidak valid, atau sudah dicabut
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError(ResponseMessage.UNAUTHORIZED)

    user = await TokenService(db).authenticate(credentials.credentials)
    if user is None:
        raise UnauthorizedError(ResponseMessage.UNAUTHORIZED)

    request.state.user_id = user.id
    return user
