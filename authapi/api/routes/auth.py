"""
Authentication endpoints.
Menangani register, login, logout, dan current user.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from authapi.api.dependencies.auth import get_current_user
from authapi.api.dependencies.database import get_db
from authapi.api.dependencies.payload import get_payload
from authapi.core.constants import ResponseMessage, TOKEN_TYPE
from authapi.models.user import User
from authapi.schemas.auth import (
    ErrorResponse,
    LoginResponse,
    RegisterResponse,
    StatusResponse
)
from authapi.schemas.user import UserResponse
from authapi.services.auth import AuthService
from authapi.services.user import UserService

router = APIRouter(tags=["Authentication"])

VALIDATION_ERROR_RESPONSE = {
    422: {"model": ErrorResponse, "description": "Validation error"}
}
UNAUTHORIZED_RESPONSE = {
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse, "description": "Unauthorized"}
}


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses=VALIDATION_ERROR_RESPONSE
)
async def register(
    payload: Dict[str, Any] = Depends(get_payload),
    db: AsyncSession = Depends(get_db)
) -> RegisterResponse:
    """
    Register user baru.

    Body: name, email, password, age, city (multipart form atau JSON).
    Semua rule yang dilanggar dikembalikan sekaligus dalam `errors`.
    """
    user = await UserService(db).register(payload)

    return RegisterResponse(
        status=True,
        message=ResponseMessage.REGISTER_SUCCESS,
        user=UserResponse.model_validate(user)
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login a user",
    responses={
        **VALIDATION_ERROR_RESPONSE,
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse, "description": "Invalid credentials"}
    }
)
async def login(
    payload: Dict[str, Any] = Depends(get_payload),
    db: AsyncSession = Depends(get_db)
) -> LoginResponse:
    """
    Login dengan email dan password.

    Setiap login menerbitkan token baru; token dari login sebelumnya tetap berlaku.
    """
    _, token = await AuthService(db).login(payload)

    return LoginResponse(
        status=True,
        message=ResponseMessage.LOGIN_SUCCESS,
        token=token,
        token_type=TOKEN_TYPE
    )


@router.post(
    "/logout",
    response_model=StatusResponse,
    summary="Logout a user",
    responses=UNAUTHORIZED_RESPONSE
)
async def logout(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
) -> StatusResponse:
    """
    Logout dari semua sessions: semua token milik user dicabut,
    bukan hanya token yang dipakai untuk request ini.
    """
    await AuthService(db).logout(current_user)

    return StatusResponse(
        status=True,
        message=ResponseMessage.LOGOUT_SUCCESS
    )


@router.get(
    "/user",
    response_model=UserResponse,
    summary="Get the authenticated user",
    responses=UNAUTHORIZED_RESPONSE
)
async def get_user(
    current_user: User = Depends(get_current_user)
) -> UserResponse:
    """Return user pemilik bearer token."""
    return UserResponse.model_validate(current_user)
