"""
Fauna API: Login Route
=======================

POST /api/login with `{"email": ..., "contraseña": ...}`.

    200 {"token": "<jwt>"}                 credentials match
    400 {"error": "Usuario no encontrado"}  no user with that email
    400 {"error": "Contraseña incorrecta"}  hash check failed
    500 {"error": "Error al iniciar sesión"} lookup failure
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fauna_api.config import Settings, get_settings
from fauna_api.database import get_db_session
from fauna_api.schemas.auth import LoginRequest, TokenResponse
from fauna_api.schemas.common import ErrorResponse
from fauna_api.services.auth_service import authenticate

router = APIRouter(prefix="/api", tags=["Auth"])


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={
        400: {"description": "Unknown email or wrong password", "model": ErrorResponse},
        500: {"description": "Store failure", "model": ErrorResponse},
    },
    summary="Exchange email and password for a bearer token",
)
async def login(
    payload: Optional[LoginRequest] = None,
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    credentials = payload or LoginRequest()
    token = await authenticate(db, credentials.email, credentials.contrasena, settings)
    return TokenResponse(token=token)
