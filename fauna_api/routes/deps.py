"""
Fauna API: Route Dependencies (Auth Gate)
==========================================

What:  FastAPI dependencies shared by the routers: the bearer-token gate and
       the anonymous placeholder used by open routes.
How:   `require_token` reads the `Authorization` header, takes the second
       space-separated part as the token whatever the scheme word is,
       verifies it with the configured secret and returns the decoded
       TokenClaims, which FastAPI injects into the handler.

    no header / no second part → 401 {"error": "Token no proporcionado"}
    bad signature/expired      → 401 {"error": "Token inválido"}
    valid                      → TokenClaims(id, email)
"""

from typing import Optional

import jwt
from fastapi import Depends, Request
from pydantic import ValidationError

from fauna_api.config import Settings, get_settings
from fauna_api.exceptions import AuthenticationError
from fauna_api.schemas.auth import TokenClaims
from fauna_api.services.auth_service import decode_token


def token_from_header(authorization: Optional[str]) -> Optional[str]:
    """`"Bearer abc"` → `"abc"`; `"Basic abc"` → `"abc"`; `"Bearer"` → None."""
    if not authorization:
        return None
    parts = authorization.split(" ")
    return parts[1] if len(parts) > 1 and parts[1] else None


async def require_token(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> TokenClaims:
    """Resolve the caller's identity from a bearer token or fail with 401."""
    token = token_from_header(request.headers.get("Authorization"))
    if token is None:
        raise AuthenticationError("Token no proporcionado")
    try:
        claims = decode_token(token, settings)
        return TokenClaims.model_validate(claims)
    except (jwt.InvalidTokenError, ValidationError) as exc:
        raise AuthenticationError(
            "Token inválido", context={"error_type": type(exc).__name__}
        ) from exc


async def allow_anonymous() -> None:
    """Gate for open routes: no identity."""
    return None
