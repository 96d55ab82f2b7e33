"""
Fauna API: Authentication Schemas
==================================

What:  Login body, login response and the decoded token claims.
Who:   LoginRequest/TokenResponse are used by POST /api/login; TokenClaims is
       produced by the auth gate and injected into gated handlers.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Body of POST /api/login: `{"email": ..., "contraseña": ...}`."""
    email: Any = None
    contrasena: Any = Field(default=None, alias="contraseña")

    model_config = {"extra": "ignore", "populate_by_name": True}


class TokenResponse(BaseModel):
    token: str = Field(description="Signed bearer token, valid for one hour")


class TokenClaims(BaseModel):
    """
    Request-scoped identity decoded from a valid bearer token.

    Both claims are optional: any token signed with the server secret is
    accepted, whatever payload it carries.
    """
    id: Optional[int] = None
    email: Optional[str] = None
