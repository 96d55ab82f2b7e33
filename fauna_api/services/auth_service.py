"""
Fauna API: Authentication Service
==================================

What:  Password hashing, token signing/verification and the login flow.
How:   bcrypt for credentials (compatible with hashes already stored as
       `$2a$`/`$2b$`), PyJWT HS256 for bearer tokens carrying `{id, email}`
       with a one-hour expiry.
Who:   Login route (authenticate), user routes (hash_password) and the auth
       gate in routes/deps.py (decode_token).

Login state machine (no retries):

    lookup by email ──none──▶ LoginError "Usuario no encontrado"      (400)
          │
       bcrypt check ──no───▶ LoginError "Contraseña incorrecta"      (400)
          │
       sign token ─────────▶ {"token": ...}                           (200)

    anything else ─────────▶ StoreError "Error al iniciar sesión"     (500)
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fauna_api.config import Settings
from fauna_api.exceptions import FaunaError, LoginError, StoreError
from fauna_api.models.usuario import Usuario

logger = logging.getLogger(__name__)

LOGIN_ERROR_MESSAGE = "Error al iniciar sesión"


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


# ── Credentials ───────────────────────────────────────────────────────────
# bcrypt is CPU-bound; both calls run in a worker thread so the event loop
# keeps serving other requests while a hash is computed.

async def hash_password(password: Any) -> Optional[str]:
    """
    Hash a plain password with a fresh bcrypt salt.

    None passes through to the store; numbers are hashed as their text.
    """
    if password is None:
        return None
    if isinstance(password, (dict, list)):
        raise TypeError("credential must be a string")
    plain = password if isinstance(password, str) else str(password)
    hashed = await asyncio.to_thread(bcrypt.hashpw, plain.encode("utf-8"), bcrypt.gensalt())
    return hashed.decode("utf-8")


async def verify_password(password: str, hashed: str) -> bool:
    """
    Check a plain password against a stored bcrypt hash.

    A stored value that is not a bcrypt hash never matches.
    """
    try:
        return await asyncio.to_thread(
            bcrypt.checkpw, password.encode("utf-8"), hashed.encode("utf-8")
        )
    except ValueError:
        logger.warning("Stored credential is not a valid bcrypt hash")
        return False


# ── Tokens ────────────────────────────────────────────────────────────────

def create_access_token(user_id: int, email: Optional[str], settings: Settings) -> str:
    """Sign a token embedding `{id, email}` that expires after `jwt_expires_minutes`."""
    now = _now_utc()
    payload: Dict[str, Any] = {
        "id": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expires_minutes),
    }
    return jwt.encode(
        payload,
        settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str, settings: Settings) -> Dict[str, Any]:
    """
    Verify the signature (and `exp` when the token carries one), then
    return the claims. No claim is required.

    Raises:
        jwt.InvalidTokenError (or a subclass such as ExpiredSignatureError).
    """
    return jwt.decode(
        token,
        settings.jwt_secret_key.get_secret_value(),
        algorithms=[settings.jwt_algorithm],
    )


# ── Login ─────────────────────────────────────────────────────────────────

async def authenticate(
    db: AsyncSession,
    email: Optional[str],
    password: Optional[str],
    settings: Settings,
) -> str:
    """
    Run the login flow and return a signed token.

    Raises:
        LoginError:  unknown email or wrong password (400).
        StoreError:  lookup failure or unusable input (500).
    """
    try:
        usuario = None
        if email is not None:
            result = await db.execute(select(Usuario).where(Usuario.email == email))
            usuario = result.scalars().first()
        if usuario is None:
            logger.info("Login rejected: unknown email")
            raise LoginError("Usuario no encontrado")

        if not await verify_password(password, usuario.contrasena):
            logger.info("Login rejected: bad credential for user id=%s", usuario.id)
            raise LoginError("Contraseña incorrecta")

        token = create_access_token(usuario.id, usuario.email, settings)
        logger.info("Login succeeded for user id=%s", usuario.id)
        return token

    except FaunaError:
        raise
    except Exception as exc:
        logger.error("%s: %s", LOGIN_ERROR_MESSAGE, str(exc), exc_info=True)
        raise StoreError(
            message=LOGIN_ERROR_MESSAGE,
            context={"error_type": type(exc).__name__},
        ) from exc
