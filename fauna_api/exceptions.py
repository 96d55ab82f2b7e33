"""
Fauna API: Exception Hierarchy
===============================

What:  One exception class per failure kind a request can end in.
How:   Each class carries the client-facing message, an optional context dict
       (logged, never returned) and the HTTP status it maps to. The handlers
       registered in main.py turn them into `{"error": message}` responses.
Who:   Raised by the auth gate and the services; caught by global handlers.

Exception Hierarchy:
    FaunaError (base)
    ├── AuthenticationError  → 401 (missing or invalid bearer token)
    ├── LoginError           → 400 (unknown email, wrong password)
    ├── StoreError           → 500 (any database failure, per-route message)
    └── UpstreamError        → 500 (detection service or upload failure)

An update or delete that matches no row is not an error; there is no
not-found kind.
"""

from typing import Any, Dict, Optional


class FaunaError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:      Client-facing text, returned verbatim as `error`.
        context:      Debug details for the server log only.
        status_code:  HTTP status the global handler responds with.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Error interno del servidor",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class AuthenticationError(FaunaError):
    """
    Raised by the auth gate.

    Messages in use:
        "Token no proporcionado": no Authorization header or no token in it
        "Token inválido":         bad signature, expired, or malformed claims
    """

    status_code = 401


class LoginError(FaunaError):
    """
    Raised by the login flow for client-correctable failures.

    Messages in use: "Usuario no encontrado", "Contraseña incorrecta".
    """

    status_code = 400


class StoreError(FaunaError):
    """
    Raised when a statement fails against the database.

    The message is the fixed per-route text (e.g. "Error al crear especie").
    The original exception is chained and logged, never returned.
    """

    status_code = 500


class UpstreamError(FaunaError):
    """
    Raised by the detection proxy: missing upload, file I/O failure, network
    failure, non-2xx or non-JSON answer from the detection service.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Error al procesar la imagen",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
