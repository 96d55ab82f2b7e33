"""
Fauna API: FastAPI Application Factory
=======================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires middleware, exception handlers and routers; the
       module-level `app` is what uvicorn serves (`uvicorn fauna_api.main:app`).

Application Architecture:
    ┌────────────────────────────────────────────────────────┐
    │                      FastAPI App                       │
    │                                                        │
    │  Middleware:  Request ID → Access log → GZip → CORS    │
    │                                                        │
    │  Routes:                                               │
    │   GET /            GET /health        POST /api/login  │
    │   /api/especies    /api/usuarios      /api/avistamientos│
    │   /api/avistamientos/{id}/imagenes    POST /api/detect │
    │                                                        │
    │  Exception Handlers:                                   │
    │   AuthenticationError→401  LoginError→400              │
    │   StoreError→500  UpstreamError→500  Exception→500     │
    │   RequestValidationError→400                           │
    └────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, check settings (warn only), log bind address.
    Shutdown: dispose the database engine.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from fauna_api import __version__
from fauna_api.config import settings
from fauna_api.database import dispose_engine
from fauna_api.exceptions import (
    AuthenticationError,
    FaunaError,
    LoginError,
    StoreError,
    UpstreamError,
)
from fauna_api.middleware.logging import RequestLoggingMiddleware
from fauna_api.middleware.request_id import RequestIDMiddleware, request_id_var
from fauna_api.routes import (
    auth,
    avistamientos,
    detect,
    especies,
    health,
    home,
    imagenes,
    usuarios,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"
INVALID_BODY_MESSAGE = "Cuerpo de la solicitud inválido"


# ══════════════════════════════════════════════════════════════════════════
# Logging
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.

    Format: 2024-01-15T12:00:00 [INFO] fauna_api.access: GET /api/especies 200 ...
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-statement and per-connection chatter
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("Fauna API %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # The server keeps running; login and the species list will fail
        # until a secret is configured.
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.port)
    logger.info("=" * 60)

    yield

    logger.info("Fauna API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(exc: FaunaError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to `{"error": message}` responses.

    Handler hierarchy:
        AuthenticationError    → 401
        LoginError             → 400
        StoreError             → 500 (per-route message)
        UpstreamError          → 500 "Error al procesar la imagen"
        FaunaError (base)      → its own status_code
        RequestValidationError → 400 "Cuerpo de la solicitud inválido"
        Exception              → 500 "Error interno del servidor"

    The context dict and chained cause are logged, never returned.
    """

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Rejected %s %s: %s", rid, request.method, request.url.path, exc.message)
        return _error_response(exc)

    @app.exception_handler(LoginError)
    async def handle_login_error(request: Request, exc: LoginError):
        rid = request_id_var.get("")
        logger.info("[%s] Login failed: %s", rid, exc.message)
        return _error_response(exc)

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        rid = request_id_var.get("")
        logger.error("[%s] Store error: %s | Context: %s", rid, exc.message, exc.context)
        return _error_response(exc)

    @app.exception_handler(UpstreamError)
    async def handle_upstream_error(request: Request, exc: UpstreamError):
        rid = request_id_var.get("")
        logger.error("[%s] Detection error: %s | Context: %s", rid, exc.message, exc.context)
        return _error_response(exc)

    @app.exception_handler(FaunaError)
    async def handle_fauna_error(request: Request, exc: FaunaError):
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        # Only a body that is not a JSON object, or a malformed upload, gets
        # here; field values are checked by the store.
        rid = request_id_var.get("")
        error_types = [error.get("type") for error in exc.errors()]
        logger.warning("[%s] Unparseable request %s %s: %s", rid, request.method, request.url.path, error_types)
        return JSONResponse(status_code=400, content={"error": INVALID_BODY_MESSAGE})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Assemble middleware, handlers and routers into a new application."""
    app = FastAPI(
        title="Fauna API",
        description=(
            "Wildlife sighting backend: species catalog, users, sightings and "
            "their images, login, and species detection from photos."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(home.router)
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(especies.router)
    app.include_router(usuarios.router)
    app.include_router(avistamientos.router)
    app.include_router(imagenes.router)
    app.include_router(detect.router)

    return app


app = create_app()
