"""
Fauna API: Test Configuration (conftest.py)
============================================

What:  Shared pytest fixtures for the whole suite.
How:   Environment is set before any fauna_api import so the settings
       singleton, the engine and the upload directory are test-safe.

Fixtures:
    db_engine:        in-memory SQLite (aiosqlite) with every table created
    test_client:      httpx AsyncClient over ASGITransport, sessions bound
                      to db_engine through a dependency override
    mock_db_session:  AsyncMock session for store-failure paths
    failing_client:   test_client whose session raises on every statement
    auth_headers:     Authorization header with a valid bearer token
"""

import os
import tempfile

# Must run before fauna_api.config is imported anywhere.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-with-enough-length-for-hs256"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="fauna_test_")
os.environ["KEEP_UPLOADS"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.exc import SQLAlchemyError  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from fauna_api.config import settings  # noqa: E402
from fauna_api.database import Base, get_db_session  # noqa: E402
from fauna_api.models.avistamiento import Avistamiento  # noqa: E402,F401
from fauna_api.models.especie import Especie  # noqa: E402,F401
from fauna_api.models.imagen import Imagen  # noqa: E402,F401
from fauna_api.models.usuario import Usuario  # noqa: E402,F401
from fauna_api.services.auth_service import create_access_token  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Database
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    Fresh in-memory database per test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def mock_db_session():
    """
    A mock AsyncSession.

    Usage:
        result = MagicMock()
        result.mappings.return_value.first.return_value = None
        mock_db_session.execute.return_value = result
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# HTTP clients
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(db_session_factory):
    """
    HTTPX AsyncClient talking to the app in-process.

    Usage:
        async def test_home(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from fauna_api.main import app

    async def override_get_db_session():
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def failing_client(mock_db_session):
    """Client whose database rejects every statement."""
    from fauna_api.main import app

    mock_db_session.execute.side_effect = SQLAlchemyError("connection refused")

    async def override_get_db_session():
        yield mock_db_session

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


# ══════════════════════════════════════════════════════════════════════════
# Auth
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def auth_headers():
    token = create_access_token(1, "ana@example.org", settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_image_bytes():
    """Smallest valid JPEG: SOI + JFIF header + EOI."""
    return (
        b'\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00'
        b'\xff\xd9'
    )
