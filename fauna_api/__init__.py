"""
Fauna API: Application Package
===============================

What: REST backend for wildlife sightings (species catalog, users, sightings,
      sighting images) plus a proxy to the external species-detection service.
Who:  Imported by uvicorn (`fauna_api.main:app`), Alembic and pytest.

Layers:

    ┌─────────────────────────────────────┐
    │      Routes (FastAPI routers)       │  ← HTTP concerns, auth gate
    ├─────────────────────────────────────┤
    │   Services (CRUD, auth, detection)  │  ← one statement / one call each
    ├─────────────────────────────────────┤
    │   Models (ORM) & Schemas (Pydantic) │
    ├─────────────────────────────────────┤
    │  Database (async SQLAlchemy engine) │
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
