"""
Alembic Migration Environment (fauna tables)
=============================================

What:  Migrates the four fauna tables (especies, usuarios, avistamientos,
       imagenes) that fauna_api.models maps onto Base.metadata.
How:   DATABASE_URL is read through fauna_api.config.settings, the same
       value the API's engine uses, and overrides alembic.ini. Online runs
       open an async connection and hand Alembic a sync facade through
       `connection.run_sync`; offline runs print the SQL instead.

    alembic upgrade head                        → revision 001 on Postgres
    alembic upgrade head --sql                  → DDL to stdout, no connection
    DATABASE_URL=sqlite+aiosqlite:///fauna.db alembic upgrade head
                                                → local file, batch ALTERs

Column types are compared on --autogenerate, so changing a model column's type
(say a String length) shows up in the new revision. SQLite cannot ALTER columns
in place, so its migrations are rendered as batch (copy-and-swap) operations.
"""

import asyncio
from logging.config import fileConfig
from typing import Any, Dict

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from fauna_api.config import settings
from fauna_api.database import Base
from fauna_api.models.avistamiento import Avistamiento  # noqa: F401
from fauna_api.models.especie import Especie  # noqa: F401
from fauna_api.models.imagen import Imagen  # noqa: F401
from fauna_api.models.usuario import Usuario  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.database_url)


def _configure_options(url: str) -> Dict[str, Any]:
    """Options shared by offline and online runs."""
    return {
        "target_metadata": Base.metadata,
        "compare_type": True,
        "render_as_batch": url.startswith("sqlite"),
    }


def run_migrations_offline() -> None:
    """Print the DDL for the pending fauna revisions without connecting."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(url),
    )

    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection) -> None:
    context.configure(connection=connection, **_configure_options(settings.database_url))

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with engine.connect() as connection:
        await connection.run_sync(_migrate)

    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
