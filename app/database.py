"""Async engine and session management for practice session storage.

Sessions handed out here are lazy: no connection is checked out until the
first statement runs, so endpoints that never touch the database keep
working while it is unreachable. A configured schema is applied through the
asyncpg ``server_settings`` of every new connection rather than per session.
"""

from __future__ import annotations

import logging
import re
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from app.config.settings import DatabaseConfig, settings

# Import models so they are attached to Base.metadata before table creation
from app.models import Base  # noqa: F401 - ensures metadata is registered
from app.models import session  # noqa: F401

logger = logging.getLogger(__name__)

_SCHEMA_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _normalise_schema_name(raw_schema: str | None) -> str | None:
    """Return a sanitised schema name or None when invalid/empty."""

    if raw_schema is None:
        return None

    schema = raw_schema.strip()
    if not schema:
        return None

    if not _SCHEMA_NAME_PATTERN.fullmatch(schema):
        logger.warning(
            "Ignoring invalid schema name '%s'; falling back to default search_path.",
            raw_schema,
        )
        return None

    return schema


def build_engine_options(
    database: DatabaseConfig,
    *,
    schema: str | None,
    debug: bool = False,
) -> dict[str, Any]:
    """Keyword arguments for `create_async_engine` derived from configuration."""

    options: dict[str, Any] = {
        "echo": debug,
        "pool_pre_ping": True,
    }
    if schema:
        options["connect_args"] = {
            "server_settings": {"search_path": f'"{schema}",public'},
        }
    if database.serverless or debug:
        # Serverless databases pause only when no pooled connection is held.
        options["poolclass"] = NullPool
    return options


_SCHEMA_NAME = _normalise_schema_name(settings.database.db_schema)

if _SCHEMA_NAME:
    # Emit DDL and queries against the configured schema.
    for table in Base.metadata.tables.values():
        if table.schema is None:
            table.schema = _SCHEMA_NAME


engine: AsyncEngine = create_async_engine(
    settings.database.url,
    **build_engine_options(settings.database, schema=_SCHEMA_NAME, debug=settings.debug),
)

SessionFactory = async_sessionmaker(
    engine,
    expire_on_commit=False,
    class_=AsyncSession,
)


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """Yield a session that connects on first use and is closed afterwards."""

    async with SessionFactory() as db_session:
        yield db_session


async def get_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency wrapper around `session_scope`."""

    async with session_scope() as db_session:
        yield db_session


async def init_models() -> None:
    """Create the schema (when configured) and any missing tables."""

    async with engine.begin() as conn:
        if _SCHEMA_NAME:
            await conn.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{_SCHEMA_NAME}"'))
        await conn.run_sync(Base.metadata.create_all)

    logger.info(
        "Ensured practice session tables in %s.",
        f"schema '{_SCHEMA_NAME}'" if _SCHEMA_NAME else "the default schema",
    )


async def dispose_engine() -> None:
    """Dispose of the engine and release pooled connections."""

    await engine.dispose()
