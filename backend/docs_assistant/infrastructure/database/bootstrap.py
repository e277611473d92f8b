"""Database bootstrap — create the database, the pgvector extension and all tables."""

import logging

import asyncpg
from sqlalchemy import text
from sqlalchemy.engine import make_url

from docs_assistant.config import get_settings
from docs_assistant.infrastructure.database.base import Base
from docs_assistant.infrastructure.database.session import engine

# Registers every ORM table on Base.metadata
from docs_assistant.infrastructure.database import models  # noqa: F401

logger = logging.getLogger(__name__)


def maintenance_url(database_url: str) -> str:
    """DSN for the ``postgres`` maintenance database, in plain libpq form.

    asyncpg only understands ``postgresql://`` URLs, so any SQLAlchemy
    driver suffix such as ``+asyncpg`` is dropped.
    """
    url = make_url(database_url).set(drivername="postgresql", database="postgres")
    return url.render_as_string(hide_password=False)


async def ensure_database_exists() -> None:
    """Create the PostgreSQL database if it does not yet exist.

    Connects to the default ``postgres`` maintenance database, checks for the
    target database name, and issues ``CREATE DATABASE`` when missing.
    """
    settings = get_settings()
    db_name = make_url(settings.database_url).database
    if not db_name:
        return

    try:
        conn = await asyncpg.connect(maintenance_url(settings.database_url))
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
            else:
                logger.debug("Database '%s' already exists", db_name)
        finally:
            await conn.close()
    except (OSError, asyncpg.PostgresError) as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


async def init_database() -> None:
    """Ensure the database, the ``vector`` extension and all tables exist."""
    await ensure_database_exists()

    # pgvector must exist before resource_chunks is created
    async with engine.begin() as conn:
        await conn.execute(text("CREATE EXTENSION IF NOT EXISTS vector"))
        await conn.run_sync(Base.metadata.create_all)
