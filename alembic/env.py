"""Alembic Environment — applies backlog schema revisions through asyncpg.

Invariants:
    - projects, tasks and activity_log are registered on Base.metadata before
      any revision runs or autogenerate compares

Design Decisions:
    - Store URL and credential come from the same Settings as the API
      (DATABASE_URL + DATABASE_PASSWORD), so both always target one database
    - Falls back to alembic.ini value when DATABASE_URL is unset (offline SQL generation)
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from backlog.config import load_settings
from backlog.db.base import Base
# Registers the three backlog tables
from backlog.models.project import Project  # noqa: F401
from backlog.models.task import Task  # noqa: F401
from backlog.models.activity_log import ActivityLog  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _get_database_url() -> str:
    """Get DB URL from Settings, or alembic.ini when no DATABASE_URL is set."""
    if os.environ.get("DATABASE_URL"):
        return load_settings().store_url
    return config.get_main_option("sqlalchemy.url")


def run_migrations_offline() -> None:
    """Emit the revision SQL as a script, no connection."""
    context.configure(
        url=_get_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Open a throwaway async engine and apply pending revisions on it."""
    configuration = config.get_section(config.config_ini_section, {})
    configuration["sqlalchemy.url"] = _get_database_url()
    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await connectable.dispose()


def run_migrations_online() -> None:
    """Entry point for `alembic upgrade` against a live store."""
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
