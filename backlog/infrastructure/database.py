"""Database Session Manager — async engine, session factory, rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - SQLAlchemy exceptions not already translated by a repository become StoreError
    - One manager per process, built by the composition root (main.create_app)
      and disposed by the FastAPI lifespan shutdown; never created lazily

Design Decisions:
    - Manager lives on app.state instead of a module global: tests build their
      own app against a throwaway database without patching
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Pool sizing only applies to networked backends (SQLite uses its own pool)
    - SQLite connections turn on foreign_keys so Task -> Project ownership is
      enforced by the store on every backend
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncContextManager, Callable

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from backlog.core.errors import BacklogError, StoreError
from backlog.repositories.base import describe_store_failure

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AsyncContextManager[AsyncSession]]


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if make_url(database_url).get_backend_name() != "sqlite":
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except BacklogError:
            await session.rollback()
            raise
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Unhandled store error: {e}")
            raise StoreError("execute", "session", describe_store_failure(e))
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        """Close every pooled connection. Called once on shutdown."""
        await self.engine.dispose()
        logger.info("Database engine disposed")


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """FastAPI dependency: the manager owned by the running app."""
    return request.app.state.db_manager


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_db_manager(request).session() as session:
        yield session
