"""Repository Base — shared insert/get_one/list/update over one ORM model.

Invariants:
    - Every SQLAlchemyError is re-raised as StoreError(operation, entity_kind, message)
    - get_one with zero matches raises NotFoundError, distinct from a store fault
    - Filters are equality predicates on an explicit per-repository column map;
      None values are skipped, unknown names are a programming error (KeyError)
    - Repositories flush, never commit

Design Decisions:
    - Explicit _filters dict over getattr(model, name): every filterable column visible in one place
    - Error messages mirror the session manager's categories, raw driver text only goes to logs
"""

import logging
from typing import Any, ClassVar
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from backlog.core.domain_types import EntityKind
from backlog.core.errors import NotFoundError, StoreError

logger = logging.getLogger(__name__)


def describe_store_failure(exc: SQLAlchemyError) -> str:
    """Caller-safe description of a SQLAlchemy failure."""
    if isinstance(exc, IntegrityError):
        return "Integrity constraint violated"
    if isinstance(exc, OperationalError):
        return "Connection or operational error"
    if isinstance(exc, DBAPIError):
        return "Database driver error"
    return "Database operation failed"


def store_error(
    operation: str, entity_kind: EntityKind, exc: SQLAlchemyError,
) -> StoreError:
    logger.error(
        f"Store {operation} on {entity_kind.value} failed: {exc}",
        extra={"operation": operation, "entity_kind": entity_kind.value},
    )
    return StoreError(operation, entity_kind.value, describe_store_failure(exc))


async def commit(db: AsyncSession, entity_kind: EntityKind) -> None:
    """Commit the unit of work, translating store failures."""
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        raise store_error("commit", entity_kind, e)


class SqlRepository:
    """Generic repository. Subclasses set model, entity_kind, limits and filters."""

    model: ClassVar[type]
    entity_kind: ClassVar[EntityKind]
    default_limit: ClassVar[int]

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Subclass hooks ──────────────────────────────────────────

    def _filters(self) -> dict[str, Any]:
        raise NotImplementedError

    def _default_order(self) -> list:
        return [self.model.created_at.desc()]

    # ─── Query helpers ───────────────────────────────────────────

    def _apply_filters(self, query: Select, filters: dict[str, Any]) -> Select:
        columns = self._filters()
        for name, value in filters.items():
            if value is None:
                continue
            query = query.where(columns[name] == value)
        return query

    async def _scalars(self, operation: str, query: Select) -> list:
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise store_error(operation, self.entity_kind, e)
        return list(result.scalars().all())

    # ─── Operations ──────────────────────────────────────────────

    async def insert(self, fields: dict[str, Any]):
        """Add a row and flush so server-side values (id, defaults) are populated."""
        row = self.model(**fields)
        try:
            self.db.add(row)
            await self.db.flush()
        except SQLAlchemyError as e:
            raise store_error("insert", self.entity_kind, e)
        return row

    async def get_one(self, **filters: Any):
        query = self._apply_filters(select(self.model), filters).limit(1)
        rows = await self._scalars("select", query)
        if not rows:
            raise NotFoundError(self.entity_kind.value, filters)
        return rows[0]

    async def list(
        self, filters: dict[str, Any] | None = None, *, limit: int | None = None,
    ) -> list:
        query = self._apply_filters(select(self.model), filters or {})
        query = query.order_by(*self._default_order())
        query = query.limit(limit or self.default_limit)
        return await self._scalars("list", query)


class MutableSqlRepository(SqlRepository):
    """Repository for entities that support partial updates."""

    async def update(self, entity_id: UUID, fields: dict[str, Any]):
        """Patch the given attributes on one row. NotFoundError if absent."""
        row = await self.get_one(id=entity_id)
        for name, value in fields.items():
            setattr(row, name, value)
        try:
            await self.db.flush()
        except SQLAlchemyError as e:
            raise store_error("update", self.entity_kind, e)
        return row
