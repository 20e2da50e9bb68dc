"""Boundary Protocols — contracts between core/services and the data access layer.

Invariants:
    - Handlers depend on these Protocols, never on a concrete SQLAlchemy query
    - get_one raises NotFoundError on zero rows; every store failure raises StoreError
    - ActivityRepository has no update: the activity trail is append-only
    - Repositories flush but never commit: the owning handler commits the unit of work

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
"""

from typing import Any, Protocol, Sequence
from uuid import UUID

from backlog.core.domain_types import TaskStatus


class ProjectRepository(Protocol):
    """Contract for project persistence."""
    async def insert(self, fields: dict[str, Any]) -> Any: ...
    async def get_one(self, **filters: Any) -> Any: ...
    async def list(
        self, filters: dict[str, Any] | None = None, *, limit: int | None = None,
    ) -> Sequence[Any]: ...
    async def update(self, entity_id: UUID, fields: dict[str, Any]) -> Any: ...


class TaskRepository(Protocol):
    """Contract for task persistence and the task-side aggregation query."""
    async def insert(self, fields: dict[str, Any]) -> Any: ...
    async def get_one(self, **filters: Any) -> Any: ...
    async def list_summaries(self, project_id: UUID) -> Sequence[dict]: ...
    async def list(
        self,
        filters: dict[str, Any] | None = None,
        *,
        statuses: Sequence[TaskStatus] | None = None,
        by_priority: bool = False,
        limit: int | None = None,
    ) -> Sequence[Any]: ...
    async def update(self, entity_id: UUID, fields: dict[str, Any]) -> Any: ...


class ActivityRepository(Protocol):
    """Contract for the append-only activity trail."""
    async def insert(self, fields: dict[str, Any]) -> Any: ...
    async def list(
        self, filters: dict[str, Any] | None = None, *, limit: int | None = None,
    ) -> Sequence[Any]: ...
