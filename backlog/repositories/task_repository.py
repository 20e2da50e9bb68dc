"""Task Repository — task listings with status membership and explicit priority order.

Invariants:
    - by_priority sorts by PRIORITY_RANK (critical first), never by the raw string
    - Secondary order is always created_at DESC
    - list_summaries projects (status, priority, assigned_team) only
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import case, select
from sqlalchemy.exc import SQLAlchemyError

from backlog.core.domain_types import (
    DEFAULT_TASK_LIMIT, PRIORITY_RANK, EntityKind, TaskStatus,
)
from backlog.models.task import Task
from backlog.repositories.base import MutableSqlRepository, store_error

_PRIORITY_ORDER = case(
    {p.value: rank for p, rank in PRIORITY_RANK.items()},
    value=Task.priority,
    else_=len(PRIORITY_RANK),
)


class TaskRepository(MutableSqlRepository):
    model = Task
    entity_kind = EntityKind.TASK
    default_limit = DEFAULT_TASK_LIMIT

    def _filters(self) -> dict:
        return {
            "id": Task.id,
            "project_id": Task.project_id,
            "parent_id": Task.parent_id,
            "status": Task.status,
            "priority": Task.priority,
            "assigned_team": Task.assigned_team,
            "assigned_agent": Task.assigned_agent,
        }

    async def list_summaries(self, project_id: UUID) -> Sequence[dict]:
        """Every task of a project, projected to the dashboard columns."""
        query = select(
            Task.status, Task.priority, Task.assigned_team,
        ).where(Task.project_id == project_id)
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise store_error("list", self.entity_kind, e)
        return [dict(row) for row in result.mappings().all()]

    async def list(
        self,
        filters: dict[str, Any] | None = None,
        *,
        statuses: Sequence[TaskStatus] | None = None,
        by_priority: bool = False,
        limit: int | None = None,
    ) -> list:
        query = self._apply_filters(select(Task), filters or {})
        if statuses is not None:
            query = query.where(Task.status.in_([s.value for s in statuses]))
        if by_priority:
            query = query.order_by(_PRIORITY_ORDER)
        query = query.order_by(Task.created_at.desc())
        query = query.limit(limit or self.default_limit)
        return await self._scalars("list", query)
