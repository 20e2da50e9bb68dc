"""Task Query Handlers — task_list, task_my_tasks, task_team_tasks.

Invariants:
    - Without include_done, no listing returns a task whose status is "done"
    - Agent/team filters are lowercased before matching
    - task_list orders newest first; my/team tasks order by priority rank, then newest
    - Read-only: no activity emitted

Design Decisions:
    - An explicit task_list status filter is honored as given (status="done" lists
      done tasks); include_done only governs the unfiltered case
"""

from sqlalchemy.ext.asyncio import AsyncSession

from backlog.core.domain_types import ACTIVE_TASK_STATUSES
from backlog.core.task_lifecycle import normalize_actor
from backlog.repositories.task_repository import TaskRepository
from backlog.schemas.task import (
    AgentTasksInput, TaskListInput, TaskOut, TeamTasksInput,
)
from backlog.schemas.validation import parse_input


def _result(tasks) -> dict:
    return {
        "status": "ok",
        "count": len(tasks),
        "tasks": [TaskOut.model_validate(t).model_dump(mode="json") for t in tasks],
    }


class TaskQueryHandlers:
    """Read-only task listings."""

    def __init__(self, db: AsyncSession):
        self.tasks = TaskRepository(db)

    async def list_tasks(self, input_data: dict) -> dict:
        """Filtered task listing, newest first."""
        body = parse_input(TaskListInput, input_data)
        statuses = None
        if body.status is None and not body.include_done:
            statuses = ACTIVE_TASK_STATUSES
        tasks = await self.tasks.list(
            {
                "project_id": body.project_id,
                "status": body.status.value if body.status else None,
                "assigned_team": normalize_actor(body.team),
                "assigned_agent": normalize_actor(body.agent),
                "priority": body.priority.value if body.priority else None,
            },
            statuses=statuses,
            limit=body.limit,
        )
        return _result(tasks)

    async def my_tasks(self, input_data: dict) -> dict:
        """Tasks assigned to one agent, most urgent first."""
        body = parse_input(AgentTasksInput, input_data)
        tasks = await self.tasks.list(
            {"assigned_agent": normalize_actor(body.agent)},
            statuses=None if body.include_done else ACTIVE_TASK_STATUSES,
            by_priority=True,
            limit=body.limit,
        )
        return _result(tasks)

    async def team_tasks(self, input_data: dict) -> dict:
        """Tasks assigned to one team, most urgent first."""
        body = parse_input(TeamTasksInput, input_data)
        tasks = await self.tasks.list(
            {"assigned_team": normalize_actor(body.team)},
            statuses=None if body.include_done else ACTIVE_TASK_STATUSES,
            by_priority=True,
            limit=body.limit,
        )
        return _result(tasks)
