"""Task Handlers — task_create, task_update, task_assign, task_status.

Invariants:
    - task_create forces status "backlog"; priority defaults to "medium"
    - Every status write goes through core.plan_status_change, whichever tool performs it
    - task_assign forces status "todo" and lowercases team/agent
    - Each tool emits exactly one activity row, committed together with the task write
    - Activity team is the task's (lowercased) team after the write

Design Decisions:
    - task_update with a status in the patch emits the same status-mapped action as
      task_status (details carry the other changed fields); without a status it emits
      task_updated. One rule for every path, no silent asymmetry
    - updated_by / activity agent default to "system"
"""

from datetime import datetime, timezone
from enum import Enum

from sqlalchemy.ext.asyncio import AsyncSession

from backlog.core.domain_types import (
    ActivityAction, EntityKind, TaskStatus, SYSTEM_AGENT,
)
from backlog.core.task_lifecycle import (
    normalize_actor, plan_status_change, status_action,
)
from backlog.repositories.activity_repository import ActivityRepository
from backlog.repositories.base import commit
from backlog.repositories.task_repository import TaskRepository
from backlog.schemas.task import (
    TaskAssignInput, TaskCreateInput, TaskOut, TaskStatusInput, TaskUpdateInput,
)
from backlog.schemas.validation import parse_input
from backlog.services.record_activity import ActivityRecorder

# Patch keys whose ORM attribute name differs from the tool argument name
_RENAMED_FIELDS = {
    "team": "assigned_team",
    "agent": "assigned_agent",
    "metadata": "metadata_",
}
# An explicit null for these leaves the stored value untouched
_NON_NULLABLE_FIELDS = frozenset({
    "title", "priority", "tags", "deliverables", "metadata",
})


def _dump(task) -> dict:
    return TaskOut.model_validate(task).model_dump(mode="json")


class TaskHandlers:
    """Task write tools. Queue-style reads live in TaskQueryHandlers."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.tasks = TaskRepository(db)
        self.recorder = ActivityRecorder(ActivityRepository(db))

    async def _record_for(self, task, agent, action, details: dict) -> None:
        await self.recorder.record(
            agent, action, details,
            project_id=task.project_id,
            team=task.assigned_team,
            related_id=task.id,
            related_type=EntityKind.TASK.value,
        )

    async def create_task(self, input_data: dict) -> dict:
        """Create a backlog task, optionally pre-assigned to a team/agent."""
        body = parse_input(TaskCreateInput, input_data)
        team = normalize_actor(body.team)
        agent = normalize_actor(body.agent)
        task = await self.tasks.insert({
            "project_id": body.project_id,
            "parent_id": body.parent_id,
            "title": body.title,
            "description": body.description,
            "status": TaskStatus.BACKLOG.value,
            "priority": body.priority.value,
            "assigned_team": team,
            "assigned_agent": agent,
            "estimated_hours": body.estimated_hours,
            "due_date": body.due_date,
            "tags": body.tags,
            "deliverables": body.deliverables,
            "metadata_": body.metadata,
            "created_by": agent or SYSTEM_AGENT,
        })
        await self._record_for(
            task, agent, ActivityAction.TASK_CREATED,
            {"title": body.title, "team": team},
        )
        await commit(self.db, EntityKind.TASK)
        return {"status": "ok", "task": _dump(task)}

    async def update_task(self, input_data: dict) -> dict:
        """Generic patch. A status in the patch follows the status-change rules."""
        body = parse_input(TaskUpdateInput, input_data)
        actor = normalize_actor(body.updated_by) or SYSTEM_AGENT
        patch = body.model_dump(
            mode="json", exclude_unset=True,
            exclude={"task_id", "updated_by", "status", "notes"},
        )

        fields: dict = {"updated_by": actor}
        for name in patch:
            value = getattr(body, name)
            if value is None and name in _NON_NULLABLE_FIELDS:
                continue
            if isinstance(value, Enum):
                value = value.value
            if name in ("team", "agent"):
                value = normalize_actor(value)
            fields[_RENAMED_FIELDS.get(name, name)] = value

        action = ActivityAction.TASK_UPDATED
        details: dict = {"changes": patch}
        if body.status is not None:
            task = await self.tasks.get_one(id=body.task_id)
            fields.update(plan_status_change(
                task, body.status, datetime.now(timezone.utc), body.notes,
            ))
            action = status_action(body.status)
            details["notes"] = body.notes

        task = await self.tasks.update(body.task_id, fields)
        await self._record_for(task, actor, action, details)
        await commit(self.db, EntityKind.TASK)
        return {"status": "ok", "task": _dump(task)}

    async def assign_task(self, input_data: dict) -> dict:
        """Assign to a team (and optionally an agent); moves the task to 'todo'."""
        body = parse_input(TaskAssignInput, input_data)
        team = normalize_actor(body.team)
        agent = normalize_actor(body.agent)

        task = await self.tasks.get_one(id=body.task_id)
        fields = {
            "assigned_team": team,
            "assigned_agent": agent,
            "updated_by": agent or SYSTEM_AGENT,
        }
        fields.update(plan_status_change(
            task, TaskStatus.TODO, datetime.now(timezone.utc),
        ))

        task = await self.tasks.update(body.task_id, fields)
        await self._record_for(
            task, agent, ActivityAction.TASK_ASSIGNED,
            {"team": team, "agent": agent},
        )
        await commit(self.db, EntityKind.TASK)
        return {"status": "ok", "task": _dump(task)}

    async def set_task_status(self, input_data: dict) -> dict:
        """Transition status, applying derived timestamp/blocker side effects."""
        body = parse_input(TaskStatusInput, input_data)
        agent = normalize_actor(body.agent)

        task = await self.tasks.get_one(id=body.task_id)
        fields = plan_status_change(
            task, body.status, datetime.now(timezone.utc), body.notes,
        )
        fields["updated_by"] = agent or SYSTEM_AGENT

        task = await self.tasks.update(body.task_id, fields)
        await self._record_for(
            task, agent, status_action(body.status), {"notes": body.notes},
        )
        await commit(self.db, EntityKind.TASK)
        return {"status": "ok", "task": _dump(task)}
