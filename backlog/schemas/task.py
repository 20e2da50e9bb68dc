"""Task Schemas — inputs for the task tools and the task result shape.

Invariants:
    - title is stripped and non-empty
    - project_id / task_id / parent_id must be UUIDs (rejected before any query)
    - Team and agent casing is NOT normalized here: core.normalize_actor owns that rule
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backlog.core.domain_types import Priority, TaskStatus
from backlog.schemas.validation import UtcDatetime


def _strip_title(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty or whitespace")
    return v


class TaskCreateInput(BaseModel):
    """task_create arguments."""
    project_id: UUID
    title: str = Field(min_length=1, max_length=500)
    description: str | None = None
    team: str | None = Field(None, max_length=100)
    agent: str | None = Field(None, max_length=100)
    priority: Priority = Priority.MEDIUM
    parent_id: UUID | None = None
    estimated_hours: float | None = Field(None, ge=0)
    due_date: UtcDatetime | None = None
    tags: list[str] = Field(default_factory=list)
    deliverables: list[Any] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v):
        return _strip_title(v)


class TaskListInput(BaseModel):
    project_id: UUID | None = None
    status: TaskStatus | None = None
    team: str | None = None
    agent: str | None = None
    priority: Priority | None = None
    include_done: bool = False
    limit: int | None = Field(None, ge=1, le=500)


class TaskUpdateInput(BaseModel):
    """task_update arguments. Omitted fields are left untouched."""
    task_id: UUID
    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = None
    status: TaskStatus | None = None
    notes: str | None = None
    priority: Priority | None = None
    team: str | None = Field(None, max_length=100)
    agent: str | None = Field(None, max_length=100)
    parent_id: UUID | None = None
    estimated_hours: float | None = Field(None, ge=0)
    actual_hours: float | None = Field(None, ge=0)
    due_date: UtcDatetime | None = None
    tags: list[str] | None = None
    deliverables: list[Any] | None = None
    metadata: dict[str, Any] | None = None
    updated_by: str | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v):
        return _strip_title(v)


class TaskAssignInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: UUID
    team: str = Field(min_length=1, max_length=100)
    agent: str | None = Field(None, max_length=100)


class TaskStatusInput(BaseModel):
    task_id: UUID
    status: TaskStatus
    agent: str | None = None
    notes: str | None = None


class AgentTasksInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    agent: str = Field(min_length=1)
    include_done: bool = False
    limit: int | None = Field(None, ge=1, le=500)


class TeamTasksInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    team: str = Field(min_length=1)
    include_done: bool = False
    limit: int | None = Field(None, ge=1, le=500)


class TaskOut(BaseModel):
    """Task as returned to tool callers."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    project_id: UUID
    parent_id: UUID | None
    title: str
    description: str | None
    status: str
    priority: str
    assigned_team: str | None
    assigned_agent: str | None
    estimated_hours: float | None
    actual_hours: float | None
    due_date: UtcDatetime | None
    started_at: UtcDatetime | None
    completed_at: UtcDatetime | None
    blocker_reason: str | None
    deliverables: list[Any]
    tags: list[str]
    metadata: dict[str, Any] = Field(validation_alias="metadata_")
    created_by: str | None
    updated_by: str | None
    created_at: UtcDatetime
    updated_at: UtcDatetime
