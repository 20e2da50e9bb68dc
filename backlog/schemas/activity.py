"""Activity Schemas — inputs for the activity tools and the activity result shape."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from backlog.schemas.validation import UtcDatetime


class ActivityLogInput(BaseModel):
    """activity_log arguments: a free-form action recorded by an agent."""
    model_config = ConfigDict(str_strip_whitespace=True)

    agent: str = Field(min_length=1, max_length=100)
    action: str = Field(min_length=1, max_length=100)
    details: dict[str, Any] = Field(default_factory=dict)
    project_id: UUID | None = None
    team: str | None = Field(None, max_length=100)
    related_id: UUID | None = None
    related_type: str | None = Field(None, max_length=50)


class ActivityQueryInput(BaseModel):
    project_id: UUID | None = None
    agent: str | None = None
    team: str | None = None
    action: str | None = None
    related_id: UUID | None = None
    limit: int | None = Field(None, ge=1, le=500)


class ActivityOut(BaseModel):
    """Activity record as returned to tool callers."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    project_id: UUID | None
    team: str | None
    agent: str
    action: str
    details: dict[str, Any]
    related_id: UUID | None
    related_type: str | None
    created_at: UtcDatetime
