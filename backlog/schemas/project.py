"""Project Schemas — inputs for the project tools and the project result shape.

Invariants:
    - name is stripped and non-empty
    - ProjectUpdateInput only reports fields the caller actually sent (exclude_unset)
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backlog.core.domain_types import ProjectStatus
from backlog.schemas.validation import UtcDatetime


class ProjectCreateInput(BaseModel):
    """project_create arguments."""
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    template: str | None = Field(None, max_length=100)
    autonomous: bool = False
    tech_stack: dict[str, Any] | None = None
    agent: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ProjectGetInput(BaseModel):
    """project_get arguments: a UUID or a slug."""
    identifier: str = Field(min_length=1)


class ProjectListInput(BaseModel):
    status: ProjectStatus | None = None
    limit: int | None = Field(None, ge=1, le=500)


class ProjectUpdateInput(BaseModel):
    """project_update arguments. Omitted fields are left untouched."""
    project_id: UUID
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    status: ProjectStatus | None = None
    settings: dict[str, Any] | None = None
    tech_stack: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None
    agent: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ProjectOut(BaseModel):
    """Project as returned to tool callers."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    slug: str
    description: str | None
    status: str
    template: str | None
    tech_stack: dict[str, Any]
    settings: dict[str, Any]
    metadata: dict[str, Any] = Field(validation_alias="metadata_")
    created_at: UtcDatetime
    updated_at: UtcDatetime
