"""Project Handlers — project_create, project_get, project_list, project_update.

Invariants:
    - slug is always to_slug(name); a name that normalizes to "" is rejected
    - project_create forces status "planning"
    - project_update regenerates slug only when name is in the patch
    - create/update each emit exactly one activity row, committed with the write
    - project_get: UUID-shaped identifier looks up by id, anything else by slug

Design Decisions:
    - Slug uniqueness enforced by the unique index: a duplicate surfaces as StoreError
    - No side effects on project status transitions
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backlog.core.domain_types import (
    ActivityAction, EntityKind, IdentifierKind, ProjectStatus,
)
from backlog.core.errors import ToolValidationError
from backlog.core.identifiers import classify_identifier, to_slug
from backlog.repositories.activity_repository import ActivityRepository
from backlog.repositories.base import commit
from backlog.repositories.project_repository import ProjectRepository
from backlog.schemas.project import (
    ProjectCreateInput, ProjectGetInput, ProjectListInput,
    ProjectOut, ProjectUpdateInput,
)
from backlog.schemas.validation import parse_input
from backlog.services.record_activity import ActivityRecorder


def _slug_for(name: str) -> str:
    slug = to_slug(name)
    if not slug:
        raise ToolValidationError(
            "name must contain at least one letter or digit", "name",
        )
    return slug


def _dump(project) -> dict:
    return ProjectOut.model_validate(project).model_dump(mode="json")


class ProjectHandlers:
    """Project lifecycle tools."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.projects = ProjectRepository(db)
        self.recorder = ActivityRecorder(ActivityRepository(db))

    async def create_project(self, input_data: dict) -> dict:
        """Create a project in 'planning' with a slug derived from its name."""
        body = parse_input(ProjectCreateInput, input_data)
        project = await self.projects.insert({
            "name": body.name,
            "slug": _slug_for(body.name),
            "description": body.description,
            "template": body.template,
            "status": ProjectStatus.PLANNING.value,
            "settings": {"autonomous": body.autonomous},
            "tech_stack": body.tech_stack or {},
            "metadata_": {},
        })
        await self.recorder.record(
            body.agent, ActivityAction.PROJECT_CREATED,
            {"name": body.name, "template": body.template},
            project_id=project.id,
            related_id=project.id,
            related_type=EntityKind.PROJECT.value,
        )
        await commit(self.db, EntityKind.PROJECT)
        return {"status": "ok", "project": _dump(project)}

    async def get_project(self, input_data: dict) -> dict:
        """Look up a project by id or slug."""
        body = parse_input(ProjectGetInput, input_data)
        identifier = body.identifier.strip()
        if classify_identifier(identifier) is IdentifierKind.UUID:
            project = await self.projects.get_one(id=UUID(identifier))
        else:
            project = await self.projects.get_one(slug=identifier)
        return {"status": "ok", "project": _dump(project)}

    async def list_projects(self, input_data: dict) -> dict:
        """Most recently updated projects, optionally filtered by status."""
        body = parse_input(ProjectListInput, input_data)
        status = body.status.value if body.status else None
        projects = await self.projects.list({"status": status}, limit=body.limit)
        return {
            "status": "ok",
            "count": len(projects),
            "projects": [_dump(p) for p in projects],
        }

    async def update_project(self, input_data: dict) -> dict:
        """Patch a project. Renaming regenerates the slug."""
        body = parse_input(ProjectUpdateInput, input_data)
        patch = body.model_dump(
            mode="json", exclude_unset=True, exclude={"project_id", "agent"},
        )

        fields: dict = {}
        if body.name is not None:
            fields["name"] = body.name
            fields["slug"] = _slug_for(body.name)
        if "description" in patch:
            fields["description"] = body.description
        if body.status is not None:
            fields["status"] = body.status.value
        if body.settings is not None:
            fields["settings"] = body.settings
        if body.tech_stack is not None:
            fields["tech_stack"] = body.tech_stack
        if body.metadata is not None:
            fields["metadata_"] = body.metadata

        project = await self.projects.update(body.project_id, fields)
        await self.recorder.record(
            body.agent, ActivityAction.PROJECT_UPDATED, patch,
            project_id=project.id,
            related_id=project.id,
            related_type=EntityKind.PROJECT.value,
        )
        await commit(self.db, EntityKind.PROJECT)
        return {"status": "ok", "project": _dump(project)}
