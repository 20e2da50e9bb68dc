"""Project Repository — projects ordered by most recently updated, capped at 20."""

from backlog.core.domain_types import DEFAULT_PROJECT_LIMIT, EntityKind
from backlog.models.project import Project
from backlog.repositories.base import MutableSqlRepository


class ProjectRepository(MutableSqlRepository):
    model = Project
    entity_kind = EntityKind.PROJECT
    default_limit = DEFAULT_PROJECT_LIMIT

    def _filters(self) -> dict:
        return {
            "id": Project.id,
            "slug": Project.slug,
            "status": Project.status,
        }

    def _default_order(self) -> list:
        return [Project.updated_at.desc()]
