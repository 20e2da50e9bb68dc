"""Dashboard Handler — project_dashboard: project + task distribution + recent activity.

Invariants:
    - Pure read: no writes, no activity emitted
    - The three fetches run concurrently, each on its own session
    - Any failed fetch (including NotFound on the project) fails the whole call;
      results of the other fetches are discarded, no partial dashboard is returned

Design Decisions:
    - One session per fetch: an AsyncSession cannot run statements concurrently
    - Rows serialized inside their session; only plain dicts cross the gather boundary
    - gather(return_exceptions=True): every fetch settles (and closes its session)
      before the first failure, in project/tasks/activity order, is re-raised
"""

import asyncio
import logging
from uuid import UUID

from backlog.core.dashboard import summarize_tasks
from backlog.core.domain_types import DASHBOARD_ACTIVITY_LIMIT
from backlog.infrastructure.database import SessionFactory
from backlog.repositories.activity_repository import ActivityRepository
from backlog.repositories.project_repository import ProjectRepository
from backlog.repositories.task_repository import TaskRepository
from backlog.schemas.activity import ActivityOut
from backlog.schemas.dashboard import DashboardInput
from backlog.schemas.project import ProjectOut
from backlog.schemas.validation import parse_input

logger = logging.getLogger(__name__)


class DashboardHandlers:
    """Composite read-only view of one project."""

    def __init__(self, sessions: SessionFactory):
        self._sessions = sessions

    async def _fetch_project(self, project_id: UUID) -> dict:
        async with self._sessions() as db:
            project = await ProjectRepository(db).get_one(id=project_id)
            return ProjectOut.model_validate(project).model_dump(mode="json")

    async def _fetch_task_summaries(self, project_id: UUID) -> list[dict]:
        async with self._sessions() as db:
            return await TaskRepository(db).list_summaries(project_id)

    async def _fetch_recent_activity(self, project_id: UUID) -> list[dict]:
        async with self._sessions() as db:
            rows = await ActivityRepository(db).list(
                {"project_id": project_id}, limit=DASHBOARD_ACTIVITY_LIMIT,
            )
            return [
                ActivityOut.model_validate(r).model_dump(mode="json") for r in rows
            ]

    async def project_dashboard(self, input_data: dict) -> dict:
        body = parse_input(DashboardInput, input_data)
        results = await asyncio.gather(
            self._fetch_project(body.project_id),
            self._fetch_task_summaries(body.project_id),
            self._fetch_recent_activity(body.project_id),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        project, summaries, activity = results

        logger.info(
            f"Dashboard built: {len(summaries)} task(s)",
            extra={"project_id": str(body.project_id)},
        )
        return {
            "status": "ok",
            "project": project,
            "task_counts": summarize_tasks(summaries),
            "recent_activity": activity,
        }
