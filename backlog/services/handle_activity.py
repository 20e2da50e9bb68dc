"""Activity Handlers — activity_log, activity_get.

Invariants:
    - activity_log writes exactly one row through ActivityRecorder and commits it
    - activity_get is read-only, newest first, capped at 50 by default
    - agent/team filters are lowercased, matching how rows are stored
"""

from sqlalchemy.ext.asyncio import AsyncSession

from backlog.core.domain_types import EntityKind
from backlog.core.task_lifecycle import normalize_actor
from backlog.repositories.activity_repository import ActivityRepository
from backlog.repositories.base import commit
from backlog.schemas.activity import ActivityLogInput, ActivityOut, ActivityQueryInput
from backlog.schemas.validation import parse_input
from backlog.services.record_activity import ActivityRecorder


class ActivityHandlers:
    """Direct access to the activity trail for agents."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.activity = ActivityRepository(db)
        self.recorder = ActivityRecorder(self.activity)

    async def log_activity(self, input_data: dict) -> dict:
        """Record a free-form action by an agent."""
        body = parse_input(ActivityLogInput, input_data)
        row = await self.recorder.record(
            body.agent, body.action, body.details,
            project_id=body.project_id,
            team=body.team,
            related_id=body.related_id,
            related_type=body.related_type,
        )
        await commit(self.db, EntityKind.ACTIVITY)
        return {
            "status": "ok",
            "activity_id": str(row.id),
            "message": "Activity logged successfully",
        }

    async def get_activity(self, input_data: dict) -> dict:
        body = parse_input(ActivityQueryInput, input_data)
        rows = await self.activity.list(
            {
                "project_id": body.project_id,
                "agent": normalize_actor(body.agent),
                "team": normalize_actor(body.team),
                "action": body.action,
                "related_id": body.related_id,
            },
            limit=body.limit,
        )
        return {
            "status": "ok",
            "count": len(rows),
            "activity": [
                ActivityOut.model_validate(r).model_dump(mode="json") for r in rows
            ],
        }
