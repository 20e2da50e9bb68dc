"""Activity Recorder — the single write path into the append-only activity trail.

Invariants:
    - record() inserts exactly one ActivityLog row per call
    - Missing optional context (project, team, related id/type) is stored as null, never raises
    - agent defaults to "system"; agent and team are stored lowercase
    - Store failures propagate: a mutating tool whose activity write fails has failed

Design Decisions:
    - Not best-effort: the recorder shares the caller's session, so the entity
      write and the activity write commit (or roll back) together
"""

import logging
from typing import Any
from uuid import UUID

from backlog.core.domain_types import ActivityAction, SYSTEM_AGENT
from backlog.core.repository_protocols import ActivityRepository
from backlog.core.task_lifecycle import normalize_actor

logger = logging.getLogger(__name__)


class ActivityRecorder:
    """Appends activity rows through an ActivityRepository."""

    def __init__(self, activity: ActivityRepository):
        self.activity = activity

    async def record(
        self,
        agent: str | None,
        action: ActivityAction | str,
        details: dict[str, Any] | None = None,
        *,
        project_id: UUID | None = None,
        team: str | None = None,
        related_id: UUID | None = None,
        related_type: str | None = None,
    ):
        actor = normalize_actor(agent) or SYSTEM_AGENT
        action_name = action.value if isinstance(action, ActivityAction) else action
        row = await self.activity.insert({
            "agent": actor,
            "action": action_name,
            "details": details or {},
            "project_id": project_id,
            "team": normalize_actor(team),
            "related_id": related_id,
            "related_type": related_type,
        })
        logger.info(
            f"Activity recorded: {action_name}",
            extra={"agent": actor, "project_id": str(project_id) if project_id else None},
        )
        return row
