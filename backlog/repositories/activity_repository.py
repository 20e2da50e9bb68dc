"""Activity Repository — append-only: insert and list, no update.

Invariants:
    - Inherits SqlRepository (not MutableSqlRepository): no update path exists
    - Newest first, capped at 50 unless the caller sets a limit
"""

from backlog.core.domain_types import DEFAULT_ACTIVITY_LIMIT, EntityKind
from backlog.models.activity_log import ActivityLog
from backlog.repositories.base import SqlRepository


class ActivityRepository(SqlRepository):
    model = ActivityLog
    entity_kind = EntityKind.ACTIVITY
    default_limit = DEFAULT_ACTIVITY_LIMIT

    def _filters(self) -> dict:
        return {
            "id": ActivityLog.id,
            "project_id": ActivityLog.project_id,
            "agent": ActivityLog.agent,
            "team": ActivityLog.team,
            "action": ActivityLog.action,
            "related_id": ActivityLog.related_id,
        }
