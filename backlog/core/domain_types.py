"""Domain Types — enums and lookup tables shared by every layer.

Invariants:
    - All valid states encoded as Enums, no raw string matching in domain logic
    - PRIORITY_RANK is a total order over Priority: critical < high < medium < low
    - STATUS_ACTIONS maps every TaskStatus to exactly one ActivityAction
    - ACTIVE_TASK_STATUSES is every TaskStatus except DONE

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (tool results are JSON)
    - Status-named activity actions come from an explicit table, never from
      f"task_{status}" concatenation, so adding a status without an action fails loudly
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ProjectId = NewType("ProjectId", UUID)
TaskId = NewType("TaskId", UUID)
ActivityId = NewType("ActivityId", UUID)


# ─── Constants ───────────────────────────────────────────────────

SYSTEM_AGENT = "system"
DEFAULT_PROJECT_LIMIT = 20
DEFAULT_TASK_LIMIT = 50
DEFAULT_ACTIVITY_LIMIT = 50
DASHBOARD_ACTIVITY_LIMIT = 10


# ─── Enums ───────────────────────────────────────────────────────

class ProjectStatus(str, Enum):
    """Project lifecycle states. No derived side effects on transition."""
    PLANNING = "planning"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class TaskStatus(str, Enum):
    """Task lifecycle states. Any state may move to any other state."""
    BACKLOG = "backlog"
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    BLOCKED = "blocked"
    DONE = "done"


class Priority(str, Enum):
    """Four-level task priority."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EntityKind(str, Enum):
    """Record kinds, used in store errors and activity related_type."""
    PROJECT = "project"
    TASK = "task"
    ACTIVITY = "activity_log"


class ActivityAction(str, Enum):
    """Activity actions emitted by the core's mutating operations."""
    PROJECT_CREATED = "project_created"
    PROJECT_UPDATED = "project_updated"
    TASK_CREATED = "task_created"
    TASK_UPDATED = "task_updated"
    TASK_ASSIGNED = "task_assigned"
    TASK_BACKLOG = "task_backlog"
    TASK_TODO = "task_todo"
    TASK_IN_PROGRESS = "task_in_progress"
    TASK_REVIEW = "task_review"
    TASK_BLOCKED = "task_blocked"
    TASK_DONE = "task_done"


class IdentifierKind(str, Enum):
    """How a project identifier string is looked up."""
    UUID = "uuid"
    SLUG = "slug"


# ─── Lookup Tables ───────────────────────────────────────────────

PRIORITY_RANK: dict[Priority, int] = {
    Priority.CRITICAL: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}

STATUS_ACTIONS: dict[TaskStatus, ActivityAction] = {
    TaskStatus.BACKLOG: ActivityAction.TASK_BACKLOG,
    TaskStatus.TODO: ActivityAction.TASK_TODO,
    TaskStatus.IN_PROGRESS: ActivityAction.TASK_IN_PROGRESS,
    TaskStatus.REVIEW: ActivityAction.TASK_REVIEW,
    TaskStatus.BLOCKED: ActivityAction.TASK_BLOCKED,
    TaskStatus.DONE: ActivityAction.TASK_DONE,
}

ACTIVE_TASK_STATUSES: tuple[TaskStatus, ...] = tuple(
    s for s in TaskStatus if s is not TaskStatus.DONE
)
