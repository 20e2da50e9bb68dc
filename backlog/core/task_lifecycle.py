"""Task Lifecycle Rules — derived field changes for status transitions and assignment.

Invariants:
    - plan_status_change is PURE: returns a field-change dict, does NOT mutate the task
    - started_at is stamped only when entering IN_PROGRESS with no prior started_at
    - completed_at is stamped only when entering DONE with no prior completed_at
    - blocker_reason is set only when entering BLOCKED with notes, and cleared by
      every transition to any other status (even without notes)
    - Any status may move to any other status: no forbidden-transition graph

Design Decisions:
    - Every path that writes status (status tool, generic update, assignment)
      goes through plan_status_change so the invariants hold regardless of entry point
    - now is a parameter: callers pass datetime.now(timezone.utc), tests pass fixed values
"""

from datetime import datetime
from typing import Protocol

from backlog.core.domain_types import (
    ActivityAction, TaskStatus, STATUS_ACTIONS,
)


class TaskTimestamps(Protocol):
    """Structural view of the task fields the transition rules read."""
    started_at: datetime | None
    completed_at: datetime | None


def plan_status_change(
    task: TaskTimestamps,
    new_status: TaskStatus,
    now: datetime,
    notes: str | None = None,
) -> dict:
    """Field changes to apply atomically with a status write."""
    changes: dict = {"status": new_status.value}

    if new_status is TaskStatus.IN_PROGRESS and task.started_at is None:
        changes["started_at"] = now
    if new_status is TaskStatus.DONE and task.completed_at is None:
        changes["completed_at"] = now

    if new_status is TaskStatus.BLOCKED:
        if notes:
            changes["blocker_reason"] = notes
    else:
        changes["blocker_reason"] = None

    return changes


def status_action(status: TaskStatus) -> ActivityAction:
    """Activity action recorded when a task enters the given status."""
    return STATUS_ACTIONS[status]


def normalize_actor(name: str | None) -> str | None:
    """Teams and agents are stored lowercase; blank means unassigned."""
    if name is None:
        return None
    name = name.strip().lower()
    return name or None
