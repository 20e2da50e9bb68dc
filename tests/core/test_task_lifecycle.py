"""Task Lifecycle Rules — derived field changes on status writes.

Tests cover:
    - started_at / completed_at stamped once, never overwritten
    - blocker_reason set only on BLOCKED with notes, cleared on every other status
    - status_action maps each status to its activity action
    - normalize_actor lowercases and treats blank as unassigned
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from backlog.core.domain_types import ActivityAction, TaskStatus
from backlog.core.task_lifecycle import (
    normalize_actor, plan_status_change, status_action,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
EARLIER = NOW - timedelta(days=2)


def _task(started_at=None, completed_at=None):
    return SimpleNamespace(started_at=started_at, completed_at=completed_at)


def test_entering_in_progress_stamps_started_at():
    changes = plan_status_change(_task(), TaskStatus.IN_PROGRESS, NOW)
    assert changes["status"] == "in_progress"
    assert changes["started_at"] == NOW


def test_reentering_in_progress_keeps_first_started_at():
    changes = plan_status_change(_task(started_at=EARLIER), TaskStatus.IN_PROGRESS, NOW)
    assert "started_at" not in changes


def test_entering_done_stamps_completed_at():
    changes = plan_status_change(_task(started_at=EARLIER), TaskStatus.DONE, NOW)
    assert changes["completed_at"] == NOW
    assert "started_at" not in changes


def test_reentering_done_keeps_first_completed_at():
    changes = plan_status_change(_task(completed_at=EARLIER), TaskStatus.DONE, NOW)
    assert "completed_at" not in changes


def test_done_without_in_progress_leaves_started_at_unset():
    changes = plan_status_change(_task(), TaskStatus.DONE, NOW)
    assert "started_at" not in changes


def test_blocked_with_notes_sets_blocker_reason():
    changes = plan_status_change(_task(), TaskStatus.BLOCKED, NOW, "waiting on API keys")
    assert changes["blocker_reason"] == "waiting on API keys"


def test_blocked_without_notes_leaves_blocker_reason_untouched():
    changes = plan_status_change(_task(), TaskStatus.BLOCKED, NOW)
    assert "blocker_reason" not in changes


@pytest.mark.parametrize("status", [
    s for s in TaskStatus if s is not TaskStatus.BLOCKED
])
def test_every_other_status_clears_blocker_reason(status):
    changes = plan_status_change(_task(), status, NOW, "ignored notes")
    assert changes["blocker_reason"] is None


def test_plan_does_not_mutate_task():
    task = _task()
    plan_status_change(task, TaskStatus.DONE, NOW)
    assert task.completed_at is None


def test_status_action_covers_every_status():
    assert status_action(TaskStatus.IN_PROGRESS) is ActivityAction.TASK_IN_PROGRESS
    assert status_action(TaskStatus.DONE) is ActivityAction.TASK_DONE
    assert {status_action(s) for s in TaskStatus} == {
        ActivityAction.TASK_BACKLOG, ActivityAction.TASK_TODO,
        ActivityAction.TASK_IN_PROGRESS, ActivityAction.TASK_REVIEW,
        ActivityAction.TASK_BLOCKED, ActivityAction.TASK_DONE,
    }


@pytest.mark.parametrize("raw,expected", [
    ("DevForge", "devforge"),
    ("  Alice ", "alice"),
    ("   ", None),
    ("", None),
    (None, None),
])
def test_normalize_actor(raw, expected):
    assert normalize_actor(raw) == expected
