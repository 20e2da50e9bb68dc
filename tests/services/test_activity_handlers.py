"""Activity Handlers — activity_log and activity_get."""

from uuid import uuid4

import pytest

from backlog.core.errors import ToolValidationError


async def test_log_returns_acknowledgement(dispatch):
    result = await dispatch.execute("activity_log", {
        "agent": "Max", "action": "deployed", "details": {"env": "staging"},
    })
    assert result["status"] == "ok"
    assert result["message"] == "Activity logged successfully"
    assert result["activity_id"]


async def test_log_then_get_round_trip(dispatch, project):
    await dispatch.execute("activity_log", {
        "agent": "Max",
        "action": "deployed",
        "team": "DevForge",
        "project_id": project["id"],
        "details": {"env": "staging"},
    })
    result = await dispatch.execute("activity_get", {"agent": "MAX"})
    assert result["count"] == 1
    row = result["activity"][0]
    assert row["agent"] == "max"
    assert row["team"] == "devforge"
    assert row["action"] == "deployed"
    assert row["project_id"] == project["id"]
    assert row["details"] == {"env": "staging"}


async def test_get_filters_by_project_team_action_and_related(dispatch, project):
    task = (await dispatch.execute(
        "task_create", {"project_id": project["id"], "title": "T", "team": "devforge"},
    ))["task"]
    await dispatch.execute("activity_log", {"agent": "x", "action": "note"})

    by_project = await dispatch.execute("activity_get", {"project_id": project["id"]})
    assert [a["action"] for a in by_project["activity"]] == [
        "task_created", "project_created",
    ]

    by_team = await dispatch.execute("activity_get", {"team": "DEVFORGE"})
    assert [a["action"] for a in by_team["activity"]] == ["task_created"]

    by_action = await dispatch.execute("activity_get", {"action": "note"})
    assert by_action["count"] == 1

    by_related = await dispatch.execute("activity_get", {"related_id": task["id"]})
    assert by_related["count"] == 1


async def test_get_newest_first_with_limit(dispatch):
    for i in range(5):
        await dispatch.execute("activity_log", {"agent": "bot", "action": f"step_{i}"})
    result = await dispatch.execute("activity_get", {"limit": 3})
    assert [a["action"] for a in result["activity"]] == ["step_4", "step_3", "step_2"]


async def test_get_unknown_project_is_empty(dispatch):
    result = await dispatch.execute("activity_get", {"project_id": str(uuid4())})
    assert result["count"] == 0


async def test_log_requires_agent_and_action(dispatch):
    with pytest.raises(ToolValidationError) as exc:
        await dispatch.execute("activity_log", {"action": "x"})
    assert exc.value.field == "agent"
    with pytest.raises(ToolValidationError) as exc:
        await dispatch.execute("activity_log", {"agent": "x", "action": "  "})
    assert exc.value.field == "action"
