"""Project Handlers — create/get/list/update through ToolDispatch.

Tests cover:
    - project_create derives the slug, forces 'planning', records project_created
    - Duplicate slugs surface as StoreError and leave no partial writes
    - project_get resolves UUIDs and slugs; misses raise NotFoundError
    - project_list ordering, status filter and limit
    - project_update regenerates the slug on rename and records the patch
"""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from backlog.core.errors import NotFoundError, StoreError, ToolValidationError
from backlog.models.activity_log import ActivityLog
from backlog.models.project import Project


async def _activity_rows(db) -> list[ActivityLog]:
    result = await db.execute(select(ActivityLog).order_by(ActivityLog.created_at))
    return list(result.scalars().all())


async def test_create_derives_slug_and_planning_status(project):
    assert project["name"] == "Acme Launch"
    assert project["slug"] == "acme-launch"
    assert project["status"] == "planning"
    assert project["settings"] == {"autonomous": False}
    assert project["tech_stack"] == {}
    assert project["metadata"] == {}


async def test_create_records_one_project_created_activity(project, test_db):
    rows = await _activity_rows(test_db)
    assert len(rows) == 1
    row = rows[0]
    assert row.action == "project_created"
    assert row.agent == "orchestrator"
    assert str(row.project_id) == project["id"]
    assert str(row.related_id) == project["id"]
    assert row.related_type == "project"


async def test_create_defaults_agent_to_system(dispatch, test_db):
    await dispatch.execute("project_create", {"name": "Side Quest"})
    rows = await _activity_rows(test_db)
    assert rows[0].agent == "system"


async def test_create_with_autonomous_and_tech_stack(dispatch):
    result = await dispatch.execute("project_create", {
        "name": "Robo Shop",
        "template": "saas",
        "autonomous": True,
        "tech_stack": {"frontend": "react"},
    })
    assert result["status"] == "ok"
    assert result["project"]["settings"] == {"autonomous": True}
    assert result["project"]["tech_stack"] == {"frontend": "react"}
    assert result["project"]["template"] == "saas"


async def test_duplicate_slug_raises_store_error_without_partial_writes(
    dispatch, project, test_db,
):
    with pytest.raises(StoreError) as exc:
        await dispatch.execute("project_create", {"name": "acme   LAUNCH!"})
    assert exc.value.operation == "insert"
    assert exc.value.entity_kind == "project"
    assert exc.value.context.tool_name == "project_create"

    count = await test_db.scalar(select(func.count()).select_from(Project))
    assert count == 1
    assert len(await _activity_rows(test_db)) == 1


async def test_name_without_letters_or_digits_rejected(dispatch):
    with pytest.raises(ToolValidationError) as exc:
        await dispatch.execute("project_create", {"name": "!!!"})
    assert exc.value.field == "name"


async def test_blank_name_rejected(dispatch):
    with pytest.raises(ToolValidationError):
        await dispatch.execute("project_create", {"name": "   "})


async def test_missing_name_rejected(dispatch):
    with pytest.raises(ToolValidationError) as exc:
        await dispatch.execute("project_create", {})
    assert exc.value.field == "name"


async def test_get_by_uuid_and_slug(dispatch, project):
    by_id = await dispatch.execute("project_get", {"identifier": project["id"]})
    by_slug = await dispatch.execute("project_get", {"identifier": "acme-launch"})
    by_upper = await dispatch.execute(
        "project_get", {"identifier": project["id"].upper()},
    )
    assert by_id["project"]["id"] == project["id"]
    assert by_slug["project"]["id"] == project["id"]
    assert by_upper["project"]["id"] == project["id"]


async def test_get_missing_uuid_raises_not_found(dispatch, project):
    with pytest.raises(NotFoundError) as exc:
        await dispatch.execute("project_get", {"identifier": str(uuid4())})
    assert exc.value.entity_kind == "project"


async def test_get_missing_slug_raises_not_found(dispatch, project):
    with pytest.raises(NotFoundError) as exc:
        await dispatch.execute("project_get", {"identifier": "no-such-project"})
    assert exc.value.filter == {"slug": "no-such-project"}


async def test_list_orders_by_most_recently_updated(dispatch, project):
    await dispatch.execute("project_create", {"name": "Second"})
    await dispatch.execute(
        "project_update", {"project_id": project["id"], "status": "active"},
    )
    result = await dispatch.execute("project_list", {})
    assert result["count"] == 2
    assert [p["slug"] for p in result["projects"]] == ["acme-launch", "second"]


async def test_list_filters_by_status_and_limit(dispatch, project):
    await dispatch.execute("project_create", {"name": "Second"})
    await dispatch.execute("project_create", {"name": "Third"})
    await dispatch.execute(
        "project_update", {"project_id": project["id"], "status": "paused"},
    )

    paused = await dispatch.execute("project_list", {"status": "paused"})
    assert [p["slug"] for p in paused["projects"]] == ["acme-launch"]

    limited = await dispatch.execute("project_list", {"limit": 2})
    assert limited["count"] == 2


async def test_list_rejects_unknown_status(dispatch):
    with pytest.raises(ToolValidationError) as exc:
        await dispatch.execute("project_list", {"status": "deleted"})
    assert exc.value.field == "status"


async def test_rename_regenerates_slug(dispatch, project):
    result = await dispatch.execute(
        "project_update", {"project_id": project["id"], "name": "Acme Relaunch 2"},
    )
    assert result["project"]["slug"] == "acme-relaunch-2"

    with pytest.raises(NotFoundError):
        await dispatch.execute("project_get", {"identifier": "acme-launch"})


async def test_update_without_name_keeps_slug(dispatch, project):
    result = await dispatch.execute("project_update", {
        "project_id": project["id"],
        "status": "active",
        "metadata": {"owner": "ops"},
    })
    assert result["project"]["slug"] == "acme-launch"
    assert result["project"]["status"] == "active"
    assert result["project"]["metadata"] == {"owner": "ops"}


async def test_update_records_patch_as_details(dispatch, project, test_db):
    await dispatch.execute("project_update", {
        "project_id": project["id"],
        "description": "Q3 launch",
        "agent": "Planner",
    })
    rows = await _activity_rows(test_db)
    assert [r.action for r in rows] == ["project_created", "project_updated"]
    assert rows[1].details == {"description": "Q3 launch"}
    assert rows[1].agent == "planner"


async def test_update_missing_project_raises_not_found(dispatch, test_db):
    with pytest.raises(NotFoundError):
        await dispatch.execute(
            "project_update", {"project_id": str(uuid4()), "status": "active"},
        )
    assert await _activity_rows(test_db) == []


async def test_update_rejects_malformed_project_id(dispatch):
    with pytest.raises(ToolValidationError) as exc:
        await dispatch.execute("project_update", {"project_id": "acme-launch"})
    assert exc.value.field == "project_id"
