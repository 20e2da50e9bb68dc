"""Tool Routes — HTTP invocation of tools and error envelopes.

Invariants:
    - POST /api/v1/tools/{name} returns the tool result with 200
    - BacklogError subclasses map to their http_status with the error envelope
"""

from uuid import uuid4


async def test_list_tools(client):
    res = await client.get("/api/v1/tools")
    assert res.status_code == 200
    body = res.json()
    assert body["count"] == 14
    assert {t["name"] for t in body["tools"]} >= {"project_create", "project_dashboard"}


async def test_create_and_get_project(client):
    res = await client.post("/api/v1/tools/project_create", json={"name": "Acme Launch"})
    assert res.status_code == 200
    project = res.json()["project"]

    res = await client.post(
        "/api/v1/tools/project_get", json={"identifier": "acme-launch"},
    )
    assert res.status_code == 200
    assert res.json()["project"]["id"] == project["id"]


async def test_empty_body_uses_defaults(client):
    res = await client.post("/api/v1/tools/project_list")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "count": 0, "projects": []}


async def test_not_found_maps_to_404(client):
    res = await client.post(
        "/api/v1/tools/project_get", json={"identifier": str(uuid4())},
    )
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["context"]["tool_name"] == "project_get"


async def test_unknown_tool_maps_to_404(client):
    res = await client.post("/api/v1/tools/task_delete", json={})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "UNKNOWN_TOOL"


async def test_invalid_input_maps_to_400(client):
    res = await client.post("/api/v1/tools/task_create", json={"title": "x"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_non_object_body_maps_to_400(client):
    res = await client.post("/api/v1/tools/project_list", json=["not", "an", "object"])
    assert res.status_code == 400
    assert res.json()["error"]["details"]


async def test_duplicate_slug_maps_to_503(client):
    await client.post("/api/v1/tools/project_create", json={"name": "Acme Launch"})
    res = await client.post("/api/v1/tools/project_create", json={"name": "Acme Launch"})
    assert res.status_code == 503
    assert res.json()["error"]["code"] == "STORE_ERROR"


async def test_dashboard_over_http(client):
    project = (await client.post(
        "/api/v1/tools/project_create", json={"name": "Acme Launch"},
    )).json()["project"]
    await client.post("/api/v1/tools/task_create", json={
        "project_id": project["id"], "title": "Design homepage", "team": "pixelcraft",
    })
    res = await client.post(
        "/api/v1/tools/project_dashboard", json={"project_id": project["id"]},
    )
    assert res.status_code == 200
    assert res.json()["task_counts"]["by_team"] == {"pixelcraft": 1}
