"""Error Hierarchy — codes, HTTP statuses and the response envelope."""

from backlog.core.errors import (
    BacklogError, ConfigurationError, ErrorCategory, ErrorSeverity,
    NotFoundError, StoreError, ToolValidationError, UnknownToolError,
)


def test_not_found_names_kind_and_filter():
    err = NotFoundError("task", {"id": "abc"})
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.message == "task not found (id=abc)"
    assert err.entity_kind == "task"
    assert err.filter == {"id": "abc"}


def test_store_error_names_operation_and_kind():
    err = StoreError("insert", "project", "Integrity constraint violated")
    assert err.http_status == 503
    assert err.category is ErrorCategory.STORE
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.message == "Store insert on project failed: Integrity constraint violated"
    assert (err.operation, err.entity_kind) == ("insert", "project")


def test_validation_error_is_400_and_keeps_field():
    err = ToolValidationError("Invalid 'title': too short", "title")
    assert err.http_status == 400
    assert err.field == "title"


def test_unknown_tool_error():
    err = UnknownToolError("task_delete")
    assert err.code == "UNKNOWN_TOOL"
    assert "task_delete" in err.message


def test_configuration_error_is_critical():
    err = ConfigurationError("missing DATABASE_PASSWORD")
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.message.startswith("Invalid configuration:")


def test_all_errors_share_base():
    for err in (
        NotFoundError("task", {}), StoreError("list", "task", "x"),
        ToolValidationError("x", "f"), UnknownToolError("t"), ConfigurationError("x"),
    ):
        assert isinstance(err, BacklogError)


def test_to_response_envelope():
    err = NotFoundError("project", {"slug": "nope"})
    err.context.tool_name = "project_get"
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["severity"] == "error"
    assert body["context"]["tool_name"] == "project_get"
    assert "timestamp" in body
