"""Dashboard Aggregation — counts over task projections."""

from backlog.core.dashboard import summarize_tasks


def _row(status, team=None, priority="medium"):
    return {"status": status, "assigned_team": team, "priority": priority}


def test_empty_project_has_zero_filled_counts():
    counts = summarize_tasks([])
    assert counts["total"] == 0
    assert counts["by_team"] == {}
    assert set(counts["by_status"].values()) == {0}
    assert list(counts["by_status"]) == [
        "backlog", "todo", "in_progress", "review", "blocked", "done",
    ]
    assert list(counts["by_priority"]) == ["critical", "high", "medium", "low"]


def test_counts_by_status_team_and_priority():
    counts = summarize_tasks([
        _row("todo", "devforge", "high"),
        _row("todo", "pixelcraft"),
        _row("done", "devforge", "critical"),
        _row("backlog"),
    ])
    assert counts["total"] == 4
    assert counts["by_status"]["todo"] == 2
    assert counts["by_status"]["done"] == 1
    assert counts["by_status"]["backlog"] == 1
    assert counts["by_status"]["review"] == 0
    assert counts["by_team"] == {"devforge": 2, "pixelcraft": 1}
    assert counts["by_priority"] == {"critical": 1, "high": 1, "medium": 2, "low": 0}


def test_unassigned_tasks_count_in_total_but_not_by_team():
    counts = summarize_tasks([_row("backlog"), _row("todo")])
    assert counts["total"] == 2
    assert counts["by_team"] == {}
    assert sum(counts["by_status"].values()) == counts["total"]
