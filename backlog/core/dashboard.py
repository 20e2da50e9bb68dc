"""Dashboard Aggregation — pure frequency counts over a project's task projection.

Invariants:
    - total counts every task, including tasks with no assigned team
    - by_status lists every TaskStatus (zero-filled), in enum order
    - by_team excludes tasks whose assigned_team is null
    - No IO: input rows are already fetched by the shell
"""

from collections import Counter
from typing import Iterable, Mapping

from backlog.core.domain_types import Priority, TaskStatus


def summarize_tasks(rows: Iterable[Mapping]) -> dict:
    """Count tasks by status, team and priority."""
    rows = list(rows)
    statuses = Counter(r["status"] for r in rows)
    teams = Counter(r["assigned_team"] for r in rows if r.get("assigned_team"))
    priorities = Counter(r["priority"] for r in rows)

    return {
        "total": len(rows),
        "by_status": {s.value: statuses.get(s.value, 0) for s in TaskStatus},
        "by_team": dict(teams),
        "by_priority": {p.value: priorities.get(p.value, 0) for p in Priority},
    }
