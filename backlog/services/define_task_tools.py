"""Task Tool Schemas — tool-use definitions for task writes and task queues.

Invariants:
    - Enum values mirror core.domain_types.TaskStatus / Priority
    - task_status and task_update both apply the status side effects
      (started_at, completed_at, blocker_reason)

Design Decisions:
    - Team/agent are free strings: matching is case-insensitive (stored lowercase)
"""

from backlog.core.domain_types import Priority, TaskStatus

_TASK_STATUSES = [s.value for s in TaskStatus]
_PRIORITIES = [p.value for p in Priority]

TOOLS_TASK = [
    {
        "name": "task_create",
        "description": (
            "Creates a task in 'backlog' status. Priority defaults to 'medium'."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "project_id": {"type": "string", "description": "Project ID"},
                "title": {"type": "string", "description": "Task title"},
                "description": {"type": "string"},
                "team": {
                    "type": "string",
                    "description": "Assigned team: devforge, pixelcraft, etc.",
                },
                "agent": {"type": "string", "description": "Assigned agent name"},
                "priority": {"type": "string", "enum": _PRIORITIES},
                "parent_id": {
                    "type": "string",
                    "description": "Parent task ID for subtasks",
                },
                "estimated_hours": {"type": "number"},
                "due_date": {"type": "string", "format": "date-time"},
                "tags": {"type": "array", "items": {"type": "string"}},
                "deliverables": {"type": "array"},
                "metadata": {"type": "object"},
            },
            "required": ["project_id", "title"],
        },
    },
    {
        "name": "task_list",
        "description": (
            "Lists tasks, newest first. Done tasks are excluded unless "
            "include_done is true or status is given."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "project_id": {"type": "string"},
                "status": {"type": "string", "enum": _TASK_STATUSES},
                "team": {"type": "string"},
                "agent": {"type": "string"},
                "priority": {"type": "string", "enum": _PRIORITIES},
                "include_done": {"type": "boolean"},
                "limit": {"type": "integer", "description": "Max results (default 50)"},
            },
            "required": [],
        },
    },
    {
        "name": "task_update",
        "description": (
            "Updates task fields. A status change follows the same rules as "
            "task_status. Omitted fields are left unchanged."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "task_id": {"type": "string", "description": "Task ID"},
                "title": {"type": "string"},
                "description": {"type": "string"},
                "status": {"type": "string", "enum": _TASK_STATUSES},
                "notes": {
                    "type": "string",
                    "description": "Blocker reason when status is 'blocked'",
                },
                "priority": {"type": "string", "enum": _PRIORITIES},
                "team": {"type": "string"},
                "agent": {"type": "string"},
                "parent_id": {"type": "string"},
                "estimated_hours": {"type": "number"},
                "actual_hours": {"type": "number"},
                "due_date": {"type": "string", "format": "date-time"},
                "tags": {"type": "array", "items": {"type": "string"}},
                "deliverables": {"type": "array"},
                "metadata": {"type": "object"},
                "updated_by": {"type": "string"},
            },
            "required": ["task_id"],
        },
    },
    {
        "name": "task_assign",
        "description": "Assigns a task to a team/agent and moves it to 'todo'.",
        "input_schema": {
            "type": "object",
            "properties": {
                "task_id": {"type": "string"},
                "team": {
                    "type": "string",
                    "description": "Team name: devforge, pixelcraft, etc.",
                },
                "agent": {"type": "string", "description": "Agent name"},
            },
            "required": ["task_id", "team"],
        },
    },
    {
        "name": "task_status",
        "description": (
            "Changes task status. Entering 'in_progress' stamps started_at and "
            "entering 'done' stamps completed_at (first time only). "
            "Notes become the blocker reason when blocking."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "task_id": {"type": "string"},
                "status": {"type": "string", "enum": _TASK_STATUSES},
                "agent": {
                    "type": "string",
                    "description": "Agent making the change",
                },
                "notes": {"type": "string"},
            },
            "required": ["task_id", "status"],
        },
    },
    {
        "name": "task_my_tasks",
        "description": (
            "Gets tasks assigned to an agent, most urgent first."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "agent": {"type": "string", "description": "Agent name"},
                "include_done": {
                    "type": "boolean",
                    "description": "Include completed tasks",
                },
                "limit": {"type": "integer"},
            },
            "required": ["agent"],
        },
    },
    {
        "name": "task_team_tasks",
        "description": "Gets tasks for a team, most urgent first.",
        "input_schema": {
            "type": "object",
            "properties": {
                "team": {
                    "type": "string",
                    "description": "Team name: devforge, pixelcraft, etc.",
                },
                "include_done": {"type": "boolean"},
                "limit": {"type": "integer"},
            },
            "required": ["team"],
        },
    },
]
