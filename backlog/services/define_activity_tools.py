"""Activity & Status Tool Schemas — activity trail access and the project dashboard.

Invariants:
    - activity_log is the only tool in this module with side effects
    - project_dashboard is a pure read
"""

TOOLS_ACTIVITY = [
    {
        "name": "activity_log",
        "description": "Logs an activity to the shared trail.",
        "input_schema": {
            "type": "object",
            "properties": {
                "agent": {"type": "string", "description": "Agent name"},
                "action": {"type": "string", "description": "Action type"},
                "details": {"type": "object"},
                "project_id": {"type": "string"},
                "team": {"type": "string"},
                "related_id": {"type": "string"},
                "related_type": {"type": "string"},
            },
            "required": ["agent", "action"],
        },
    },
    {
        "name": "activity_get",
        "description": "Gets the activity log, newest first.",
        "input_schema": {
            "type": "object",
            "properties": {
                "project_id": {"type": "string"},
                "agent": {"type": "string"},
                "team": {"type": "string"},
                "action": {"type": "string"},
                "related_id": {"type": "string"},
                "limit": {"type": "integer", "description": "Max results (default 50)"},
            },
            "required": [],
        },
    },
]

TOOLS_STATUS = [
    {
        "name": "project_dashboard",
        "description": (
            "Gets a project dashboard: the project, task counts by status, "
            "team and priority, and the 10 most recent activities."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "project_id": {"type": "string"},
            },
            "required": ["project_id"],
        },
    },
]
