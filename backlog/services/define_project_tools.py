"""Project Tool Schemas — tool-use definitions for the project lifecycle tools.

Invariants:
    - Enum values mirror core.domain_types.ProjectStatus
    - project_create and project_update are the only project tools with side effects
"""

from backlog.core.domain_types import ProjectStatus

_PROJECT_STATUSES = [s.value for s in ProjectStatus]

TOOLS_PROJECT = [
    {
        "name": "project_create",
        "description": (
            "Creates a new project in 'planning' status. "
            "The slug is derived from the name and must be unique."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "Project name"},
                "description": {"type": "string"},
                "template": {
                    "type": "string",
                    "description": "Project template: saas, landing-page, etc.",
                },
                "autonomous": {
                    "type": "boolean",
                    "description": "Enable autonomous mode",
                },
                "tech_stack": {"type": "object"},
                "agent": {
                    "type": "string",
                    "description": "Agent performing the action (default: system)",
                },
            },
            "required": ["name"],
        },
    },
    {
        "name": "project_get",
        "description": "Gets a project by ID (UUID) or slug.",
        "input_schema": {
            "type": "object",
            "properties": {
                "identifier": {
                    "type": "string",
                    "description": "Project ID (UUID) or slug",
                },
            },
            "required": ["identifier"],
        },
    },
    {
        "name": "project_list",
        "description": "Lists projects, most recently updated first.",
        "input_schema": {
            "type": "object",
            "properties": {
                "status": {"type": "string", "enum": _PROJECT_STATUSES},
                "limit": {
                    "type": "integer",
                    "description": "Max results (default 20)",
                },
            },
            "required": [],
        },
    },
    {
        "name": "project_update",
        "description": (
            "Updates a project. Renaming regenerates the slug. "
            "Omitted fields are left unchanged."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "project_id": {"type": "string", "description": "Project ID"},
                "name": {"type": "string"},
                "description": {"type": "string"},
                "status": {"type": "string", "enum": _PROJECT_STATUSES},
                "settings": {"type": "object"},
                "tech_stack": {"type": "object"},
                "metadata": {"type": "object"},
                "agent": {"type": "string"},
            },
            "required": ["project_id"],
        },
    },
]
