"""Tool Dispatch — explicit routing from tool_name to handler function.

Invariants:
    - Every tool->handler mapping is visible: no getattr magic, no auto-discovery
    - Unknown tools raise UnknownToolError before any handler runs
    - A failing tool leaves no writes behind: the shared session is rolled back
      and the typed BacklogError is re-raised with tool_name/agent stamped
    - Every tool call is logged (tool name, outcome)

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
    - Split handlers by entity: max ~4 methods per class
    - Errors are raised, not returned as {"status": "error"} dicts: the HTTP
      layer maps BacklogError to its status code in one place
    - project_dashboard gets a session factory instead of the request session
      because it fans out into concurrent reads
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from backlog.core.errors import BacklogError, UnknownToolError
from backlog.infrastructure.database import SessionFactory
from backlog.services.handle_activity import ActivityHandlers
from backlog.services.handle_dashboard import DashboardHandlers
from backlog.services.handle_projects import ProjectHandlers
from backlog.services.handle_task_queries import TaskQueryHandlers
from backlog.services.handle_tasks import TaskHandlers

logger = logging.getLogger(__name__)


class ToolDispatch:
    """Routes tool_name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, db: AsyncSession, sessions: SessionFactory):
        self._db = db
        projects = ProjectHandlers(db)
        tasks = TaskHandlers(db)
        task_queries = TaskQueryHandlers(db)
        activity = ActivityHandlers(db)
        dashboard = DashboardHandlers(sessions)

        # Every mapping explicit: adding a tool requires editing this dict
        self._handlers = {
            # Projects (4 tools)
            "project_create": projects.create_project,
            "project_get": projects.get_project,
            "project_list": projects.list_projects,
            "project_update": projects.update_project,

            # Task writes (4 tools)
            "task_create": tasks.create_task,
            "task_update": tasks.update_task,
            "task_assign": tasks.assign_task,
            "task_status": tasks.set_task_status,

            # Task queues (3 tools)
            "task_list": task_queries.list_tasks,
            "task_my_tasks": task_queries.my_tasks,
            "task_team_tasks": task_queries.team_tasks,

            # Activity (2 tools)
            "activity_log": activity.log_activity,
            "activity_get": activity.get_activity,

            # Status (1 tool)
            "project_dashboard": dashboard.project_dashboard,
        }

    @property
    def tool_names(self) -> frozenset[str]:
        return frozenset(self._handlers)

    async def execute(self, tool_name: str, input_data: dict | None) -> dict:
        """Route tool_name to handler. Returns result dict, raises BacklogError."""
        handler = self._handlers.get(tool_name)
        if not handler:
            logger.warning(
                f"Unknown tool '{tool_name}'", extra={"tool_name": tool_name},
            )
            raise UnknownToolError(tool_name)
        payload = input_data or {}
        try:
            result = await handler(payload)
        except BacklogError as e:
            await self._db.rollback()
            e.context.tool_name = tool_name
            if e.context.agent is None and isinstance(payload.get("agent"), str):
                e.context.agent = payload["agent"]
            logger.warning(
                f"Tool '{tool_name}' failed: {e.message}",
                extra={"tool_name": tool_name, "error_code": e.code},
            )
            raise
        logger.info(f"Tool '{tool_name}' ok", extra={"tool_name": tool_name})
        return result
