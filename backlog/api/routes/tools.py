"""Tool Routes — remote invocation surface for agents.

Invariants:
    - GET /api/v1/tools lists every registered tool definition
    - POST /api/v1/tools/{tool_name} runs exactly one tool against one request session
    - The request body is the tool's input object; an empty body means {}
    - Failures surface as BacklogError and are rendered by the global handlers

Design Decisions:
    - One generic endpoint instead of one route per tool: the registry and the
      dispatch dict stay the only places a tool is named
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backlog.infrastructure.database import (
    DatabaseSessionManager, get_db, get_db_manager,
)
from backlog.services.tool_dispatch import ToolDispatch
from backlog.services.tools_registry import ALL_TOOLS

router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


@router.get("")
async def list_tools():
    """Tool definitions (name, description, input_schema) for agent clients."""
    return {"status": "ok", "count": len(ALL_TOOLS), "tools": ALL_TOOLS}


@router.post("/{tool_name}")
async def call_tool(
    tool_name: str,
    input_data: dict[str, Any] | None = Body(default=None),
    db: AsyncSession = Depends(get_db),
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
):
    """Invoke one tool by name with a JSON object of arguments."""
    dispatch = ToolDispatch(db, db_manager.session)
    return await dispatch.execute(tool_name, input_data)
