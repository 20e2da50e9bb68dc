"""Tools Registry — flat list of every tool definition exposed to agents.

Invariants:
    - Tool names are unique
    - Every name in ALL_TOOLS has a handler in ToolDispatch (checked by tests)

Design Decisions:
    - Explicit imports from each define_*_tools.py: no auto-discovery
"""

from backlog.services.define_project_tools import TOOLS_PROJECT
from backlog.services.define_task_tools import TOOLS_TASK
from backlog.services.define_activity_tools import TOOLS_ACTIVITY, TOOLS_STATUS


ALL_TOOLS: list[dict] = [
    *TOOLS_PROJECT,     # 4 tools
    *TOOLS_TASK,        # 7 tools
    *TOOLS_ACTIVITY,    # 2 tools
    *TOOLS_STATUS,      # 1 tool
]
# Total: 14

TOOL_NAMES: frozenset[str] = frozenset(t["name"] for t in ALL_TOOLS)
