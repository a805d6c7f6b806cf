"""
Today View MCP Widget

Lists the user's Snaptask tasks for today (mcpListTodayTasks). Besides the
text summary it returns the raw task list as structured content for the
host-rendered widget.
"""

from typing import Any, Dict, List

from snaptask_mcp.mcp.base_tool import BaseMCPTool, create_success_response, with_error_envelope
from snaptask_mcp.mcp.formatting import NO_TASKS_TODAY, format_task_list
from snaptask_mcp.rpc.client import SnaptaskRPCClient
from snaptask_mcp.schemas.snaptask import TaskRecord
from snaptask_mcp.schemas.tools import TodayViewInput

WIDGET_DESCRIPTION = "Snaptask: today’s tasks overview"
DESCRIPTION = (
    "Use this tool to get the user’s Snaptask tasks for today. "
    "Prefer this for anything like daily planning, checking what’s on today, or deciding the next action."
)


class TodayViewTool(BaseMCPTool):
    """MCP widget for today's tasks"""

    name = "today_view"
    backend_method = "mcpListTodayTasks"

    @with_error_envelope("Error fetching today’s tasks from Snaptask")
    async def execute(self, **kwargs) -> Dict[str, Any]:
        self.log_tool_invocation({})

        tasks: List[TaskRecord] = await self.call_backend_list([])

        return create_success_response(
            format_task_list(tasks, NO_TASKS_TODAY),
            structured_content={"tasks": tasks},
            meta={"count": len(tasks)},
        )


def register_today_view_widget(mcp_server, rpc_client: SnaptaskRPCClient):
    """Register today_view widget with MCP server"""
    mcp_server.register_widget(
        name=TodayViewTool.name,
        widget_description=WIDGET_DESCRIPTION,
        description=DESCRIPTION,
        input_model=TodayViewInput,
        handler=lambda params: TodayViewTool(rpc_client).execute(),
    )
