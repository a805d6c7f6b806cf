"""
Week Overview MCP Tool

Lists the user's Snaptask tasks for a week (mcpListWeekOverview). The week
is anchored at referenceDateIso, or by the backend at "now" when omitted.
"""

from typing import Any, Dict, List, Optional

from snaptask_mcp.mcp.base_tool import BaseMCPTool, create_success_response, with_error_envelope
from snaptask_mcp.mcp.formatting import NO_TASKS_THIS_WEEK, format_task_list
from snaptask_mcp.mcp.server import MCPTool
from snaptask_mcp.rpc.client import SnaptaskRPCClient
from snaptask_mcp.schemas.snaptask import TaskRecord
from snaptask_mcp.schemas.tools import WeekOverviewInput


class WeekOverviewTool(BaseMCPTool):
    """MCP Tool for the weekly task overview"""

    name = "week_overview"
    backend_method = "mcpListWeekOverview"

    @with_error_envelope("Error fetching Snaptask week overview")
    async def execute(self, referenceDateIso: Optional[str] = None, **kwargs) -> Dict[str, Any]:
        params = {}
        if referenceDateIso is not None:
            params["referenceDateIso"] = referenceDateIso
        self.log_tool_invocation(params)

        tasks: List[TaskRecord] = await self.call_backend_list(params)

        return create_success_response(format_task_list(tasks, NO_TASKS_THIS_WEEK))


def register_week_overview_tool(mcp_server, rpc_client: SnaptaskRPCClient):
    """Register week_overview tool with MCP server"""
    tool = MCPTool(
        name=WeekOverviewTool.name,
        description="Get an overview of the user’s Snaptask tasks for the current week.",
        input_model=WeekOverviewInput,
        handler=lambda params: WeekOverviewTool(rpc_client).execute(
            **params.model_dump(exclude_none=True)
        ),
    )

    mcp_server.register_tool(tool)
