"""
Suggest Next Tasks MCP Tool

Asks Snaptask's prioritization system what to work on next
(mcpSuggestNextTasks). Defaults for daysAhead (3) and limit (5) are
applied by the backend.
"""

from typing import Any, Dict, List, Optional

from snaptask_mcp.mcp.base_tool import BaseMCPTool, create_success_response, with_error_envelope
from snaptask_mcp.mcp.formatting import format_suggestions
from snaptask_mcp.mcp.server import MCPTool
from snaptask_mcp.rpc.client import SnaptaskRPCClient
from snaptask_mcp.schemas.snaptask import Suggestion
from snaptask_mcp.schemas.tools import SuggestNextTasksInput


class SuggestNextTasksTool(BaseMCPTool):
    """MCP Tool for next-task suggestions"""

    name = "suggest_next_tasks"
    backend_method = "mcpSuggestNextTasks"

    @with_error_envelope("Error getting Snaptask suggestions")
    async def execute(
        self,
        daysAhead: Optional[int] = None,
        limit: Optional[int] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        """
        Get suggestions for what to work on next

        Args:
            daysAhead: How many days ahead to consider (1-14)
            limit: Max number of suggestions (1-20)

        Returns:
            Envelope with a numbered suggestion list
        """
        params = {key: value for key, value in (("daysAhead", daysAhead), ("limit", limit)) if value is not None}
        self.log_tool_invocation(params)

        suggestions: List[Suggestion] = await self.call_backend_list(params)

        return create_success_response(format_suggestions(suggestions))


def register_suggest_next_tasks_tool(mcp_server, rpc_client: SnaptaskRPCClient):
    """Register suggest_next_tasks tool with MCP server"""
    tool = MCPTool(
        name=SuggestNextTasksTool.name,
        description="Ask Snaptask’s prioritization system what the user should work on next.",
        input_model=SuggestNextTasksInput,
        handler=lambda params: SuggestNextTasksTool(rpc_client).execute(
            **params.model_dump(exclude_none=True)
        ),
    )

    mcp_server.register_tool(tool)
