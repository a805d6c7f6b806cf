"""
Update Task Status MCP Tool

Marks one or more Snaptask tasks as done or not done (mcpUpdateTaskStatus).
"""

from typing import Any, Dict, List

from snaptask_mcp.mcp.base_tool import BaseMCPTool, create_success_response, with_error_envelope
from snaptask_mcp.mcp.formatting import format_updated_count
from snaptask_mcp.mcp.server import MCPTool
from snaptask_mcp.rpc.client import SnaptaskRPCClient
from snaptask_mcp.schemas.snaptask import UpdateTaskStatusResult
from snaptask_mcp.schemas.tools import UpdateTaskStatusInput


class UpdateTaskStatusTool(BaseMCPTool):
    """MCP Tool for completing / reopening tasks"""

    name = "update_task_status"
    backend_method = "mcpUpdateTaskStatus"

    @with_error_envelope("Error updating Snaptask task status")
    async def execute(self, updates: List[Dict[str, Any]], **kwargs) -> Dict[str, Any]:
        """
        Update completion state of tasks

        Args:
            updates: List of {"id": str, "isCompleted": bool}

        Returns:
            Envelope reporting the backend's updated count
        """
        self.log_tool_invocation({"updates": updates})

        result: UpdateTaskStatusResult = await self.call_backend({"updates": updates})

        # The count comes from the backend, it is not recomputed from the request
        return create_success_response(format_updated_count(result["updatedCount"]))


def register_update_task_status_tool(mcp_server, rpc_client: SnaptaskRPCClient):
    """Register update_task_status tool with MCP server"""
    tool = MCPTool(
        name=UpdateTaskStatusTool.name,
        description="Mark one or more Snaptask tasks as done or not done.",
        input_model=UpdateTaskStatusInput,
        handler=lambda params: UpdateTaskStatusTool(rpc_client).execute(
            **params.model_dump(exclude_none=True)
        ),
    )

    mcp_server.register_tool(tool)
