"""
Create Tasks From Text MCP Tool

Sends a free-form description to Snaptask (mcpCreateTasksFromText), which
extracts structured tasks from it.
"""

from typing import Any, Dict

from snaptask_mcp.mcp.base_tool import BaseMCPTool, create_success_response, with_error_envelope
from snaptask_mcp.mcp.formatting import format_created_summary
from snaptask_mcp.mcp.server import MCPTool
from snaptask_mcp.rpc.client import SnaptaskRPCClient
from snaptask_mcp.schemas.snaptask import CreateTasksResult
from snaptask_mcp.schemas.tools import CreateTasksFromTextInput


class CreateTasksFromTextTool(BaseMCPTool):
    """MCP Tool for turning natural language into tasks"""

    name = "create_tasks_from_text"
    backend_method = "mcpCreateTasksFromText"

    @with_error_envelope("Error creating tasks in Snaptask")
    async def execute(self, text: str, **kwargs) -> Dict[str, Any]:
        """
        Create tasks from free text

        Args:
            text: User's description of what they need to do

        Returns:
            Envelope with the backend's reply followed by the created tasks
        """
        # Text can be long; only its size is logged
        self.log_tool_invocation({"text_length": len(text)})

        result: CreateTasksResult = await self.call_backend({"text": text})

        return create_success_response(format_created_summary(result["response"], result["tasks"]))


def register_create_tasks_from_text_tool(mcp_server, rpc_client: SnaptaskRPCClient):
    """Register create_tasks_from_text tool with MCP server"""
    tool = MCPTool(
        name=CreateTasksFromTextTool.name,
        description="Turn a natural language description into structured Snaptask tasks.",
        input_model=CreateTasksFromTextInput,
        handler=lambda params: CreateTasksFromTextTool(rpc_client).execute(
            **params.model_dump(exclude_none=True)
        ),
    )

    mcp_server.register_tool(tool)
