"""Snaptask MCP tools and widget."""
from snaptask_mcp.mcp.server import MCPServer
from snaptask_mcp.mcp.tools.create_tasks_from_text import register_create_tasks_from_text_tool
from snaptask_mcp.mcp.tools.suggest_next_tasks import register_suggest_next_tasks_tool
from snaptask_mcp.mcp.tools.today_view import register_today_view_widget
from snaptask_mcp.mcp.tools.update_task_status import register_update_task_status_tool
from snaptask_mcp.mcp.tools.week_overview import register_week_overview_tool
from snaptask_mcp.rpc.client import SnaptaskRPCClient


def register_all_tools(mcp_server: MCPServer, rpc_client: SnaptaskRPCClient) -> MCPServer:
    """Register the today widget and the four task tools"""
    register_today_view_widget(mcp_server, rpc_client)
    register_create_tasks_from_text_tool(mcp_server, rpc_client)
    register_update_task_status_tool(mcp_server, rpc_client)
    register_week_overview_tool(mcp_server, rpc_client)
    register_suggest_next_tasks_tool(mcp_server, rpc_client)
    return mcp_server
