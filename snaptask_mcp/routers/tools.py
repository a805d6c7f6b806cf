"""
MCP Tools Router

Host-facing HTTP surface over the operation registry: discovery of the
registered widget and tools, and invocation by name.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status

from snaptask_mcp.mcp.server import MCPServer, ToolNotFoundError, ToolValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mcp", tags=["mcp"])


def get_mcp_server(request: Request) -> MCPServer:
    """Dependency returning the registry built at app creation."""
    return request.app.state.mcp_server


@router.get("/tools")
async def list_tools(mcp_server: MCPServer = Depends(get_mcp_server)):
    """List the registered operations with their input schemas."""
    return {"tools": mcp_server.get_tool_schemas()}


@router.post("/tools/{tool_name}")
async def call_tool(
    tool_name: str,
    arguments: Optional[Dict[str, Any]] = Body(default=None),
    mcp_server: MCPServer = Depends(get_mcp_server),
):
    """
    Invoke an operation

    Returns the response envelope. Backend failures come back as
    envelopes with isError=true and status 200; only unknown tools (404)
    and invalid arguments (422) are reported as HTTP errors.
    """
    try:
        return await mcp_server.invoke_tool(tool_name, arguments)
    except ToolNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ToolValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"tool": e.tool_name, "message": e.message, "errors": e.errors},
        )
