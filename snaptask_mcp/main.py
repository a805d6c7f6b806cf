"""Main FastAPI application for the Snaptask MCP server."""
import logging
from typing import Optional

from fastapi import FastAPI

from snaptask_mcp import SERVER_NAME, VERSION
from snaptask_mcp.config import Settings, get_settings
from snaptask_mcp.mcp.server import MCPServer
from snaptask_mcp.mcp.tools import register_all_tools
from snaptask_mcp.middleware.cors import add_cors_middleware
from snaptask_mcp.routers import tools
from snaptask_mcp.rpc.client import SnaptaskRPCClient
from snaptask_mcp.utils.logger import configure_logging

logger = logging.getLogger(__name__)


def build_mcp_server(rpc_client: SnaptaskRPCClient) -> MCPServer:
    """Create the registry with every Snaptask operation registered."""
    return register_all_tools(MCPServer(), rpc_client)


def create_app(
    settings: Optional[Settings] = None,
    rpc_client: Optional[SnaptaskRPCClient] = None,
) -> FastAPI:
    """
    Create the FastAPI application

    Args:
        settings: Settings to use (read from the environment if omitted)
        rpc_client: RPC client to use (built from settings if omitted)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if rpc_client is None:
        rpc_client = SnaptaskRPCClient(base_url=settings.api_base, timeout=settings.timeout_seconds)

    app = FastAPI(
        title="Snaptask MCP",
        description="Snaptask tasks exposed as MCP tools and a today widget",
        version=VERSION,
    )
    add_cors_middleware(app, settings)

    app.state.settings = settings
    app.state.mcp_server = build_mcp_server(rpc_client)
    logger.info(f"MCP Server initialized with tools: {app.state.mcp_server.list_tools()}")
    logger.info(f"Snaptask backend: {rpc_client.base_url}")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": VERSION}

    @app.get("/")
    async def root():
        """Root endpoint - server identity and available tools."""
        return {
            "name": SERVER_NAME,
            "version": VERSION,
            "tools": app.state.mcp_server.list_tools(),
            "docs": "/docs",
            "health": "/health",
        }

    app.include_router(tools.router)
    return app


app = create_app()


def run():
    """Console entry point."""
    import uvicorn
    uvicorn.run("snaptask_mcp.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
