"""API routers for the Snaptask MCP server."""
