"""Snaptask MCP server: today widget and task tools backed by the Snaptask RPC API."""

SERVER_NAME = "snaptask-mcp"
VERSION = "0.0.1"
