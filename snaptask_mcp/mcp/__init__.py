"""
MCP (Model Context Protocol) Server Package

Exposes Snaptask RPC methods as schema-validated MCP operations.
"""
