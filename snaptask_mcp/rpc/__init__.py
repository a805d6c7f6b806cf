"""Snaptask RPC client package."""
from snaptask_mcp.rpc.client import BackendError, SnaptaskRPCClient, build_envelope

__all__ = ["BackendError", "SnaptaskRPCClient", "build_envelope"]
