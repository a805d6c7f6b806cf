"""Pytest configuration and shared fixtures for Snaptask MCP tests."""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from snaptask_mcp.mcp.server import MCPServer
from snaptask_mcp.mcp.tools import register_all_tools
from snaptask_mcp.rpc.client import SnaptaskRPCClient

TEST_API_BASE = "https://snaptask.test/api/rpc"


class FakeBackend:
    """Stands in for the Snaptask RPC endpoint and records what it receives."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"result": []}
        )

    def respond_with_result(self, result: Any) -> None:
        self.responder = lambda request: httpx.Response(200, json={"result": result})

    def respond_with(self, status_code: int, **kwargs) -> None:
        self.responder = lambda request: httpx.Response(status_code, **kwargs)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def bodies(self) -> List[Dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def backend() -> FakeBackend:
    """Fake Snaptask backend."""
    return FakeBackend()


@pytest.fixture
def rpc_client(backend: FakeBackend) -> SnaptaskRPCClient:
    """RPC client wired to the fake backend."""
    return SnaptaskRPCClient(base_url=TEST_API_BASE, transport=httpx.MockTransport(backend.handler))


@pytest.fixture
def mcp_server(rpc_client: SnaptaskRPCClient) -> MCPServer:
    """Registry with all Snaptask operations registered."""
    return register_all_tools(MCPServer(), rpc_client)
