"""
MCP Base Tool Interface

Provides base functionality for all Snaptask MCP tools:
- Response envelope construction
- A uniform error boundary around tool execution
- Invocation logging
"""

import functools
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, List, Optional

from snaptask_mcp.rpc.client import BackendError, SnaptaskRPCClient

logger = logging.getLogger(__name__)


def create_success_response(
    text: str,
    structured_content: Optional[Dict[str, Any]] = None,
    meta: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Create a success envelope for the host

    Args:
        text: Formatted summary shown to the user
        structured_content: Optional machine-readable payload
        meta: Optional side metadata (e.g. counts)

    Returns:
        Response envelope with isError=False
    """
    response: Dict[str, Any] = {}
    if meta is not None:
        response["_meta"] = meta
    if structured_content is not None:
        response["structuredContent"] = structured_content
    response["content"] = [{"type": "text", "text": text}]
    response["isError"] = False
    return response


def create_error_response(text: str) -> Dict[str, Any]:
    """Create an error envelope: one diagnostic text block, no structured payload."""
    return {
        "content": [{"type": "text", "text": text}],
        "isError": True,
    }


def error_message(error: BaseException) -> str:
    """The error's ``message`` attribute if it has one, otherwise its string form."""
    message = getattr(error, "message", None)
    if message is None:
        return str(error)
    return str(message)


def with_error_envelope(error_prefix: str):
    """
    Wrap a tool coroutine so that any failure becomes an error envelope.

    Args:
        error_prefix: Text placed before the failure message,
            e.g. "Error creating tasks in Snaptask"

    Returns:
        Decorator for ``async def execute(self, ...)`` style coroutines
    """
    def decorator(func: Callable[..., Awaitable[Dict[str, Any]]]):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Dict[str, Any]:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{error_prefix}: {error_message(e)}")
                return create_error_response(f"{error_prefix}: {error_message(e)}")
        return wrapper
    return decorator


class BaseMCPTool(ABC):
    """
    Base class for all Snaptask MCP tools

    Each tool binds one backend RPC method and formats its result.
    """

    name: str = ""
    backend_method: str = ""

    def __init__(self, rpc_client: SnaptaskRPCClient):
        self.rpc = rpc_client

    def log_tool_invocation(self, params: Dict[str, Any]) -> None:
        """Log tool invocation with its validated arguments"""
        logger.info(f"MCP Tool Invocation: {self.name} -> {self.backend_method} | Params: {params}")

    async def call_backend(self, params: Any) -> Any:
        """Call this tool's backend method"""
        return await self.rpc.call(self.backend_method, params)

    async def call_backend_list(self, params: Any) -> List[Any]:
        """Call this tool's backend method, requiring a list result"""
        result = await self.call_backend(params)
        if not isinstance(result, list):
            raise BackendError(
                f"Snaptask API: expected a list result from {self.backend_method}, "
                f"got {type(result).__name__}"
            )
        return result

    @abstractmethod
    async def execute(self, **kwargs) -> Dict[str, Any]:
        """
        Execute the tool logic

        Must be implemented by subclasses. Implementations are wrapped with
        ``with_error_envelope`` and therefore never raise.

        Returns:
            Response envelope
        """
        pass
