"""
Snaptask RPC Client

Calls Snaptask Adaptive RPC methods. The backend expects a POST of
``{"method": ..., "params": [...]}`` and answers with ``{"result": ...}``
on success.
"""

import json
from typing import Any, Optional, Union

import httpx

from snaptask_mcp.config import DEFAULT_API_BASE
from snaptask_mcp.utils.logger import get_logger

call_log = get_logger("snaptask-rpc")


class BackendError(Exception):
    """Raised when the Snaptask backend call fails (transport or protocol)."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


def build_envelope(method: str, params: Union[dict, list, Any]) -> dict:
    """
    Build the outbound RPC envelope.

    ``params`` is always sent as an array; anything that is not already a
    list is wrapped as its single element.
    """
    return {
        "method": method,
        "params": params if isinstance(params, list) else [params],
    }


class SnaptaskRPCClient:
    """
    Client for the Snaptask RPC endpoint

    Every call opens its own HTTP client and issues exactly one POST.
    There are no retries; a failure is final for that call.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    async def call(self, method: str, params: Union[dict, list, Any]) -> Any:
        """
        Call a Snaptask RPC method.

        Args:
            method: Backend method name (e.g. "mcpListTodayTasks")
            params: Parameter object or list of parameters

        Returns:
            The value of the response's ``result`` key, unchecked

        Raises:
            BackendError: On non-2xx status, transport failure, or a body
                without a ``result`` key
        """
        envelope = build_envelope(method, params)

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport, follow_redirects=True
        ) as client:
            request = client.build_request(
                "POST",
                self.base_url,
                headers={"Content-Type": "application/json"},
                content=json.dumps(envelope),
            )
            try:
                response = await client.send(request, stream=True)
            except httpx.HTTPError as e:
                call_log.error("snaptask rpc call failed", method=method, error=str(e))
                raise BackendError(f"Snaptask API request failed: {str(e)}")

            try:
                call_log.info(
                    "snaptask rpc call",
                    method=method,
                    param_count=len(envelope["params"]),
                    status_code=response.status_code,
                )

                if not response.is_success:
                    text = await self._read_text(response)
                    raise BackendError(
                        f"Snaptask API error {response.status_code}: {text}",
                        status_code=response.status_code,
                    )

                try:
                    await response.aread()
                except httpx.HTTPError as e:
                    raise BackendError(f"Snaptask API request failed: {str(e)}")

                try:
                    body = response.json()
                except ValueError:
                    raise BackendError("Snaptask API: invalid JSON response")
            finally:
                await response.aclose()

        # Presence of the key is the success signal; the backend's "error" payload is not surfaced
        if not isinstance(body, dict) or "result" not in body:
            raise BackendError("Snaptask API: missing result field")

        return body["result"]

    @staticmethod
    async def _read_text(response: httpx.Response) -> str:
        """Best-effort body text for error messages; read failures give ""."""
        try:
            await response.aread()
            return response.text
        except (httpx.HTTPError, UnicodeDecodeError):
            return ""
