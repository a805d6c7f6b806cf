"""
MCP Server Implementation

Registry of the Snaptask operations (one widget, four tools). Each
registered operation carries a name, a description for host discovery,
an input model used for validation, and a handler returning a response
envelope.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from snaptask_mcp import SERVER_NAME, VERSION

logger = logging.getLogger(__name__)

Handler = Callable[..., Awaitable[Dict[str, Any]]]


class ToolNotFoundError(KeyError):
    """Raised when no operation is registered under the requested name"""
    def __init__(self, name: str, available: List[str]):
        self.name = name
        self.message = f"Tool {name} not found. Available tools: {available}"
        super().__init__(self.message)


class ToolValidationError(Exception):
    """Raised when arguments do not match an operation's input schema"""
    def __init__(self, tool_name: str, errors: List[Dict[str, Any]]):
        self.tool_name = tool_name
        self.errors = errors
        self.message = f"Invalid arguments for {tool_name}"
        super().__init__(self.message)


@dataclass(frozen=True)
class MCPTool:
    """MCP operation descriptor"""
    name: str
    description: str
    input_model: Type[BaseModel]
    handler: Handler
    kind: str = "tool"  # "tool" or "widget"
    widget_description: Optional[str] = None

    @property
    def input_schema(self) -> Dict[str, Any]:
        return self.input_model.model_json_schema()


class MCPServer:
    """
    MCP Server for Snaptask

    Operations are registered once at startup and never change afterwards.
    Handlers share no state, so concurrent invocations need no locking.
    """

    def __init__(self, name: str = SERVER_NAME, version: str = VERSION):
        self.tools: Dict[str, MCPTool] = {}
        self.name = name
        self.version = version
        logger.info(f"Initializing MCP Server: {self.name} v{self.version}")

    def register_tool(self, tool: MCPTool):
        """Register an operation with the MCP server"""
        if tool.name in self.tools:
            raise ValueError(f"Tool {tool.name} is already registered")

        self.tools[tool.name] = tool
        logger.info(f"Registered MCP {tool.kind}: {tool.name}")

    def register_widget(
        self,
        name: str,
        widget_description: str,
        description: str,
        input_model: Type[BaseModel],
        handler: Handler,
    ):
        """Register a widget (a tool whose result is also rendered by the host)"""
        self.register_tool(MCPTool(
            name=name,
            description=description,
            input_model=input_model,
            handler=handler,
            kind="widget",
            widget_description=widget_description,
        ))

    def get_tool(self, name: str) -> MCPTool:
        """Get a registered operation by name"""
        if name not in self.tools:
            raise ToolNotFoundError(name, self.list_tools())
        return self.tools[name]

    def list_tools(self) -> List[str]:
        """List all registered operation names"""
        return list(self.tools.keys())

    def validate_input(self, name: str, arguments: Optional[Dict[str, Any]]) -> BaseModel:
        """
        Validate arguments against an operation's input model

        Raises:
            ToolNotFoundError: If the operation is unknown
            ToolValidationError: If the arguments do not match the schema
        """
        tool = self.get_tool(name)
        try:
            return tool.input_model.model_validate(arguments or {})
        except ValidationError as e:
            logger.warning(f"Rejected arguments for {name}: {e.error_count()} error(s)")
            errors = [
                {"type": err["type"], "loc": list(err["loc"]), "msg": err["msg"]}
                for err in e.errors()
            ]
            raise ToolValidationError(name, errors)

    async def invoke_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Validate arguments and invoke an operation

        Validation errors are raised before the handler runs, so an
        invalid call never reaches the backend. Handler failures are
        already converted to error envelopes by the handler itself.

        Returns:
            Response envelope
        """
        tool = self.get_tool(name)
        validated = self.validate_input(name, arguments)

        logger.info(f"Invoking MCP tool: {name}")
        result = await tool.handler(validated)
        if result.get("isError"):
            logger.warning(f"Tool {name} returned an error envelope")
        return result

    def get_tool_schemas(self) -> List[Dict[str, Any]]:
        """Get discovery descriptors for all registered operations"""
        schemas = []
        for tool in self.tools.values():
            schema = {
                "name": tool.name,
                "description": tool.description,
                "inputSchema": tool.input_schema,
                "kind": tool.kind,
            }
            if tool.kind == "widget":
                schema["widget"] = {"description": tool.widget_description}
            schemas.append(schema)
        return schemas
