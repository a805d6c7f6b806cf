"""Tests for the MCP operation registry and input validation."""

import pytest

from snaptask_mcp.mcp.server import MCPServer, MCPTool, ToolNotFoundError, ToolValidationError
from snaptask_mcp.schemas.tools import TodayViewInput

EXPECTED_TOOLS = [
    "today_view",
    "create_tasks_from_text",
    "update_task_status",
    "week_overview",
    "suggest_next_tasks",
]


async def _noop(params):
    return {"content": [{"type": "text", "text": "ok"}], "isError": False}


class TestRegistry:
    def test_all_operations_registered(self, mcp_server) -> None:
        assert mcp_server.list_tools() == EXPECTED_TOOLS

    def test_duplicate_registration_rejected(self) -> None:
        server = MCPServer()
        tool = MCPTool(name="x", description="x", input_model=TodayViewInput, handler=_noop)
        server.register_tool(tool)

        with pytest.raises(ValueError):
            server.register_tool(tool)

    def test_unknown_tool(self, mcp_server) -> None:
        with pytest.raises(ToolNotFoundError):
            mcp_server.get_tool("delete_everything")

    def test_schemas_describe_each_operation(self, mcp_server) -> None:
        schemas = {schema["name"]: schema for schema in mcp_server.get_tool_schemas()}

        assert schemas["today_view"]["kind"] == "widget"
        assert schemas["today_view"]["widget"] == {"description": "Snaptask: today’s tasks overview"}
        assert schemas["create_tasks_from_text"]["inputSchema"]["required"] == ["text"]
        assert schemas["update_task_status"]["inputSchema"]["required"] == ["updates"]
        assert "required" not in schemas["week_overview"]["inputSchema"]
        days_ahead = schemas["suggest_next_tasks"]["inputSchema"]["properties"]["daysAhead"]
        assert "default 3" in days_ahead["description"]
        for name in EXPECTED_TOOLS[1:]:
            assert schemas[name]["kind"] == "tool"
            assert "widget" not in schemas[name]


class TestValidation:
    @pytest.mark.parametrize("name,arguments", [
        ("create_tasks_from_text", {}),
        ("create_tasks_from_text", {"text": ""}),
        ("create_tasks_from_text", {"text": 42}),
        ("update_task_status", {"updates": []}),
        ("update_task_status", {"updates": [{"id": "t1"}]}),
        ("update_task_status", {"updates": [{"id": "t1", "isCompleted": "yes"}]}),
        ("week_overview", {"referenceDateIso": "2024-01-05"}),
        ("week_overview", {"referenceDateIso": "next monday"}),
        ("week_overview", {"referenceDateIso": "2024-01-05T09:00:00"}),
        ("week_overview", {"referenceDateIso": "2024-01-05T09:00Z"}),
        ("week_overview", {"referenceDateIso": "1704445200"}),
        ("suggest_next_tasks", {"daysAhead": 0}),
        ("suggest_next_tasks", {"daysAhead": 15}),
        ("suggest_next_tasks", {"limit": 21}),
        ("suggest_next_tasks", {"limit": 2.5}),
        ("suggest_next_tasks", {"limit": "5"}),
    ])
    def test_invalid_arguments_rejected(self, mcp_server, name, arguments) -> None:
        with pytest.raises(ToolValidationError) as exc_info:
            mcp_server.validate_input(name, arguments)

        assert exc_info.value.tool_name == name
        assert exc_info.value.errors

    @pytest.mark.parametrize("name,arguments", [
        ("today_view", None),
        ("week_overview", {"referenceDateIso": "2024-01-05T09:00:00Z"}),
        ("week_overview", {"referenceDateIso": "2024-01-05T09:00:00.123+02:00"}),
        ("week_overview", {"referenceDateIso": "2024-01-05T09:00:00.1Z"}),
        ("suggest_next_tasks", {"daysAhead": 14, "limit": 1}),
    ])
    def test_valid_arguments_accepted(self, mcp_server, name, arguments) -> None:
        mcp_server.validate_input(name, arguments)

    @pytest.mark.asyncio
    async def test_invalid_call_never_reaches_backend(self, backend, mcp_server) -> None:
        with pytest.raises(ToolValidationError):
            await mcp_server.invoke_tool("update_task_status", {"updates": []})

        assert backend.requests == []
