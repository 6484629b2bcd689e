"""Tests for the tool registry."""

import pytest

from gsheets_mcp.errors import MissingArgumentsError, UnknownToolError
from gsheets_mcp.tools.registry import Tool, ToolParameter, ToolRegistry


class TestToolParameter:
    """Test ToolParameter model."""

    def test_tool_parameter_defaults(self):
        """Test that parameters are required by default."""
        param = ToolParameter(name="spreadsheetId", type="string")

        assert param.required is True
        assert param.description == ""
        assert set(param.model_dump()) == {"name", "type", "description", "required"}

    def test_tool_parameter_optional(self):
        """Test creating an optional parameter."""
        param = ToolParameter(
            name="sheet_name",
            type="string",
            description="The name of the sheet",
            required=False,
        )

        assert param.required is False


class TestTool:
    """Test Tool model."""

    def test_input_schema_basic(self):
        """Test building the JSON schema for a tool."""
        tool = Tool(
            name="read_spreadsheet",
            description="Read data",
            parameters=[
                ToolParameter(name="spreadsheetId", type="string"),
                ToolParameter(name="range", type="string", description="A1 range"),
            ],
        )

        schema = tool.input_schema()

        assert schema == {
            "type": "object",
            "properties": {
                "spreadsheetId": {"type": "string"},
                "range": {"type": "string", "description": "A1 range"},
            },
            "required": ["spreadsheetId", "range"],
        }

    def test_input_schema_optional_parameter(self):
        """Test that optional params are listed but not required."""
        tool = Tool(
            name="search",
            description="Search",
            parameters=[
                ToolParameter(
                    name="mode",
                    type="string",
                    required=False,
                ),
            ],
        )

        schema = tool.input_schema()

        assert schema["required"] == []
        assert schema["properties"] == {"mode": {"type": "string"}}

    def test_to_mcp_tool(self):
        """Test conversion to the MCP listing type."""
        tool = Tool(
            name="create_spreadsheet",
            description="Create a new Google Spreadsheet",
            parameters=[ToolParameter(name="title", type="string")],
        )

        mcp_tool = tool.to_mcp_tool()

        assert mcp_tool.name == "create_spreadsheet"
        assert mcp_tool.description == "Create a new Google Spreadsheet"
        assert mcp_tool.inputSchema["required"] == ["title"]


class TestToolRegistry:
    """Test ToolRegistry functionality."""

    def test_registry_initialization(self):
        assert ToolRegistry().list_tools() == []

    def test_register_and_get(self):
        registry = ToolRegistry()
        tool = Tool(name="my_tool", description="Test")

        registry.register(tool)

        assert registry.get("my_tool") is tool
        assert registry.get("nonexistent") is None

    def test_registry_overwrites_duplicate_names(self):
        registry = ToolRegistry()
        registry.register(Tool(name="tool", description="First"))
        registry.register(Tool(name="tool", description="Second"))

        assert len(registry.list_tools()) == 1
        assert registry.get("tool").description == "Second"

    def test_to_mcp_tools_preserves_order(self):
        registry = ToolRegistry()
        registry.register(Tool(name="tool1", description="First"))
        registry.register(Tool(name="tool2", description="Second"))

        assert [t.name for t in registry.to_mcp_tools()] == ["tool1", "tool2"]

    @pytest.mark.asyncio
    async def test_execute_sync_tool(self):
        """Test executing a synchronous tool."""

        def sync_handler(arg: str) -> str:
            return f"Result: {arg}"

        registry = ToolRegistry()
        registry.register(
            Tool(
                name="sync_tool",
                description="Sync",
                parameters=[ToolParameter(name="arg", type="string")],
                handler=sync_handler,
            )
        )

        assert await registry.execute("sync_tool", {"arg": "test"}) == "Result: test"

    @pytest.mark.asyncio
    async def test_execute_async_tool(self):
        """Test executing an asynchronous tool."""

        async def async_handler(arg: str) -> str:
            return f"Async result: {arg}"

        registry = ToolRegistry()
        registry.register(
            Tool(
                name="async_tool",
                description="Async",
                parameters=[ToolParameter(name="arg", type="string")],
                handler=async_handler,
            )
        )

        assert await registry.execute("async_tool", {"arg": "test"}) == "Async result: test"

    @pytest.mark.asyncio
    async def test_execute_ignores_undeclared_arguments(self):
        """Test that extra arguments are not passed to the handler."""
        registry = ToolRegistry()
        registry.register(
            Tool(
                name="echo",
                description="Echo",
                parameters=[ToolParameter(name="text", type="string")],
                handler=lambda text: text,
            )
        )

        assert await registry.execute("echo", {"text": "hi", "extra": 1}) == "hi"

    @pytest.mark.asyncio
    async def test_execute_nonexistent_tool_raises_error(self):
        """Test that executing an unknown tool names it in the error."""
        with pytest.raises(UnknownToolError, match="Unknown tool: nonexistent_tool"):
            await ToolRegistry().execute("nonexistent_tool", {"a": 1})

    @pytest.mark.asyncio
    async def test_execute_missing_required_argument(self):
        """Test that missing required fields are reported by name."""
        registry = ToolRegistry()
        registry.register(
            Tool(
                name="needs_two",
                description="Two args",
                parameters=[
                    ToolParameter(name="a", type="string"),
                    ToolParameter(name="b", type="string"),
                ],
                handler=lambda a, b: a + b,
            )
        )

        with pytest.raises(MissingArgumentsError, match="b") as exc_info:
            await registry.execute("needs_two", {"a": "x"})

        assert exc_info.value.missing == ["b"]

    @pytest.mark.asyncio
    async def test_execute_tool_without_handler_raises_error(self):
        registry = ToolRegistry()
        registry.register(Tool(name="no_handler", description="No handler"))

        with pytest.raises(ValueError, match="has no handler"):
            await registry.execute("no_handler", {})
