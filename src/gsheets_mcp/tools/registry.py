"""Tool registry for managing available tools."""

import inspect
from typing import Any, Callable, Optional

import mcp.types as types
from pydantic import BaseModel, ConfigDict, Field

from ..errors import MissingArgumentsError, UnknownToolError


class ToolParameter(BaseModel):
    """Definition of a tool parameter."""

    name: str
    type: str
    description: str = ""
    required: bool = True


class Tool(BaseModel):
    """Definition of a tool exposed to MCP clients."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    description: str
    parameters: list[ToolParameter] = Field(default_factory=list)
    handler: Optional[Callable] = Field(default=None, exclude=True)

    @property
    def required_parameters(self) -> list[str]:
        return [param.name for param in self.parameters if param.required]

    def input_schema(self) -> dict:
        """Build the JSON schema describing this tool's arguments."""
        properties = {}

        for param in self.parameters:
            prop = {"type": param.type}
            if param.description:
                prop["description"] = param.description
            properties[param.name] = prop

        return {
            "type": "object",
            "properties": properties,
            "required": self.required_parameters,
        }

    def to_mcp_tool(self) -> types.Tool:
        """Convert to the MCP tool listing format."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )


class ToolRegistry:
    """Registry for managing tools exposed by the server."""

    def __init__(self):
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool):
        """Register a tool."""
        self._tools[tool.name] = tool

    def get(self, name: str) -> Optional[Tool]:
        """Get a tool by name."""
        return self._tools.get(name)

    def list_tools(self) -> list[Tool]:
        """List all registered tools."""
        return list(self._tools.values())

    def to_mcp_tools(self) -> list[types.Tool]:
        """Convert all tools to MCP format."""
        return [tool.to_mcp_tool() for tool in self._tools.values()]

    async def execute(self, tool_name: str, arguments: dict) -> Any:
        """Execute a tool by name."""
        tool = self.get(tool_name)
        if not tool:
            raise UnknownToolError(tool_name)
        if not tool.handler:
            raise ValueError(f"Tool {tool_name} has no handler")

        missing = [name for name in tool.required_parameters if name not in arguments]
        if missing:
            raise MissingArgumentsError(missing)

        declared = {param.name for param in tool.parameters}
        kwargs = {name: value for name, value in arguments.items() if name in declared}

        if inspect.iscoroutinefunction(tool.handler):
            return await tool.handler(**kwargs)
        return tool.handler(**kwargs)
