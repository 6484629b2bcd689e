"""MCP server exposing the spreadsheet tools over stdio."""

import logging
from typing import Any, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .config import Settings, settings as default_settings
from .tools import SheetsToolDispatcher

logger = logging.getLogger(__name__)


def build_server(
    dispatcher: SheetsToolDispatcher, settings: Optional[Settings] = None
) -> Server:
    """Create an MCP server whose tools are backed by ``dispatcher``."""
    settings = settings or default_settings
    server = Server(settings.server_name, version=settings.server_version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return dispatcher.registry.to_mcp_tools()

    # The dispatcher validates arguments itself.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[dict[str, Any]]) -> list[types.TextContent]:
        text = await dispatcher.dispatch(name, arguments)
        return [types.TextContent(type="text", text=text)]

    return server


async def serve(settings: Optional[Settings] = None):
    """Run the server on stdio until the client disconnects."""
    dispatcher = SheetsToolDispatcher()

    # Retried lazily on the first tool call if this fails.
    try:
        dispatcher.session.acquire()
    except Exception:
        logger.error("Initial authentication failed, will retry on first API call")

    server = build_server(dispatcher, settings)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Google Sheets MCP Server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
