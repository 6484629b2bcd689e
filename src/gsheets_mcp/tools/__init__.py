"""MCP tools for Google Sheets."""

from .registry import Tool, ToolParameter, ToolRegistry
from .sheets import SheetsToolDispatcher

__all__ = ["SheetsToolDispatcher", "ToolRegistry", "Tool", "ToolParameter"]
