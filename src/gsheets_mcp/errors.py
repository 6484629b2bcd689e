"""Exceptions raised by the Google Sheets MCP server."""

from typing import Optional


class SheetsMCPError(Exception):
    """Base class for errors raised by this package."""


class CredentialError(SheetsMCPError):
    """The configured credentials could not be turned into a handle."""


class MissingArgumentsError(SheetsMCPError, ValueError):
    """A tool call arrived without the arguments it needs."""

    def __init__(self, missing: Optional[list[str]] = None):
        self.missing = missing or []
        if self.missing:
            message = f"Missing required arguments: {', '.join(self.missing)}"
        else:
            message = "Missing required arguments"
        super().__init__(message)


class UnknownToolError(SheetsMCPError, ValueError):
    """A tool call named a tool that is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")
