"""Google Sheets MCP server: spreadsheet tools with keyword-based formula suggestions."""

__version__ = "1.0.0"
