"""Google Sheets tools exposed over MCP."""

import json
import logging
from typing import Any, Optional

from ..auth import CredentialSession
from ..errors import MissingArgumentsError
from ..formulas import FormulaAdvisor
from ..sheets import GoogleSheetsClient, SpreadsheetRef
from .registry import Tool, ToolParameter, ToolRegistry

logger = logging.getLogger(__name__)


def _spreadsheet_id_param() -> ToolParameter:
    return ToolParameter(
        name="spreadsheetId",
        type="string",
        description="The ID of the Google Spreadsheet (from the URL)",
    )


def _range_param() -> ToolParameter:
    return ToolParameter(
        name="range",
        type="string",
        description="The range in A1 notation (e.g., 'Sheet1!A1:C10')",
    )


class SheetsToolDispatcher:
    """Declares the spreadsheet tools and routes calls to them.

    Structured results are returned as indented JSON text; formula
    suggestions are returned as the bare formula string.
    """

    def __init__(
        self,
        session: Optional[CredentialSession] = None,
        client: Optional[GoogleSheetsClient] = None,
        advisor: Optional[FormulaAdvisor] = None,
    ):
        self.session = session or CredentialSession()
        self.client = client or GoogleSheetsClient(self.session)
        self.advisor = advisor or FormulaAdvisor(self.client)
        self.registry = ToolRegistry()
        self.register(self.registry)

    def register(self, registry: ToolRegistry):
        """Register all spreadsheet tools with the registry."""
        registry.register(self._create_spreadsheet_tool())
        registry.register(self._read_spreadsheet_tool())
        registry.register(self._suggest_formula_tool())
        registry.register(self._apply_formula_tool())

    async def dispatch(self, name: str, arguments: Optional[dict]) -> str:
        """Run a tool call and return its text payload."""
        if not arguments:
            raise MissingArgumentsError()

        self.session.acquire()
        logger.info(f"Calling tool: {name}")

        result = await self.registry.execute(name, arguments)
        return self._to_text(result)

    @staticmethod
    def _to_text(result: Any) -> str:
        if isinstance(result, str):
            return result
        return json.dumps(result, indent=2)

    def _create_spreadsheet_tool(self) -> Tool:
        """Create the create_spreadsheet tool."""

        def handler(title: str) -> dict:
            return self.client.create_spreadsheet(title).to_payload()

        return Tool(
            name="create_spreadsheet",
            description="Create a new Google Spreadsheet",
            parameters=[
                ToolParameter(
                    name="title",
                    type="string",
                    description="Title of the new spreadsheet",
                ),
            ],
            handler=handler,
        )

    def _read_spreadsheet_tool(self) -> Tool:
        """Create the read_spreadsheet tool."""

        def handler(spreadsheetId: str, range: str) -> dict:
            return self.client.read_spreadsheet(spreadsheetId, range).to_payload()

        return Tool(
            name="read_spreadsheet",
            description="Read data from a Google Spreadsheet",
            parameters=[_spreadsheet_id_param(), _range_param()],
            handler=handler,
        )

    def _suggest_formula_tool(self) -> Tool:
        """Create the suggest_formula tool."""

        def handler(spreadsheetId: str, range: str, description: str) -> str:
            ref = SpreadsheetRef(spreadsheet_id=spreadsheetId, range=range)
            return self.advisor.suggest(ref, description).formula

        return Tool(
            name="suggest_formula",
            description="Suggest a Google Sheets formula based on natural language description",
            parameters=[
                _spreadsheet_id_param(),
                _range_param(),
                ToolParameter(
                    name="description",
                    type="string",
                    description="What the formula should do, in plain words",
                ),
            ],
            handler=handler,
        )

    def _apply_formula_tool(self) -> Tool:
        """Create the apply_formula tool."""

        def handler(spreadsheetId: str, range: str, formula: str) -> dict:
            return self.client.apply_formula(spreadsheetId, range, formula).to_payload()

        return Tool(
            name="apply_formula",
            description="Apply a formula to a Google Spreadsheet",
            parameters=[
                _spreadsheet_id_param(),
                _range_param(),
                ToolParameter(
                    name="formula",
                    type="string",
                    description="Formula written into every cell of the range (e.g., '=SUM(A1:A10)')",
                ),
            ],
            handler=handler,
        )
