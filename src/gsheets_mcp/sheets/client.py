"""Google Sheets API client."""

import logging
from typing import Any, Optional, Union

from googleapiclient.discovery import build

from ..auth import CredentialSession
from .models import CreatedSpreadsheet, FormulaResult, NoDataResult, TabularResult

logger = logging.getLogger(__name__)

# Makes the backend parse "=..." as a formula instead of a literal string.
FORMULA_INPUT_OPTION = "USER_ENTERED"


class GoogleSheetsClient:
    """Client for interacting with Google Sheets API.

    Errors from the backend are logged and re-raised unchanged; nothing is
    retried.
    """

    def __init__(self, session: Optional[CredentialSession] = None):
        self.session = session or CredentialSession()
        self._service = None
        self._credentials = None

    @property
    def service(self):
        """Get the Sheets API service, rebuilding it if the credentials changed."""
        credentials = self.session.acquire()
        if self._service is None or credentials is not self._credentials:
            self._service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
            self._credentials = credentials
        return self._service

    def get_values(self, spreadsheet_id: str, range_notation: str) -> list[list[Any]]:
        """Fetch the raw row values of a range."""
        result = (
            self.service.spreadsheets()
            .values()
            .get(spreadsheetId=spreadsheet_id, range=range_notation)
            .execute()
        )
        return result.get("values", [])

    def create_spreadsheet(self, title: str) -> CreatedSpreadsheet:
        """Create a new spreadsheet; the backend assigns its id."""
        try:
            result = (
                self.service.spreadsheets()
                .create(body={"properties": {"title": title}})
                .execute()
            )
        except Exception as e:
            logger.error(f"Error creating spreadsheet: {e}")
            raise

        logger.info(f"Created spreadsheet {result.get('spreadsheetId')}")
        return CreatedSpreadsheet(
            spreadsheet_id=result.get("spreadsheetId"),
            spreadsheet_url=result.get("spreadsheetUrl"),
            title=result.get("properties", {}).get("title"),
        )

    def read_spreadsheet(
        self, spreadsheet_id: str, range_notation: str
    ) -> Union[TabularResult, NoDataResult]:
        """Read a range as header-keyed records."""
        try:
            rows = self.get_values(spreadsheet_id, range_notation)
        except Exception as e:
            logger.error(f"The API returned an error: {e}")
            raise

        if not rows:
            return NoDataResult()
        return TabularResult.from_rows(rows)

    def apply_formula(
        self, spreadsheet_id: str, range_notation: str, formula: str
    ) -> FormulaResult:
        """Write ``formula`` into every cell of the range and read back the results.

        The range's current contents decide the shape that gets written. Every
        cell receives the same literal text; the backend evaluates relative
        references per cell, so repeated application is not idempotent.
        """
        try:
            rows = self.get_values(spreadsheet_id, range_notation)
            formula_rows = [[formula for _ in row] for row in rows]

            self.service.spreadsheets().values().update(
                spreadsheetId=spreadsheet_id,
                range=range_notation,
                valueInputOption=FORMULA_INPUT_OPTION,
                body={"values": formula_rows},
            ).execute()
            logger.info(
                f"Wrote formula to {sum(len(r) for r in formula_rows)} cells "
                f"in {spreadsheet_id}!{range_notation}"
            )

            result = (
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=spreadsheet_id, range=range_notation)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error applying formula: {e}")
            raise

        return FormulaResult(original_formula=formula, results=result.get("values"))
