"""Data models for Google Sheets operations."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class SpreadsheetRef(BaseModel):
    """A rectangular region of cells in a spreadsheet."""

    spreadsheet_id: str
    range: str  # A1 notation, passed to the backend unvalidated


class _ResultModel(BaseModel):
    """Base for results that are serialized with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class CreatedSpreadsheet(_ResultModel):
    """Result of creating a spreadsheet."""

    message: str = "Spreadsheet created successfully"
    spreadsheet_id: Optional[str] = Field(default=None, alias="spreadsheetId")
    spreadsheet_url: Optional[str] = Field(default=None, alias="spreadsheetUrl")
    title: Optional[str] = None


class NoDataResult(_ResultModel):
    """Marker returned when a range holds no rows."""

    message: str = "No data found."


class TabularResult(_ResultModel):
    """Rows of a range keyed by the labels in its first row."""

    headers: list[Any] = Field(default_factory=list)
    data: list[dict] = Field(default_factory=list)
    row_count: int = Field(default=0, alias="rowCount")

    @classmethod
    def from_rows(cls, rows: list[list[Any]]) -> "TabularResult":
        """Treat row 0 as headers; pair later rows with them positionally.

        Short rows give partial records and values beyond the last header
        are dropped.
        """
        headers = rows[0]
        data = [dict(zip(headers, row)) for row in rows[1:]]
        return cls(headers=headers, data=data, row_count=len(rows) - 1)


class FormulaResult(_ResultModel):
    """Result of writing a formula into a range."""

    message: str = "Formula applied successfully"
    original_formula: str = Field(alias="originalFormula")
    results: Optional[list[list[Any]]] = None
