"""Google Sheets API integration."""

from .client import GoogleSheetsClient
from .models import (
    CreatedSpreadsheet,
    FormulaResult,
    NoDataResult,
    SpreadsheetRef,
    TabularResult,
)

__all__ = [
    "GoogleSheetsClient",
    "CreatedSpreadsheet",
    "FormulaResult",
    "NoDataResult",
    "SpreadsheetRef",
    "TabularResult",
]
