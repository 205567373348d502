"""Google Sheets API integration."""

from .a1 import col_letter_to_index, index_to_col_letter, quote_sheet_name
from .client import GoogleSheetsClient, SheetsError
from .models import (
    FIRST_DATA_ROW,
    HEADER_ROW,
    ColumnAddress,
    SheetTarget,
    TargetCell,
    UpdateResult,
)

__all__ = [
    "GoogleSheetsClient",
    "SheetsError",
    "SheetTarget",
    "ColumnAddress",
    "TargetCell",
    "UpdateResult",
    "HEADER_ROW",
    "FIRST_DATA_ROW",
    "col_letter_to_index",
    "index_to_col_letter",
    "quote_sheet_name",
]
