"""Resolve a command name to a spreadsheet column by header text."""

import asyncio
import logging
from typing import Any, Optional, Sequence

from ..sheets import ColumnAddress, GoogleSheetsClient, HEADER_ROW, SheetTarget
from .models import ErrorKind, StageResult

logger = logging.getLogger(__name__)


def normalize_header(cell: Any) -> str:
    """Normalize a header cell the way command names are normalized."""
    return str(cell or "").upper()


def find_column(name: str, headers: Sequence[Any]) -> Optional[ColumnAddress]:
    """Return the first column whose header equals name, ignoring case."""
    wanted = name.upper()
    for index, header in enumerate(headers):
        if normalize_header(header) == wanted:
            return ColumnAddress(index=index)
    return None


class ColumnResolver:
    """Looks up a column against the live header row.

    The header row is read on every call so header edits apply immediately.
    """

    def __init__(self, sheets_client: GoogleSheetsClient, target: SheetTarget):
        self.sheets_client = sheets_client
        self.target = target

    async def resolve(self, name: str) -> StageResult[ColumnAddress]:
        try:
            headers = await asyncio.to_thread(
                self.sheets_client.get_row,
                self.target.spreadsheet_id,
                self.target.sheet_name,
                HEADER_ROW,
            )
        except Exception as e:
            return StageResult.failure(ErrorKind.STORAGE_FAILURE, f"Header read failed: {e}")

        column = find_column(name, headers)
        if column is None:
            logger.info(f"No header matches {name!r} in {len(headers)} columns")
            return StageResult.failure(ErrorKind.UNKNOWN_COLUMN, name)

        logger.debug(f"Resolved {name!r} to column {column.label}")
        return StageResult.success(column)
