"""Find the next writable row in a column."""

import asyncio
import logging
from typing import Optional, Sequence

from ..sheets import ColumnAddress, FIRST_DATA_ROW, GoogleSheetsClient, SheetTarget
from .models import ErrorKind, StageResult

logger = logging.getLogger(__name__)


def next_writable_row(scan: Sequence[Optional[str]], start_row: int = FIRST_DATA_ROW) -> int:
    """Return the row number of the first empty cell in scan.

    ``scan[0]`` is the cell at ``start_row``. Emptiness is judged on this
    column alone. With no gaps the next row after the scan is returned.
    """
    for offset, value in enumerate(scan):
        if not value:
            return start_row + offset
    return start_row + len(scan)


class RowLocator:
    """Scans a column below the header row for a free cell."""

    def __init__(self, sheets_client: GoogleSheetsClient, target: SheetTarget):
        self.sheets_client = sheets_client
        self.target = target

    async def locate(self, column: ColumnAddress) -> StageResult[int]:
        try:
            scan = await asyncio.to_thread(
                self.sheets_client.get_column_range,
                self.target.spreadsheet_id,
                self.target.sheet_name,
                column.label,
                FIRST_DATA_ROW,
            )
        except Exception as e:
            return StageResult.failure(
                ErrorKind.STORAGE_FAILURE, f"Column {column.label} scan failed: {e}"
            )

        row = next_writable_row(scan)
        logger.debug(f"Column {column.label}: scanned {len(scan)} rows, next row {row}")
        return StageResult.success(row)
