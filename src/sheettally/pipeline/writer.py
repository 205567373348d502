"""Write a value into a resolved cell."""

import asyncio

from ..sheets import GoogleSheetsClient, SheetTarget, TargetCell, UpdateResult
from .models import ErrorKind, StageResult


class CellWriter:
    """Writes one value as if typed by a user, so the sheet applies its own coercion."""

    def __init__(self, sheets_client: GoogleSheetsClient, target: SheetTarget):
        self.sheets_client = sheets_client
        self.target = target

    async def write(self, cell: TargetCell, value: str) -> StageResult[UpdateResult]:
        try:
            result = await asyncio.to_thread(
                self.sheets_client.set_cell,
                self.target.spreadsheet_id,
                self.target.sheet_name,
                cell.column.label,
                cell.row,
                value,
                True,
            )
        except Exception as e:
            return StageResult.failure(ErrorKind.STORAGE_FAILURE, f"Write to {cell.a1} failed: {e}")

        if not result.success:
            return StageResult.failure(
                ErrorKind.STORAGE_FAILURE,
                f"Write to {cell.a1} failed: {'; '.join(result.errors)}",
            )
        return StageResult.success(result)
