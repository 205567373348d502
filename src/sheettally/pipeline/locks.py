"""Per-column locks for the locate-then-write sequence."""

import asyncio
import contextlib


class ColumnLocks:
    """Hands out one asyncio.Lock per (spreadsheet, sheet, column).

    When disabled, every column gets a no-op context and concurrent handlers
    may pick the same empty row.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._locks: dict[tuple[str, str, str], asyncio.Lock] = {}

    def for_column(self, spreadsheet_id: str, sheet_name: str, column_label: str):
        if not self.enabled:
            return contextlib.nullcontext()
        key = (spreadsheet_id, sheet_name, column_label)
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        return lock

    def size(self) -> int:
        return len(self._locks)
