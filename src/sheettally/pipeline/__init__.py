"""Message-to-cell pipeline."""

from .handler import MessageHandler
from .locator import RowLocator, next_writable_row
from .locks import ColumnLocks
from .models import (
    ErrorKind,
    HandlingResult,
    IncomingMessage,
    Outcome,
    ParsedCommand,
    StageResult,
)
from .notifier import ReplyNotifier
from .parser import parse_command
from .resolver import ColumnResolver, find_column
from .writer import CellWriter

__all__ = [
    "MessageHandler",
    "ColumnResolver",
    "RowLocator",
    "CellWriter",
    "ReplyNotifier",
    "ColumnLocks",
    "parse_command",
    "find_column",
    "next_writable_row",
    "ErrorKind",
    "Outcome",
    "StageResult",
    "IncomingMessage",
    "ParsedCommand",
    "HandlingResult",
]
