"""Top-level handling of incoming chat messages."""

import asyncio
import logging
from typing import Optional

from ..bot import TelegramBotClient, TelegramUpdate
from ..config import Settings
from ..sheets import GoogleSheetsClient, SheetTarget, TargetCell
from .locator import RowLocator
from .locks import ColumnLocks
from .models import ErrorKind, HandlingResult, IncomingMessage, Outcome
from .notifier import (
    STORAGE_FAILURE_TEXT,
    ReplyNotifier,
    format_success,
    format_unknown_column,
)
from .parser import parse_command
from .resolver import ColumnResolver
from .writer import CellWriter

logger = logging.getLogger(__name__)


class MessageHandler:
    """Runs the parse, resolve, locate, write, reply pipeline for each message.

    Every update is handled in its own task; a failure while handling one
    message never reaches the caller or any other message.
    """

    def __init__(
        self,
        settings: Settings,
        sheets_client: GoogleSheetsClient,
        bot_client: TelegramBotClient,
    ):
        self.target = SheetTarget(
            spreadsheet_id=settings.sheet_id or "",
            sheet_name=settings.sheet_name,
        )
        self.resolver = ColumnResolver(sheets_client, self.target)
        self.locator = RowLocator(sheets_client, self.target)
        self.writer = CellWriter(sheets_client, self.target)
        self.notifier = ReplyNotifier(bot_client)
        self.locks = ColumnLocks(enabled=settings.serialize_column_writes)
        self._tasks: set[asyncio.Task] = set()

    def dispatch(self, update: TelegramUpdate) -> Optional[asyncio.Task]:
        """Schedule handling of an update and return without waiting for it."""
        if update.message is None:
            logger.debug(f"Ignoring update {update.update_id} without a message")
            return None

        message = IncomingMessage.from_telegram(update.message)
        task = asyncio.create_task(self._handle_safely(message))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _handle_safely(self, message: IncomingMessage) -> Optional[HandlingResult]:
        try:
            return await self.handle(message)
        except Exception:
            logger.exception(f"Unhandled error for message {message.message_id}")
            return None

    async def handle(self, message: IncomingMessage) -> HandlingResult:
        """Handle one message and report what happened."""
        if not message.is_group:
            logger.debug(f"Ignoring message from {message.chat_type} chat {message.chat_id}")
            return HandlingResult(outcome=Outcome.IGNORED)

        command = parse_command(message.text)
        if command is None:
            logger.debug(f"Ignoring non-command message {message.message_id}")
            return HandlingResult(outcome=Outcome.IGNORED)

        column_result = await self.resolver.resolve(command.name)
        if not column_result.ok:
            return await self._fail(message, command, column_result.error, column_result.detail)
        column = column_result.value

        async with self.locks.for_column(
            self.target.spreadsheet_id, self.target.sheet_name, column.label
        ):
            row_result = await self.locator.locate(column)
            if not row_result.ok:
                return await self._fail(message, command, row_result.error, row_result.detail)

            cell = TargetCell(column=column, row=row_result.value)
            write_result = await self.writer.write(cell, command.value)
            if not write_result.ok:
                return await self._fail(
                    message, command, write_result.error, write_result.detail, cell
                )

        logger.info(
            f"INPUT OK: {command.name}/{command.value} -> "
            f"{cell.range_notation(self.target.sheet_name)}"
        )
        replied = await self.notifier.reply(message, format_success(command, cell.row))
        return HandlingResult(
            outcome=Outcome.WRITTEN, command=command, cell=cell, replied=replied
        )

    async def _fail(self, message, command, error, detail, cell=None) -> HandlingResult:
        if error == ErrorKind.UNKNOWN_COLUMN:
            outcome = Outcome.UNKNOWN_COLUMN
            text = format_unknown_column(command.name)
        else:
            outcome = Outcome.STORAGE_FAILURE
            text = STORAGE_FAILURE_TEXT
            logger.error(f"Sheets error for {command.name}/{command.value}: {detail}")

        replied = await self.notifier.reply(message, text)
        return HandlingResult(outcome=outcome, command=command, cell=cell, replied=replied)

    async def shutdown(self):
        """Wait for in-flight messages to finish."""
        if self._tasks:
            logger.info(f"Waiting for {len(self._tasks)} in-flight messages")
            await asyncio.gather(*self._tasks, return_exceptions=True)
