"""Reply messages sent back to the chat."""

import logging

from ..bot import TelegramBotClient
from .models import IncomingMessage, ParsedCommand

logger = logging.getLogger(__name__)

STORAGE_FAILURE_TEXT = "❌ Failed to save to Google Sheets."


def format_success(command: ParsedCommand, row: int) -> str:
    return f"✅ Data saved!\nName: {command.name}\nValue: {command.value}\n📊 Row {row}"


def format_unknown_column(name: str) -> str:
    return f'⚠️ Name "{name}" is not in the header row!'


class ReplyNotifier:
    """Sends replies to the triggering message. Delivery failures are logged, never raised."""

    def __init__(self, bot_client: TelegramBotClient):
        self.bot_client = bot_client

    async def reply(self, message: IncomingMessage, text: str) -> bool:
        try:
            await self.bot_client.send_reply(message.chat_id, text, message.message_id)
        except Exception as e:
            logger.warning(
                f"Failed to send reply to chat {message.chat_id} "
                f"(message {message.message_id}): {e}"
            )
            return False
        return True
