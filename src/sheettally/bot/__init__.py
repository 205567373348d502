"""Telegram Bot API integration."""

from .client import TelegramBotClient, TelegramError
from .models import GROUP_CHAT_TYPES, TelegramChat, TelegramMessage, TelegramUpdate

__all__ = [
    "TelegramBotClient",
    "TelegramError",
    "TelegramChat",
    "TelegramMessage",
    "TelegramUpdate",
    "GROUP_CHAT_TYPES",
]
