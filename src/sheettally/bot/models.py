"""Data models for Telegram webhook payloads."""

from typing import Optional

from pydantic import BaseModel

GROUP_CHAT_TYPES = frozenset({"group", "supergroup"})


class TelegramChat(BaseModel):
    """The chat a message was posted in."""

    id: int
    type: str  # private, group, supergroup, channel
    title: Optional[str] = None

    @property
    def is_group(self) -> bool:
        return self.type in GROUP_CHAT_TYPES


class TelegramMessage(BaseModel):
    """A message, with only the fields the bot reads."""

    message_id: int
    chat: TelegramChat
    date: Optional[int] = None
    text: Optional[str] = None
    caption: Optional[str] = None


class TelegramUpdate(BaseModel):
    """An incoming update delivered to the webhook.

    Only ``message`` updates are handled; edits and channel posts are parsed
    so the payload validates, then ignored.
    """

    update_id: int
    message: Optional[TelegramMessage] = None
    edited_message: Optional[TelegramMessage] = None
    channel_post: Optional[TelegramMessage] = None
