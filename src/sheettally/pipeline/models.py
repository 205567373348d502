"""Data models for the message-to-cell pipeline."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from ..bot.models import GROUP_CHAT_TYPES, TelegramMessage
from ..sheets.models import TargetCell

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Ways a single message's handling can fail."""

    NO_MATCH = "no_match"
    UNKNOWN_COLUMN = "unknown_column"
    STORAGE_FAILURE = "storage_failure"
    NOTIFY_FAILURE = "notify_failure"


class Outcome(str, Enum):
    """Final state of a handled message."""

    IGNORED = "ignored"
    WRITTEN = "written"
    UNKNOWN_COLUMN = "unknown_column"
    STORAGE_FAILURE = "storage_failure"


@dataclass
class StageResult(Generic[T]):
    """Value or error kind returned by a pipeline stage.

    ``detail`` is for logs only and is never shown to chat users.
    """

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "StageResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, detail: str = "") -> "StageResult[T]":
        return cls(error=error, detail=detail)


class IncomingMessage(BaseModel):
    """One chat message, reduced to what the pipeline reads."""

    chat_id: int
    message_id: int
    chat_type: str
    text: str = ""

    @property
    def is_group(self) -> bool:
        return self.chat_type in GROUP_CHAT_TYPES

    @classmethod
    def from_telegram(cls, message: TelegramMessage) -> "IncomingMessage":
        return cls(
            chat_id=message.chat.id,
            message_id=message.message_id,
            chat_type=message.chat.type,
            text=message.caption or message.text or "",
        )


class ParsedCommand(BaseModel):
    """A NAME/VALUE command taken from message text."""

    name: str  # trimmed, upper-cased
    value: str  # digits, kept as text


class HandlingResult(BaseModel):
    """What happened to one message."""

    outcome: Outcome
    command: Optional[ParsedCommand] = None
    cell: Optional[TargetCell] = None
    replied: bool = False
