"""Pytest configuration and shared fixtures."""

from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from sheettally.bot import TelegramBotClient
from sheettally.config import Settings
from sheettally.pipeline import IncomingMessage, MessageHandler
from sheettally.sheets import GoogleSheetsClient, UpdateResult


@pytest.fixture
def mock_settings(tmp_path: Path) -> Settings:
    """Create settings with test values."""
    return Settings(
        telegram_token="123:test-token",
        sheet_id="test-sheet-123",
        sheet_name="Sheet1",
        google_credentials='{"type": "service_account"}',
        google_credentials_path=tmp_path / "credentials.json",
        google_token_path=tmp_path / "token.json",
        host="127.0.0.1",
        port=3000,
        debug=False,
        serialize_column_writes=True,
    )


@pytest.fixture
def mock_sheets_client() -> Mock:
    """Create a mocked Google Sheets client with a two-column sheet."""
    client = Mock(spec=GoogleSheetsClient)

    client.get_row = Mock(return_value=["ALICE", "BOB"])
    client.get_column_range = Mock(return_value=["5"])
    client.set_cell = Mock(
        return_value=UpdateResult(
            success=True,
            spreadsheet_id="test-sheet-123",
            updated_cells=1,
            updated_range="'Sheet1'!A3",
        )
    )

    return client


@pytest.fixture
def mock_bot_client() -> Mock:
    """Create a mocked Telegram bot client."""
    client = Mock(spec=TelegramBotClient)
    client.send_reply = AsyncMock(return_value={"message_id": 99})
    return client


@pytest.fixture
def handler(mock_settings, mock_sheets_client, mock_bot_client) -> MessageHandler:
    """Create a message handler wired to mocked clients."""
    return MessageHandler(mock_settings, mock_sheets_client, mock_bot_client)


@pytest.fixture
def make_message():
    """Build incoming messages with sensible defaults."""

    def _make(text: str = "alice/42", chat_type: str = "group", message_id: int = 7):
        return IncomingMessage(
            chat_id=-1001,
            message_id=message_id,
            chat_type=chat_type,
            text=text,
        )

    return _make
