"""Tests for the Google Sheets client."""

from unittest.mock import Mock, patch

import pytest
from googleapiclient.errors import HttpError

from sheettally.config import ConfigError, Settings
from sheettally.sheets import GoogleSheetsClient, SheetsError


def make_http_error(status: int = 500) -> HttpError:
    return HttpError(Mock(status=status, reason="boom"), b'{"error": {"message": "boom"}}')


@pytest.fixture
def service() -> Mock:
    return Mock()


@pytest.fixture
def client(mock_settings, service) -> GoogleSheetsClient:
    """Client whose per-thread service is a mock."""
    client = GoogleSheetsClient(mock_settings)
    client._local.service = service
    return client


class TestGetRow:
    """Test reading the header row."""

    def test_returns_first_row_values(self, client, service):
        values_get = service.spreadsheets.return_value.values.return_value.get
        values_get.return_value.execute.return_value = {"values": [["Alice", "", "Bob"]]}

        assert client.get_row("sheet-id", "Sheet1") == ["Alice", "", "Bob"]
        values_get.assert_called_once_with(spreadsheetId="sheet-id", range="'Sheet1'!1:1")

    def test_empty_row(self, client, service):
        values_get = service.spreadsheets.return_value.values.return_value.get
        values_get.return_value.execute.return_value = {}

        assert client.get_row("sheet-id", "Sheet1") == []

    def test_http_error_raises_sheets_error(self, client, service):
        values_get = service.spreadsheets.return_value.values.return_value.get
        values_get.return_value.execute.side_effect = make_http_error()

        with pytest.raises(SheetsError):
            client.get_row("sheet-id", "Sheet1")


class TestGetColumnRange:
    """Test scanning a column."""

    def test_maps_grid_data_to_formatted_values(self, client, service):
        sheets_get = service.spreadsheets.return_value.get
        sheets_get.return_value.execute.return_value = {
            "sheets": [
                {
                    "data": [
                        {
                            "rowData": [
                                {"values": [{"formattedValue": "10"}]},
                                {},
                                {"values": [{}]},
                                {"values": [{"formattedValue": "20"}]},
                            ]
                        }
                    ]
                }
            ]
        }

        scan = client.get_column_range("sheet-id", "Sheet1", "B")

        assert scan == ["10", None, None, "20"]
        kwargs = sheets_get.call_args.kwargs
        assert kwargs["ranges"] == ["'Sheet1'!B2:B"]
        assert kwargs["includeGridData"] is True

    def test_empty_column(self, client, service):
        sheets_get = service.spreadsheets.return_value.get
        sheets_get.return_value.execute.return_value = {"sheets": [{"data": [{}]}]}

        assert client.get_column_range("sheet-id", "Sheet1", "A") == []

    def test_http_error_raises_sheets_error(self, client, service):
        sheets_get = service.spreadsheets.return_value.get
        sheets_get.return_value.execute.side_effect = make_http_error(403)

        with pytest.raises(SheetsError):
            client.get_column_range("sheet-id", "Sheet1", "A")


class TestSetCell:
    """Test writing a single cell."""

    def test_writes_user_entered_value(self, client, service):
        update = service.spreadsheets.return_value.values.return_value.update
        update.return_value.execute.return_value = {
            "updatedCells": 1,
            "updatedRange": "Sheet1!A3",
        }

        result = client.set_cell("sheet-id", "Sheet1", "A", 3, "42")

        assert result.success is True
        assert result.updated_cells == 1
        assert result.updated_range == "Sheet1!A3"
        update.assert_called_once_with(
            spreadsheetId="sheet-id",
            range="'Sheet1'!A3",
            valueInputOption="USER_ENTERED",
            body={"values": [["42"]]},
        )

    def test_raw_input_option(self, client, service):
        update = service.spreadsheets.return_value.values.return_value.update
        update.return_value.execute.return_value = {}

        client.set_cell("sheet-id", "Sheet1", "A", 3, "42", user_entered=False)

        assert update.call_args.kwargs["valueInputOption"] == "RAW"

    def test_http_error_returns_failed_result(self, client, service):
        update = service.spreadsheets.return_value.values.return_value.update
        update.return_value.execute.side_effect = make_http_error()

        result = client.set_cell("sheet-id", "Sheet1", "A", 3, "42")

        assert result.success is False
        assert result.errors


class TestCredentials:
    """Test credential selection."""

    def test_service_account_json_used_when_present(self, mock_settings):
        client = GoogleSheetsClient(mock_settings)

        with patch(
            "sheettally.sheets.client.service_account.Credentials.from_service_account_info"
        ) as from_info:
            creds = client.credentials

        from_info.assert_called_once()
        assert from_info.call_args.args[0] == {"type": "service_account"}
        assert creds is from_info.return_value

    def test_invalid_json_raises_config_error(self, tmp_path):
        settings = Settings(
            google_credentials="{not json",
            google_credentials_path=tmp_path / "credentials.json",
        )

        with pytest.raises(ConfigError):
            GoogleSheetsClient(settings).credentials

    def test_missing_oauth_files_raise(self, tmp_path):
        settings = Settings(
            google_credentials=None,
            google_credentials_path=tmp_path / "credentials.json",
            google_token_path=tmp_path / "token.json",
        )

        with pytest.raises(FileNotFoundError):
            GoogleSheetsClient(settings).credentials
