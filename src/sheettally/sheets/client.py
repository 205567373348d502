"""Google Sheets API client."""

import logging
import threading
from typing import Optional

from google.auth.transport.requests import Request
from google.oauth2 import service_account
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..config import Settings
from .a1 import quote_sheet_name
from .models import FIRST_DATA_ROW, HEADER_ROW, UpdateResult

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


class SheetsError(RuntimeError):
    """Raised when a read against the Sheets API fails."""


class GoogleSheetsClient:
    """Client for the few Sheets API calls the bot needs.

    The underlying httplib2 transport is not thread-safe, so every worker
    thread gets its own service object built from shared credentials.
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._credentials = None
        self._local = threading.local()
        self._credentials_lock = threading.Lock()

    def _get_credentials(self):
        """Load service account credentials, or get or refresh OAuth2 user credentials."""
        info = self._settings.google_credentials_info()
        if info is not None:
            return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)

        creds = None
        token_path = self._settings.google_token_path
        credentials_path = self._settings.google_credentials_path

        if token_path.exists():
            creds = Credentials.from_authorized_user_file(str(token_path), SCOPES)

        if not creds or not creds.valid:
            if creds and creds.expired and creds.refresh_token:
                creds.refresh(Request())
            else:
                if not credentials_path.exists():
                    raise FileNotFoundError(
                        f"Google credentials file not found at {credentials_path}. "
                        "Set GOOGLE_CREDENTIALS or download an OAuth client file "
                        "from Google Cloud Console."
                    )
                flow = InstalledAppFlow.from_client_secrets_file(str(credentials_path), SCOPES)
                creds = flow.run_local_server(port=0)

            # Save credentials for next run
            token_path.parent.mkdir(parents=True, exist_ok=True)
            with open(token_path, "w") as token:
                token.write(creds.to_json())

        return creds

    @property
    def credentials(self):
        with self._credentials_lock:
            if self._credentials is None:
                self._credentials = self._get_credentials()
            return self._credentials

    @property
    def service(self):
        """Get or create the Sheets API service for the current thread."""
        service = getattr(self._local, "service", None)
        if service is None:
            service = build(
                "sheets", "v4", credentials=self.credentials, cache_discovery=False
            )
            self._local.service = service
        return service

    def get_row(
        self,
        spreadsheet_id: str,
        sheet_name: str,
        row_index: int = HEADER_ROW,
    ) -> list[str]:
        """Read the values of a whole row, left to right."""
        range_notation = f"{quote_sheet_name(sheet_name)}!{row_index}:{row_index}"
        try:
            result = (
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=spreadsheet_id, range=range_notation)
                .execute()
            )
        except HttpError as e:
            raise SheetsError(f"Failed to read row {row_index}: {e}")

        values = result.get("values", [])
        return list(values[0]) if values else []

    def get_column_range(
        self,
        spreadsheet_id: str,
        sheet_name: str,
        column_label: str,
        start_row: int = FIRST_DATA_ROW,
    ) -> list[Optional[str]]:
        """Read formatted values of a column from start_row to the last populated row.

        Empty cells inside the range come back as None.
        """
        range_notation = (
            f"{quote_sheet_name(sheet_name)}!{column_label}{start_row}:{column_label}"
        )
        try:
            result = (
                self.service.spreadsheets()
                .get(
                    spreadsheetId=spreadsheet_id,
                    ranges=[range_notation],
                    includeGridData=True,
                    fields="sheets.data.rowData.values.formattedValue",
                )
                .execute()
            )
        except HttpError as e:
            raise SheetsError(f"Failed to scan column {column_label}: {e}")

        sheets = result.get("sheets") or [{}]
        data = sheets[0].get("data") or [{}]
        row_data = data[0].get("rowData", [])

        values = []
        for row in row_data:
            cells = row.get("values") or [{}]
            values.append(cells[0].get("formattedValue"))
        return values

    def set_cell(
        self,
        spreadsheet_id: str,
        sheet_name: str,
        column_label: str,
        row_number: int,
        value: str,
        user_entered: bool = True,
    ) -> UpdateResult:
        """Write a single value into one cell."""
        range_notation = f"{quote_sheet_name(sheet_name)}!{column_label}{row_number}"
        try:
            result = (
                self.service.spreadsheets()
                .values()
                .update(
                    spreadsheetId=spreadsheet_id,
                    range=range_notation,
                    valueInputOption="USER_ENTERED" if user_entered else "RAW",
                    body={"values": [[value]]},
                )
                .execute()
            )
        except HttpError as e:
            return UpdateResult(
                success=False,
                spreadsheet_id=spreadsheet_id,
                errors=[str(e)],
            )

        return UpdateResult(
            success=True,
            spreadsheet_id=spreadsheet_id,
            updated_cells=result.get("updatedCells", 0),
            updated_range=result.get("updatedRange", range_notation),
        )
