"""Configuration management for SheetTally."""

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()


class ConfigError(ValueError):
    """Raised when a configuration value cannot be used."""


class Settings(BaseModel):
    """Application settings.

    Built once at startup and passed explicitly to the components that need it.
    """

    model_config = ConfigDict(frozen=True)

    # Telegram bot
    telegram_token: Optional[str] = os.getenv("TELEGRAM_TOKEN")
    telegram_api_base: str = os.getenv("TELEGRAM_API_BASE", "https://api.telegram.org")

    # Target spreadsheet
    sheet_id: Optional[str] = os.getenv("SHEET_ID")
    sheet_name: str = os.getenv("SHEET_NAME", "Sheet1")

    # Google credentials: service account JSON, or the OAuth client/token files
    google_credentials: Optional[str] = os.getenv("GOOGLE_CREDENTIALS")
    google_credentials_path: Path = Path(os.getenv("GOOGLE_CREDENTIALS_PATH", "credentials.json"))
    google_token_path: Path = Path(os.getenv("GOOGLE_TOKEN_PATH", "token.json"))

    # Server settings
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "3000"))
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    webhook_path: str = os.getenv("WEBHOOK_PATH", "/webhook")
    public_url: Optional[str] = os.getenv("PUBLIC_URL")

    # Outbound HTTP timeout in seconds
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "30"))

    # Serialize locate-then-write per column (false restores unguarded writes)
    serialize_column_writes: bool = (
        os.getenv("SERIALIZE_COLUMN_WRITES", "true").lower() == "true"
    )

    def google_credentials_info(self) -> Optional[dict]:
        """Parse the service account JSON, if one is configured."""
        if not self.google_credentials:
            return None
        try:
            info = json.loads(self.google_credentials)
        except json.JSONDecodeError as e:
            raise ConfigError(f"GOOGLE_CREDENTIALS is not valid JSON: {e}")
        if not isinstance(info, dict):
            raise ConfigError("GOOGLE_CREDENTIALS must be a JSON object")
        return info

    def missing_required(self) -> list[str]:
        """Return the names of required settings that are not set."""
        missing = []
        if not self.telegram_token:
            missing.append("TELEGRAM_TOKEN")
        if not self.sheet_id:
            missing.append("SHEET_ID")
        if not self.google_credentials and not self.google_credentials_path.exists():
            missing.append("GOOGLE_CREDENTIALS")
        return missing


settings = Settings()
