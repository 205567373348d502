"""Telegram Bot API client."""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class TelegramError(RuntimeError):
    """Raised when a Bot API call fails or returns ok=false."""


class TelegramBotClient:
    """Minimal async Telegram Bot API HTTP client."""

    def __init__(
        self,
        token: str,
        base_url: str = "https://api.telegram.org",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/bot{token}/",
            timeout=timeout,
            transport=transport,
        )

    async def _call(self, method: str, payload: dict) -> dict:
        try:
            response = await self._client.post(method, json=payload)
        except httpx.HTTPError as e:
            raise TelegramError(f"{method} request failed: {e}")

        try:
            data = response.json()
        except ValueError:
            raise TelegramError(f"{method} returned HTTP {response.status_code}")

        if not data.get("ok"):
            description = data.get("description", f"HTTP {response.status_code}")
            raise TelegramError(f"{method} failed: {description}")
        return data.get("result")

    async def send_reply(self, chat_id: int, text: str, reply_to_message_id: int) -> dict:
        """Send text to a chat as a reply to one of its messages."""
        return await self._call(
            "sendMessage",
            {
                "chat_id": chat_id,
                "text": text,
                "reply_parameters": {
                    "message_id": reply_to_message_id,
                    "allow_sending_without_reply": True,
                },
            },
        )

    async def set_webhook(self, url: str) -> bool:
        """Point the bot's webhook at url."""
        result = await self._call("setWebhook", {"url": url, "allowed_updates": ["message"]})
        logger.info(f"Webhook set to {url}")
        return bool(result)

    async def aclose(self):
        await self._client.aclose()
