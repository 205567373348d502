"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from ..bot import TelegramBotClient
from ..config import settings
from ..pipeline import MessageHandler
from ..sheets import GoogleSheetsClient
from .routes import index, receive_update, router

logger = logging.getLogger(__name__)

# Global handler instance
_handler: Optional[MessageHandler] = None
_bot_client: Optional[TelegramBotClient] = None


def get_handler() -> MessageHandler:
    """Get the global message handler, building it from settings on first use."""
    global _handler, _bot_client
    if _handler is None:
        _bot_client = TelegramBotClient(
            settings.telegram_token or "",
            base_url=settings.telegram_api_base,
            timeout=settings.request_timeout,
        )
        _handler = MessageHandler(settings, GoogleSheetsClient(settings), _bot_client)
    return _handler


async def close_handler():
    """Drain in-flight messages and release clients."""
    global _handler, _bot_client
    if _handler is not None:
        await _handler.shutdown()
        _handler = None
    if _bot_client is not None:
        await _bot_client.aclose()
        _bot_client = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    # Startup
    missing = settings.missing_required()
    if missing:
        for name in missing:
            logger.error(f"Missing configuration: {name}")
        raise RuntimeError(f"Incomplete configuration: {', '.join(missing)}")
    settings.google_credentials_info()
    get_handler()
    logger.info(f"Webhook endpoint: POST {settings.webhook_path}")
    logger.info(f"Sheet: {settings.sheet_name}")
    yield
    # Shutdown
    await close_handler()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="SheetTally",
        description="Telegram group bot that tallies NAME/VALUE messages into Google Sheets",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_api_route("/", index, methods=["GET"])
    app.add_api_route(settings.webhook_path, receive_update, methods=["POST"])
    app.include_router(router, prefix="/api")

    return app
