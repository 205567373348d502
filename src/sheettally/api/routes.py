"""API routes for SheetTally."""

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from ..bot import TelegramUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def get_handler():
    """Get the global message handler."""
    from .app import get_handler as _get_handler

    return _get_handler()


async def index():
    """Liveness banner."""
    return PlainTextResponse("✅ Bot active (group only + reply + Google Sheets)")


async def receive_update(request: Request):
    """Accept a Telegram update and hand it off without waiting for the result."""
    try:
        payload = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body is not JSON")

    try:
        update = TelegramUpdate.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Rejected webhook payload: {e.error_count()} validation errors")
        raise HTTPException(status_code=400, detail="Not a Telegram update")

    get_handler().dispatch(update)
    return {"ok": True}


@router.get("/health")
async def health_check():
    """Health check endpoint with non-secret diagnostics."""
    from ..config import settings

    config = {
        "sheet_name": settings.sheet_name,
        "sheet_id_present": bool(settings.sheet_id),
        "telegram_token_present": bool(settings.telegram_token),
        "google_credentials_configured": bool(settings.google_credentials)
        or settings.google_credentials_path.exists(),
        "serialize_column_writes": settings.serialize_column_writes,
        "webhook_path": settings.webhook_path,
    }

    return {
        "status": "ok",
        "service": "sheettally",
        "config": config,
    }
