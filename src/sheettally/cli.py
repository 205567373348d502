"""Command-line interface for SheetTally."""

import argparse
import asyncio
import logging
import sys

import uvicorn

from .config import ConfigError, settings

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="SheetTally - tally NAME/VALUE group messages into Google Sheets"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Server command
    server_parser = subparsers.add_parser("serve", help="Start the webhook server")
    server_parser.add_argument(
        "--host", default=settings.host, help=f"Host to bind to (default: {settings.host})"
    )
    server_parser.add_argument(
        "--port", type=int, default=settings.port, help=f"Port to bind to (default: {settings.port})"
    )
    server_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )

    # Auth command
    subparsers.add_parser("auth", help="Authenticate with Google Sheets API (OAuth user flow)")

    # Webhook command
    webhook_parser = subparsers.add_parser(
        "set-webhook", help="Register the webhook URL with Telegram"
    )
    webhook_parser.add_argument(
        "--url", help="Public base URL of this server (default: PUBLIC_URL)"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        run_server(args.host, args.port, args.reload)
    elif args.command == "auth":
        run_auth()
    elif args.command == "set-webhook":
        asyncio.run(run_set_webhook(args.url))
    else:
        parser.print_help()
        sys.exit(1)


def check_config() -> bool:
    """Log every missing or invalid setting. Returns True when the server can start."""
    missing = settings.missing_required()
    for name in missing:
        logger.error(f"Missing configuration: {name}")
    try:
        settings.google_credentials_info()
    except ConfigError as e:
        logger.error(str(e))
        return False
    return not missing


def run_server(host: str, port: int, reload: bool):
    """Run the web server."""
    if not check_config():
        sys.exit(1)
    logger.info(f"Server running on {host}:{port}")
    uvicorn.run(
        "sheettally.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


def run_auth():
    """Run the Google authentication flow."""
    from .sheets import GoogleSheetsClient

    print("Authenticating with Google Sheets API...")
    try:
        client = GoogleSheetsClient(settings)
        # Accessing the service property triggers auth
        _ = client.service
        print("Authentication successful!")
        print("Token saved. SheetTally can now write to Google Sheets.")
    except Exception as e:
        print(f"Authentication failed: {e}")
        sys.exit(1)


async def run_set_webhook(base_url: str = None):
    """Point Telegram at this server's webhook endpoint."""
    from .bot import TelegramBotClient, TelegramError

    base_url = base_url or settings.public_url
    if not base_url or not settings.telegram_token:
        logger.error("set-webhook needs TELEGRAM_TOKEN and --url or PUBLIC_URL")
        sys.exit(1)

    url = f"{base_url.rstrip('/')}{settings.webhook_path}"
    client = TelegramBotClient(
        settings.telegram_token,
        base_url=settings.telegram_api_base,
        timeout=settings.request_timeout,
    )
    try:
        await client.set_webhook(url)
        print(f"Webhook registered: {url}")
    except TelegramError as e:
        print(f"Failed to register webhook: {e}")
        sys.exit(1)
    finally:
        await client.aclose()


if __name__ == "__main__":
    main()
