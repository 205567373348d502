"""SheetTally - Telegram group bot that tallies NAME/VALUE messages into Google Sheets."""

__version__ = "0.1.0"
