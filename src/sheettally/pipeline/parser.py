"""Parse NAME/VALUE commands out of message text."""

import re
from typing import Optional

from .models import ParsedCommand

# Lazy name so the split happens at the last slash; digits run to end of text.
COMMAND_PATTERN = re.compile(r"(.+?)/([0-9]+)")


def parse_command(text: Optional[str]) -> Optional[ParsedCommand]:
    """Return the command in text, or None when text is not exactly NAME/DIGITS."""
    if not text:
        return None

    match = COMMAND_PATTERN.fullmatch(text)
    if not match:
        return None

    name = match.group(1).strip().upper()
    if not name:
        return None

    return ParsedCommand(name=name, value=match.group(2))
