"""Episode title extraction from free-form greeting text.

Patterns are tried in order against the trimmed greeting; the first match
wins and its capture group (trimmed) is the title:

  **Coffee Shop Confession**   bold markdown at the very start
  # Pilot                      single-# heading on the first line
  "Runaway"                    double-quoted text at the very start
  Episode 3: The Reveal        numbered episode prefix (case-insensitive)

Fallback: a first line of at most 50 characters, with any * # " removed.
Anything longer gives None and the catalog uses a positional default.
"""

import re

MAX_FALLBACK_TITLE_LENGTH = 50

TITLE_PATTERNS = [
    re.compile(r"^\*\*([^*]+)\*\*"),
    re.compile(r"^#\s+(.+?)(?:\n|$)"),
    re.compile(r'^"([^"]+)"'),
    re.compile(r"^Episode\s+\d+:\s*(.+?)(?:\n|$)", re.IGNORECASE),
]

_MARKER_CHARS = re.compile(r'[*#"]')


def extract_title(text: str) -> str | None:
    """Return a title for a greeting, or None if none can be derived."""
    trimmed = text.strip()
    for pattern in TITLE_PATTERNS:
        match = pattern.match(trimmed)
        if match:
            return match.group(1).strip()

    first_line = trimmed.split("\n")[0]
    if first_line and len(first_line) <= MAX_FALLBACK_TITLE_LENGTH:
        return _MARKER_CHARS.sub("", first_line).strip() or None
    return None
