"""Text normalization.

Every value an extractor pulls out of markup passes through `clean` before it
lands in a `JobRecord`, so downstream code never sees None, leading/trailing
whitespace, or the newline/indentation runs HTML text is full of.
"""

from __future__ import annotations

import re
from typing import Optional

WHITESPACE_RE = re.compile(r"\s+")

# Description excerpts, not full descriptions.
NOTES_LIMIT = 1000
GENERIC_NOTES_LIMIT = 600


def clean(text: Optional[str]) -> str:
    """Trim and collapse internal whitespace runs to single spaces."""
    return WHITESPACE_RE.sub(" ", (text or "").strip())


def truncate(text: str, limit: int) -> str:
    """Cut `text` to at most `limit` characters."""
    return text[: max(limit, 0)]
