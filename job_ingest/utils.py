"""Utility helpers shared across the package."""

from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Optional


def first_non_empty(candidates: Iterable[Callable[[], str]]) -> str:
    """Evaluate candidates in order and return the first non-empty result.

    Candidates are zero-argument callables so later ones are only evaluated
    when every earlier one came back empty. Returns "" when all are empty.
    """
    for candidate in candidates:
        value = candidate()
        if value:
            return value
    return ""


def today_iso(today: Optional[date] = None) -> str:
    """Return the given date (default: today, local time) as YYYY-MM-DD."""
    return (today or date.today()).isoformat()
