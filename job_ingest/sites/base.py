"""Base class for site extractors."""

from __future__ import annotations

import logging
from abc import ABC
from re import Pattern
from typing import ClassVar, Dict, Optional, Sequence

from bs4 import BeautifulSoup

from ..models import JobRecord
from ..normalize import NOTES_LIMIT, truncate
from .rules import Rule, first_match

logger = logging.getLogger(__name__)

FIELDS = ("company", "position", "location", "salary", "notes")


class SiteExtractor(ABC):
    """Turn the markup of one job page into a `JobRecord`.

    Subclasses declare `url_pattern` (None for the fallback extractor) and a
    `rules` table mapping each field name to its fallback chain. A field with
    no rules, or whose rules all come back empty, is "".
    """

    name: ClassVar[str]
    url_pattern: ClassVar[Optional[Pattern[str]]] = None
    notes_limit: ClassVar[int] = NOTES_LIMIT
    rules: ClassVar[Dict[str, Sequence[Rule]]] = {}

    @classmethod
    def matches_url(cls, url: str) -> bool:
        """Return True when this extractor is appropriate for the supplied URL."""
        return bool(cls.url_pattern and cls.url_pattern.search(url or ""))

    def extract(self, html: str, url: str) -> JobRecord:
        soup = BeautifulSoup(html or "", "html.parser")
        values = {field: first_match(soup, self.rules.get(field, ())) for field in FIELDS}
        values["notes"] = truncate(values["notes"], self.notes_limit)
        logger.debug(
            "%s extractor: %s",
            self.name,
            {field: len(value) for field, value in values.items()},
        )
        return JobRecord(job_url=url, **values)
