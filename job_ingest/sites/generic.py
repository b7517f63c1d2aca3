"""Fallback extractor for sites without dedicated rules.

Only fields that are reliable across arbitrary pages are filled in: the site
name from Open Graph metadata and the first heading. Location and salary are
left empty, and the notes excerpt is shorter than for known sites.
"""

from __future__ import annotations

from .base import SiteExtractor
from .rules import AllText, Attr, Text
from ..normalize import GENERIC_NOTES_LIMIT


class GenericExtractor(SiteExtractor):
    name = "generic"
    notes_limit = GENERIC_NOTES_LIMIT
    rules = {
        "company": (
            Attr("meta[name='og:site_name']", "content"),
            Attr("meta[property='og:site_name']", "content"),
        ),
        "position": (Text("h1"),),
        "notes": (AllText("p, div"),),
    }
