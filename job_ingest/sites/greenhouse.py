"""Greenhouse job boards (boards.greenhouse.io, job-boards.greenhouse.io)."""

from __future__ import annotations

import re

from .base import SiteExtractor
from .rules import AllText, Attr, Text


class GreenhouseExtractor(SiteExtractor):
    name = "greenhouse"
    url_pattern = re.compile(r"greenhouse\.io")
    rules = {
        "company": (
            Attr("meta[property='og:site_name']", "content"),
            AllText(".company-name"),
        ),
        "position": (Text("h1.app-title"), Text("h1"), Text(".opening > h1")),
        "location": (Text(".location, .location-name, .opening .location"),),
        # Greenhouse boards rarely expose compensation.
        "salary": (),
        "notes": (AllText(".content"),),
    }
