"""LinkedIn public job view pages (linkedin.com/jobs/view/...)."""

from __future__ import annotations

import re

from .base import SiteExtractor
from .rules import AllText, LastText, Text


class LinkedInExtractor(SiteExtractor):
    name = "linkedin"
    url_pattern = re.compile(r"linkedin\.com/jobs")
    rules = {
        "company": (Text("a.topcard__org-name-link"), Text("span.topcard__flavor")),
        "position": (Text("h1.top-card-layout__title"), Text("h1.topcard__title")),
        # The top card lists company first and location last.
        "location": (LastText("span.topcard__flavor--bullet"), LastText("span.topcard__flavor")),
        "salary": (),
        "notes": (AllText("div.show-more-less-html__markup"),),
    }
