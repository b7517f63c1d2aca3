"""Handshake job pages (joinhandshake.com, app.joinhandshake.com)."""

from __future__ import annotations

import re

from .base import SiteExtractor
from .rules import AllText, FollowingLabel, Text


class HandshakeExtractor(SiteExtractor):
    name = "handshake"
    url_pattern = re.compile(r"handshake\.com")
    rules = {
        "company": (Text("a[href*='/employers/']"), Text("[data-testid='employer-name']")),
        "position": (Text("h1"), Text("[data-testid='job-title']")),
        "location": (Text("[data-testid='job-location']"), Text("[data-testid='location']")),
        "salary": (FollowingLabel("div", "Compensation"), FollowingLabel("div", "Salary")),
        "notes": (AllText("[data-testid='job-description']"),),
    }
