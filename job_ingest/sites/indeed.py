"""Indeed job view pages (indeed.com/viewjob?jk=...)."""

from __future__ import annotations

import re

from .base import SiteExtractor
from .rules import AllText, NthText, Text

COMPANY_INFO = "div.jobsearch-CompanyInfoWithoutHeaderImage"
COMPANY_INFO_CONTAINER = "div.jobsearch-CompanyInfoContainer"


class IndeedExtractor(SiteExtractor):
    name = "indeed"
    url_pattern = re.compile(r"indeed\.com/viewjob")
    rules = {
        "company": (
            Text(f"{COMPANY_INFO} > div a, {COMPANY_INFO_CONTAINER} a"),
            Text("[data-company-name='true']"),
        ),
        "position": (Text("h1.jobsearch-JobInfoHeader-title"),),
        # First nested div holds the company, the second one the location.
        "location": (NthText(f"{COMPANY_INFO} div", 1), NthText(f"{COMPANY_INFO_CONTAINER} div", 1)),
        "salary": (Text("div.salary-snippet-container"), Text("span.attribute_snippet")),
        "notes": (AllText("div#jobDescriptionText"),),
    }
