from __future__ import annotations

from jobflow.extractors import patterns as p
from jobflow.extractors.base import SiteExtractor, first_match, found


class IndeedExtractor(SiteExtractor):
    name = "Indeed"
    host_patterns = ("indeed.com", "indeed.ca")

    def extract(self, html: str, url: str) -> dict[str, str]:
        return found(
            title=first_match(p.INDEED_TITLE, html),
            company=first_match(p.INDEED_COMPANY, html),
            location=first_match(p.INDEED_LOCATION, html),
            salary=first_match(p.INDEED_SALARY, html),
        )
