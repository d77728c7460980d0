from __future__ import annotations

from jobflow.extractors import patterns as p
from jobflow.extractors.base import SiteExtractor, first_match, found


class GlassdoorExtractor(SiteExtractor):
    name = "Glassdoor"
    host_patterns = ("glassdoor.com", "glassdoor.ca")

    def extract(self, html: str, url: str) -> dict[str, str]:
        return found(
            title=first_match(p.GLASSDOOR_TITLE, html),
            company=first_match(p.GLASSDOOR_COMPANY, html),
            location=first_match(p.LOCATION_DIV, html),
            salary=first_match(p.GLASSDOOR_SALARY, html),
        )
