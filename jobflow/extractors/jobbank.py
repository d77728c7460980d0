"""Government of Canada Job Bank."""
from __future__ import annotations

from jobflow.extractors import patterns as p
from jobflow.extractors.base import SiteExtractor, first_match, found


class JobBankExtractor(SiteExtractor):
    name = "Job Bank Canada"
    host_patterns = ("jobbank.gc.ca",)

    def extract(self, html: str, url: str) -> dict[str, str]:
        # Every Job Bank posting is in Canada; the page gives no finer location.
        return found(
            title=first_match(p.JOBBANK_TITLE, html),
            company=first_match(p.JOBBANK_COMPANY, html),
            location=p.JOBBANK_LOCATION,
        )
