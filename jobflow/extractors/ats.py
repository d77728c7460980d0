"""Applicant tracking systems that host one board per company.

The company name comes from the URL (subdomain or first path segment), so
these still produce something useful when the page cannot be fetched.
"""
from __future__ import annotations

from jobflow.extractors import patterns as p
from jobflow.extractors.base import SiteExtractor, company_from_ats_url, first_match, found


class _ATSExtractor(SiteExtractor):
    def from_url(self, url: str) -> dict[str, str]:
        return found(company=company_from_ats_url(url))


class GreenhouseExtractor(_ATSExtractor):
    name = "Greenhouse"
    host_patterns = ("greenhouse.io",)

    def extract(self, html: str, url: str) -> dict[str, str]:
        return found(
            title=first_match(p.GREENHOUSE_TITLE, html),
            location=first_match(p.LOCATION_DIV, html),
        )


class LeverExtractor(_ATSExtractor):
    name = "Lever"
    host_patterns = ("lever.co",)

    def extract(self, html: str, url: str) -> dict[str, str]:
        return found(
            title=first_match(p.LEVER_TITLE, html),
            location=first_match(p.LOCATION_DIV, html),
        )


class WorkdayExtractor(_ATSExtractor):
    name = "Workday"
    host_patterns = ("myworkdayjobs.com", "workday.com")

    def extract(self, html: str, url: str) -> dict[str, str]:
        return found(title=first_match(p.WORKDAY_TITLE, html))
