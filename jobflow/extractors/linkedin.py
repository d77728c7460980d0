"""LinkedIn public job view."""
from __future__ import annotations

from urllib.parse import urlsplit

from jobflow.extractors import patterns as p
from jobflow.extractors.base import SiteExtractor, first_match, found


def job_id_from_url(url: str) -> str:
    """The path segment after ``view``, e.g. ``/jobs/view/3791234567/``."""
    try:
        segments = [s for s in urlsplit(url).path.split("/") if s]
    except ValueError:
        return ""
    if p.LINKEDIN_VIEW_SEGMENT in segments:
        i = segments.index(p.LINKEDIN_VIEW_SEGMENT)
        if i + 1 < len(segments):
            return segments[i + 1]
    return ""


class LinkedInExtractor(SiteExtractor):
    name = "LinkedIn"
    host_patterns = ("linkedin.com",)

    def extract(self, html: str, url: str) -> dict[str, str]:
        description = first_match(p.LINKEDIN_DESCRIPTION, html)
        if description:
            description = description[: p.LINKEDIN_DESCRIPTION_LIMIT].strip() + "..."
        return found(
            title=first_match(p.LINKEDIN_TITLE, html),
            company=first_match(p.LINKEDIN_COMPANY, html),
            location=first_match(p.LINKEDIN_LOCATION, html),
            description=description,
        )

    def from_url(self, url: str) -> dict[str, str]:
        job_id = job_id_from_url(url)
        if not job_id:
            return {}
        return {"notes": f"Imported from: {url}\nJob ID: {job_id}"}
