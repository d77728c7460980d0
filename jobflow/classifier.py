"""Recognise which job board or ATS a posting URL belongs to."""
from __future__ import annotations

from urllib.parse import SplitResult, urlsplit

from jobflow.models import SiteIdentity

# Matching is "pattern appears anywhere in the lower-cased host", first entry
# wins. Keep patterns specific enough not to collide with unrelated hosts.
KNOWN_BOARDS: tuple[SiteIdentity, ...] = (
    # North American boards
    SiteIdentity("linkedin.com", "LinkedIn"),
    SiteIdentity("indeed.com", "Indeed"),
    SiteIdentity("indeed.ca", "Indeed"),
    SiteIdentity("glassdoor.com", "Glassdoor"),
    SiteIdentity("glassdoor.ca", "Glassdoor"),
    SiteIdentity("monster.com", "Monster"),
    SiteIdentity("monster.ca", "Monster"),
    SiteIdentity("ziprecruiter.com", "ZipRecruiter"),
    SiteIdentity("careerbuilder.com", "CareerBuilder"),
    # Canadian
    SiteIdentity("jobbank.gc.ca", "Job Bank Canada"),
    SiteIdentity("workopolis.com", "Workopolis"),
    SiteIdentity("eluta.ca", "Eluta"),
    SiteIdentity("charityvillage.com", "CharityVillage"),
    SiteIdentity("canadajobs.com", "CanadaJobs"),
    # Tech focused. The two path-style patterns can never appear in a host.
    SiteIdentity("stackoverflow.com/jobs", "Stack Overflow Jobs"),
    SiteIdentity("github.com/jobs", "GitHub Jobs"),
    SiteIdentity("angel.co", "AngelList"),
    SiteIdentity("wellfound.com", "Wellfound"),
    SiteIdentity("dice.com", "Dice"),
    SiteIdentity("hired.com", "Hired"),
    SiteIdentity("triplebyte.com", "Triplebyte"),
    # International
    SiteIdentity("seek.com.au", "SEEK"),
    SiteIdentity("seek.co.nz", "SEEK"),
    SiteIdentity("totaljobs.com", "Totaljobs"),
    SiteIdentity("reed.co.uk", "Reed"),
    SiteIdentity("cv-library.co.uk", "CV-Library"),
    # Applicant tracking systems / company career pages
    SiteIdentity("greenhouse.io", "Greenhouse"),
    SiteIdentity("lever.co", "Lever"),
    SiteIdentity("workday.com", "Workday"),
    SiteIdentity("taleo.net", "Taleo"),
    SiteIdentity("icims.com", "iCIMS"),
    SiteIdentity("myworkdayjobs.com", "Workday"),
    SiteIdentity("successfactors.com", "SuccessFactors"),
    SiteIdentity("brassring.com", "BrassRing"),
    SiteIdentity("ultipro.com", "UltiPro"),
    SiteIdentity("paylocity.com", "Paylocity"),
    SiteIdentity("bamboohr.com", "BambooHR"),
)


class InvalidURL(ValueError):
    """Raised when a string does not parse as an absolute URL with a host."""


def parse_job_url(url_string: str) -> SplitResult:
    """Split ``url_string``; raise InvalidURL unless it has a scheme and host."""
    try:
        parts = urlsplit((url_string or "").strip())
        host = parts.hostname
    except ValueError as exc:
        raise InvalidURL(f"Invalid URL format: {url_string!r}") from exc
    if not parts.scheme or not host:
        raise InvalidURL(f"Invalid URL format: {url_string!r}")
    return parts


def host_of(url: str | SplitResult) -> str:
    """Lower-cased host, or "" when the URL has none."""
    try:
        parts = url if isinstance(url, SplitResult) else urlsplit(url)
        return (parts.hostname or "").lower()
    except ValueError:
        return ""


def classify(url: str | SplitResult) -> SiteIdentity | None:
    host = host_of(url)
    if not host:
        return None
    for identity in KNOWN_BOARDS:
        if identity.host_pattern.lower() in host:
            return identity
    return None


def is_known(url: str | SplitResult) -> bool:
    return classify(url) is not None


def board_name(url: str | SplitResult) -> str | None:
    identity = classify(url)
    return identity.display_name if identity else None
