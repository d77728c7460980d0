from __future__ import annotations

from .base import SiteExtractor, company_from_ats_url
from .linkedin import LinkedInExtractor
from .indeed import IndeedExtractor
from .glassdoor import GlassdoorExtractor
from .jobbank import JobBankExtractor
from .ats import GreenhouseExtractor, LeverExtractor, WorkdayExtractor
from .generic import GenericExtractor
from .domain import DomainNameExtractor, company_from_domain

from jobflow.log import get_logger

log = get_logger(__name__)

__all__ = [
    "SiteExtractor", "LinkedInExtractor", "IndeedExtractor", "GlassdoorExtractor",
    "JobBankExtractor", "GreenhouseExtractor", "LeverExtractor", "WorkdayExtractor",
    "GenericExtractor", "DomainNameExtractor", "SITE_EXTRACTORS",
    "GENERIC_EXTRACTOR", "DOMAIN_EXTRACTOR", "find_extractor",
    "company_from_ats_url", "company_from_domain",
]

# Dispatch order: the first extractor whose host pattern appears in the host
# handles the page. Boards not listed here get GENERIC_EXTRACTOR only.
SITE_EXTRACTORS: tuple[SiteExtractor, ...] = (
    LinkedInExtractor(),
    IndeedExtractor(),
    GlassdoorExtractor(),
    JobBankExtractor(),
    GreenhouseExtractor(),
    LeverExtractor(),
    WorkdayExtractor(),
)

GENERIC_EXTRACTOR = GenericExtractor()
DOMAIN_EXTRACTOR = DomainNameExtractor()


def find_extractor(host: str) -> SiteExtractor | None:
    for extractor in SITE_EXTRACTORS:
        if extractor.matches(host):
            log.debug("Host %s handled by %s extractor", host, extractor.name)
            return extractor
    return None
