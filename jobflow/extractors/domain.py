"""Company name guessed from the host when no page content is available."""
from __future__ import annotations

from jobflow.classifier import host_of
from jobflow.extractors.base import SiteExtractor, found


def company_from_domain(url: str) -> str:
    """Second-to-last host label, capitalized: ``careers.acme.com`` -> ``Acme``.

    Only the first character is upper-cased (``acme-corp`` -> ``Acme-corp``).

    Known limitation: multi-part suffixes pick the wrong label
    (``jobs.example.co.uk`` -> ``Co``). Saved records depend on this output,
    so it is kept as is.
    """
    labels = host_of(url).split(".")
    if len(labels) < 2:
        return ""
    return labels[-2].capitalize()


class DomainNameExtractor(SiteExtractor):
    name = "Domain"

    def matches(self, host: str) -> bool:
        return True

    def extract(self, html: str, url: str) -> dict[str, str]:
        return self.from_url(url)

    def from_url(self, url: str) -> dict[str, str]:
        return found(company=company_from_domain(url))
