from __future__ import annotations

import re
from abc import ABC, abstractmethod
from urllib.parse import unquote, urlsplit

from jobflow.normalizer import clean_html

# Host labels shared by every company on a board; the company is in the path.
SHARED_BOARD_LABELS = frozenset({"boards", "job-boards", "jobs", "www", "apply", "careers"})


def first_match(pattern: re.Pattern[str], html: str) -> str:
    """Cleaned text of the first match's group 1, or "" when absent."""
    m = pattern.search(html)
    if not m:
        return ""
    return clean_html(m.group(1))


def found(**fields: str) -> dict[str, str]:
    """Keep only the fields that were actually extracted."""
    return {k: v for k, v in fields.items() if v}


def title_words(text: str) -> str:
    """``acme-corp`` / ``acme_corp`` -> ``Acme Corp``."""
    words = text.replace("-", " ").replace("_", " ").split()
    return " ".join(w.capitalize() for w in words)


def company_from_ats_url(url: str) -> str:
    """Company name from an ATS URL without touching the network.

    ``acme-corp.greenhouse.io`` gives "Acme Corp"; shared hosts like
    ``jobs.lever.co/stripe/...`` use the first path segment instead.
    """
    try:
        parts = urlsplit(url)
        host = (parts.hostname or "").lower()
    except ValueError:
        return ""
    if not host:
        return ""

    label = host.split(".")[0]
    if label in SHARED_BOARD_LABELS:
        segments = [s for s in parts.path.split("/") if s]
        label = unquote(segments[0]) if segments else ""
    return title_words(label)


class SiteExtractor(ABC):
    """One job board's extraction strategy.

    ``extract`` reads fields out of fetched HTML; ``from_url`` proposes what
    can be inferred from the URL alone and is used whether or not the fetch
    succeeded. Both return only the fields they found.
    """

    name: str = "base"
    host_patterns: tuple[str, ...] = ()

    def matches(self, host: str) -> bool:
        host = host.lower()
        return any(p in host for p in self.host_patterns)

    @abstractmethod
    def extract(self, html: str, url: str) -> dict[str, str]:
        pass

    def from_url(self, url: str) -> dict[str, str]:
        return {}
