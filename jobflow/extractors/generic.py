"""Fallback title extraction for boards without a dedicated extractor."""
from __future__ import annotations

from jobflow.extractors import patterns as p
from jobflow.extractors.base import SiteExtractor, first_match
from jobflow.log import get_logger

log = get_logger(__name__)


class GenericExtractor(SiteExtractor):
    name = "Generic"

    def matches(self, host: str) -> bool:
        return True

    def extract(self, html: str, url: str) -> dict[str, str]:
        # <h1>, then <title>, then og:title; too-short hits (logos, "Jobs") are skipped
        for pattern in p.GENERIC_TITLE_PATTERNS:
            text = first_match(pattern, html)
            if len(text) > p.GENERIC_MIN_TITLE_LENGTH:
                return {"title": text}
            if text:
                log.debug("Skipping short title candidate %r from %s", text, url)
        return {}
