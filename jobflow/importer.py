"""
Job posting URL importer.

Runs: validate → classify host → fetch → site extractor → URL-derived fields
→ generic extractor, merging the stages first-non-empty-wins.
"""
from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor

from jobflow.classifier import InvalidURL, classify, host_of, parse_job_url
from jobflow.config import Settings
from jobflow.extractors import DOMAIN_EXTRACTOR, GENERIC_EXTRACTOR, find_extractor
from jobflow.fetcher import fetch_html
from jobflow.log import get_logger
from jobflow.models import ExtractedJobInfo, ImportResult, SiteIdentity, merge_proposals

log = get_logger(__name__)

INVALID_URL_MESSAGE = "Invalid URL format"

NEXT_STEPS = (
    "Next steps:\n"
    "- Open the posting and copy the job title\n"
    "- Confirm the company name\n"
    "- Add location and salary if listed\n"
    "- Paste the key parts of the job description\n"
    "- Set the date you applied"
)

_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def _source_label(identity: SiteIdentity | None) -> str:
    return identity.display_name if identity else "company website"


def _finish(record: ExtractedJobInfo, identity: SiteIdentity | None) -> ImportResult:
    source = _source_label(identity)
    if record.company:
        return ImportResult.success(
            record,
            f"Imported from {source}: {record.company}. Review the details and fill in anything missing.",
        )
    return ImportResult.success(
        record,
        f"Imported link from {source}, but the company could not be detected. Please fill in the details manually.",
        level="info",
    )


def import_from_url(url_string: str, settings: Settings | None = None) -> ImportResult:
    """Build a job record from a posting URL, fetching the page when the board is known.

    Only a malformed URL fails; every other problem degrades to a record with
    empty fields.
    """
    try:
        parts = parse_job_url(url_string)
    except InvalidURL as exc:
        log.warning("%s", exc)
        return ImportResult.failure(INVALID_URL_MESSAGE)

    url = parts.geturl()
    baseline = {"notes": f"Imported from: {url}"}
    identity = classify(parts)

    if identity is None:
        log.info("Unrecognised job board %s; using domain name only", host_of(parts))
        record = merge_proposals(DOMAIN_EXTRACTOR.from_url(url), baseline, url=url_string)
        return _finish(record, identity)

    log.info("Importing %s posting: %s", identity.display_name, url)
    extractor = find_extractor(host_of(parts))
    from_url = extractor.from_url(url) if extractor else {}
    html = fetch_html(url, settings)

    if html is None:
        record = merge_proposals(from_url, DOMAIN_EXTRACTOR.from_url(url), baseline, url=url_string)
        log.info("Fetch failed; falling back to URL-derived company %r", record.company)
        return ImportResult.success(
            record,
            f"Could not load the job page from {identity.display_name}. "
            "Please fill in the details manually.",
            level="warning",
        )

    from_html = extractor.extract(html, url) if extractor else {}
    record = merge_proposals(
        from_html,
        from_url,
        GENERIC_EXTRACTOR.extract(html, url),
        baseline,
        url=url_string,
    )
    missing = [name for name in ("title", "company", "location") if not getattr(record, name)]
    if missing:
        log.debug("No %s found for %s", ", ".join(missing), url)
    log.info("Imported %r at %r from %s", record.title, record.company, identity.display_name)
    return _finish(record, identity)


def save_url(url_string: str) -> ImportResult:
    """Store the raw link with an auto-detected company, without fetching the page."""
    try:
        parts = parse_job_url(url_string)
    except InvalidURL as exc:
        log.warning("%s", exc)
        return ImportResult.failure(INVALID_URL_MESSAGE)

    url = parts.geturl()
    identity = classify(parts)
    if identity is None:
        company = DOMAIN_EXTRACTOR.from_url(url).get("company", "")
    else:
        # Aggregator hosts say nothing about the employer; ATS hosts do.
        extractor = find_extractor(host_of(parts))
        company = extractor.from_url(url).get("company", "") if extractor else ""

    notes = f"Saved from {_source_label(identity)}: {url_string}\n\n{NEXT_STEPS}"
    record = ExtractedJobInfo(company=company, notes=notes, url=url_string)
    log.info("Saved link %s (company=%r)", url, company)

    if company:
        return ImportResult.success(record, f"Link saved for {company}. Fill in the remaining details when you can.")
    return ImportResult.success(
        record,
        "Link saved. Add the company name and job details manually.",
        level="info",
    )


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="jobflow-import")
        return _executor


def import_in_background(
    url_string: str,
    executor: ThreadPoolExecutor | None = None,
    settings: Settings | None = None,
) -> Future[ImportResult]:
    """Run ``import_from_url`` off the caller's thread.

    Concurrent imports are independent: nothing is cancelled or de-duplicated.
    """
    pool = executor or _get_executor()
    return pool.submit(import_from_url, url_string, settings)
