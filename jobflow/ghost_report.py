"""Report a suspected ghost job to the public ghost-job tracker."""
from __future__ import annotations

from datetime import timezone
from typing import Any

import requests

from jobflow.config import load_settings
from jobflow.log import get_logger
from jobflow.models import ExtractedJobInfo

log = get_logger(__name__)

_ACCEPTED_STATUS = (200, 201)


def build_payload(job: ExtractedJobInfo) -> dict[str, Any]:
    posted = job.date_applied
    if posted.tzinfo is None:
        posted = posted.replace(tzinfo=timezone.utc)
    return {
        "jobTitle": job.title,
        "company": job.company,
        "url": job.url,
        "datePosted": posted.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "location": job.location,
        "salary": job.salary,
    }


def report_ghost_job(job: ExtractedJobInfo, endpoint: str | None = None) -> bool:
    """POST the job once; True only when the tracker answers 200 or 201."""
    endpoint = endpoint or load_settings().ghost_report_endpoint
    try:
        r = requests.post(endpoint, json=build_payload(job))
    except requests.RequestException as exc:
        log.warning("Ghost job report for %r failed: %s", job.url, exc)
        return False
    if r.status_code not in _ACCEPTED_STATUS:
        log.warning("Ghost job report for %r rejected: HTTP %d", job.url, r.status_code)
        return False
    log.info("Reported ghost job: %s @ %s", job.title or "(untitled)", job.company or "(unknown)")
    return True
