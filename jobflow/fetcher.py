"""Single-shot page download for the importer."""
from __future__ import annotations

import requests

from jobflow.config import Settings, load_settings
from jobflow.log import get_logger

log = get_logger(__name__)


def fetch_html(url: str, settings: Settings | None = None) -> str | None:
    """GET ``url`` once and return the body as UTF-8 text.

    Any failure (network error, non-2xx, undecodable body) yields None so the
    caller can carry on with whatever the URL alone tells it.
    """
    settings = settings or load_settings()
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }
    try:
        r = requests.get(url, headers=headers, timeout=settings.request_timeout)
        r.raise_for_status()
        html = r.content.decode("utf-8")
    except requests.RequestException as exc:
        log.warning("Fetch failed for %s: %s", url, exc)
        return None
    except UnicodeDecodeError as exc:
        log.warning("Response from %s is not UTF-8: %s", url, exc)
        return None
    except Exception as exc:
        # urllib3 lets some URL parse errors (e.g. over-long host labels) escape unwrapped
        log.warning("Fetch failed for %s: %s", url, exc)
        return None
    log.debug("Fetched %s (%d chars)", url, len(html))
    return html
