from __future__ import annotations

import os

import pytest

# Keep test runs from writing daily log files into the repo.
os.environ.setdefault("JOBFLOW_LOG_FILE", "false")


class FakeResponse:
    def __init__(self, status_code: int = 200, content: bytes = b"") -> None:
        self.status_code = status_code
        self.content = content

    def raise_for_status(self) -> None:
        import requests

        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def no_fetch(monkeypatch):
    """Fail the test if the importer tries to hit the network."""
    calls: list[str] = []

    def _fetch(url, settings=None):
        calls.append(url)
        raise AssertionError(f"unexpected fetch of {url}")

    monkeypatch.setattr("jobflow.importer.fetch_html", _fetch)
    return calls


@pytest.fixture
def fetch_returns(monkeypatch):
    """Make the importer's fetcher return canned HTML (or None) and record calls."""
    calls: list[str] = []

    def _install(html: str | None):
        def _fetch(url, settings=None):
            calls.append(url)
            return html

        monkeypatch.setattr("jobflow.importer.fetch_html", _fetch)
        return calls

    return _install
