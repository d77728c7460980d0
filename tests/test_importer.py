from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from jobflow.importer import NEXT_STEPS, import_from_url, import_in_background, save_url
from jobflow.models import ApplicationStatus

GREENHOUSE_HTML = (
    '<html><head><title>Job Application for Staff Data Engineer at Acme</title></head><body>'
    '<h1 class="app-title">Staff Data Engineer</h1>'
    '<div class="location">Remote - US</div>'
    "</body></html>"
)


@pytest.mark.parametrize("bad", ["", "not a url", "https://", "://missing-scheme.com"])
def test_malformed_url_fails_without_network(bad, no_fetch):
    result = import_from_url(bad)
    assert not result.ok
    assert result.record is None
    assert result.level == "error"
    assert result.message == "Invalid URL format"
    assert no_fetch == []


def test_unknown_board_uses_domain_name_without_fetching(no_fetch):
    url = "https://careers.acme.com/jobs/42"
    result = import_from_url(url)
    assert result.ok
    assert result.level == "success"
    record = result.record
    assert record.company == "Acme"
    assert record.title == ""
    assert record.url == url
    assert record.notes == f"Imported from: {url}"
    assert record.status is ApplicationStatus.APPLIED
    assert record.is_ghost_job is False


def test_greenhouse_import_merges_html_and_url_fields(fetch_returns):
    calls = fetch_returns(GREENHOUSE_HTML)
    url = "https://acme-corp.greenhouse.io/jobs/999"
    result = import_from_url(url)
    assert calls == [url]
    assert result.ok and result.level == "success"
    record = result.record
    assert record.title == "Staff Data Engineer"
    assert record.company == "Acme Corp"
    assert record.location == "Remote - US"
    assert record.salary == ""


def test_greenhouse_fetch_failure_still_gets_company(fetch_returns):
    fetch_returns(None)
    result = import_from_url("https://acme-corp.greenhouse.io/jobs/999")
    assert result.ok
    assert result.level == "warning"
    assert result.record.company == "Acme Corp"
    assert result.record.title == ""


def test_lever_path_company_on_fetch_failure(fetch_returns):
    fetch_returns(None)
    result = import_from_url("https://jobs.lever.co/stripe/abcd-1234")
    assert result.record.company == "Stripe"


def test_indeed_fetch_failure_falls_back_to_domain_name(fetch_returns):
    fetch_returns(None)
    result = import_from_url("https://www.indeed.com/viewjob?jk=abc123")
    assert result.ok
    assert result.record.company == "Indeed"
    assert result.record.location == ""


def test_linkedin_fetch_failure_keeps_job_id(fetch_returns):
    fetch_returns(None)
    url = "https://www.linkedin.com/jobs/view/3791234567/"
    record = import_from_url(url).record
    assert "Job ID: 3791234567" in record.notes
    assert record.notes.startswith(f"Imported from: {url}")


def test_generic_title_for_known_board_without_markers(fetch_returns):
    fetch_returns("<html><head><title>Senior Designer - Acme | Monster.com</title></head><h1>Jobs</h1></html>")
    result = import_from_url("https://www.monster.com/job-openings/senior-designer")
    assert result.ok
    assert result.record.title == "Senior Designer - Acme | Monster.com"
    assert result.record.company == ""
    assert result.level == "info"


def test_site_title_beats_generic_title(fetch_returns):
    fetch_returns(GREENHOUSE_HTML)
    record = import_from_url("https://boards.greenhouse.io/acme/jobs/1").record
    assert record.title == "Staff Data Engineer"
    assert record.company == "Acme"


def test_generic_fills_title_when_site_marker_missing(fetch_returns):
    fetch_returns("<title>Platform Engineer - Stripe</title>")
    record = import_from_url("https://jobs.lever.co/stripe/abcd-1234").record
    assert record.title == "Platform Engineer - Stripe"
    assert record.company == "Stripe"


def test_empty_page_is_success_with_empty_fields(fetch_returns):
    fetch_returns("")
    result = import_from_url("https://www.glassdoor.com/job-listing/x")
    assert result.ok
    record = result.record
    assert (record.title, record.company, record.location, record.salary) == ("", "", "", "")


def test_record_url_is_verbatim(fetch_returns):
    fetch_returns(None)
    url = "https://jobs.lever.co/stripe/abcd-1234?lever-source=LinkedIn"
    assert import_from_url(url).record.url == url


@pytest.mark.parametrize(
    "url",
    [
        "https://boards.greenhouse.io/acme/jobs/123",
        "https://careers.acme.com/jobs/42?ref=x#apply",
        "https://www.linkedin.com/jobs/view/1/",
        " https://jobs.lever.co/stripe/1 ",
    ],
)
def test_save_url_keeps_url_verbatim_and_never_fetches(url, no_fetch):
    result = save_url(url)
    assert result.ok
    assert result.record.url == url
    assert NEXT_STEPS in result.record.notes
    assert no_fetch == []


def test_save_url_detects_ats_company(no_fetch):
    result = save_url("https://boards.greenhouse.io/acme/jobs/123")
    assert result.record.company == "Acme"
    assert result.record.notes.startswith("Saved from Greenhouse: ")
    assert result.level == "success"


def test_save_url_unknown_host_uses_domain(no_fetch):
    result = save_url("https://careers.acme.com/jobs/42")
    assert result.record.company == "Acme"
    assert "company website" in result.record.notes


def test_save_url_aggregator_has_no_company(no_fetch):
    result = save_url("https://www.linkedin.com/jobs/view/1/")
    assert result.record.company == ""
    assert result.level == "info"


def test_save_url_malformed(no_fetch):
    result = save_url("nope")
    assert not result.ok
    assert result.record is None


def test_import_in_background(fetch_returns):
    fetch_returns(GREENHOUSE_HTML)
    with ThreadPoolExecutor(max_workers=2) as pool:
        first = import_in_background("https://acme-corp.greenhouse.io/jobs/1", executor=pool)
        second = import_in_background("bad url", executor=pool)
        assert first.result(timeout=5).record.title == "Staff Data Engineer"
        assert not second.result(timeout=5).ok
