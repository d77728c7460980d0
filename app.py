"""Streamlit UI for importing job postings by URL."""
from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from jobflow.classifier import KNOWN_BOARDS, board_name
from jobflow.ghost_report import report_ghost_job
from jobflow.importer import import_from_url, save_url
from jobflow.log import get_logger
from jobflow.models import ApplicationStatus, ExtractedJobInfo, ImportResult

log = get_logger(__name__)

_RENDER = {
    "success": st.success,
    "info": st.info,
    "warning": st.warning,
    "error": st.error,
}

# ── Helpers ──────────────────────────────────────────────────────────────


def _show_result(result: ImportResult) -> None:
    _RENDER.get(result.level, st.info)(result.message)


def _remember(result: ImportResult) -> None:
    st.session_state["last_result"] = result
    if result.ok and result.record is not None:
        st.session_state["record"] = result.record


def _record_form(record: ExtractedJobInfo) -> None:
    with st.form("record_form"):
        c1, c2 = st.columns(2)
        with c1:
            record.title = st.text_input("Job title", value=record.title)
            record.company = st.text_input("Company", value=record.company)
            record.location = st.text_input("Location", value=record.location)
        with c2:
            record.salary = st.text_input("Salary", value=record.salary)
            statuses = list(ApplicationStatus)
            record.status = st.selectbox(
                "Status",
                statuses,
                index=statuses.index(record.status),
                format_func=lambda s: s.value,
            )
            record.is_ghost_job = st.checkbox("Looks like a ghost job", value=record.is_ghost_job)
        record.description = st.text_area("Description", value=record.description, height=150)
        record.notes = st.text_area("Notes", value=record.notes, height=150)
        st.caption(f"Applied {record.date_string} · {record.url}")
        submitted = st.form_submit_button("Update", use_container_width=True)
    if submitted:
        st.session_state["record"] = record
        st.success("Record updated.")


# ── Page: Import ─────────────────────────────────────────────────────────


def page_import() -> None:
    st.header("Import a Job Posting")
    st.write("Paste a job posting link. Known boards are fetched and parsed; anything else is saved with a best guess at the company.")

    url = st.text_input("Job posting URL", placeholder="https://boards.greenhouse.io/acme/jobs/123")
    if url:
        name = board_name(url)
        st.caption(f"Detected board: **{name}**" if name else "Not a recognised job board")

    c1, c2 = st.columns(2)
    with c1:
        if st.button("Import details", type="primary", use_container_width=True, disabled=not url):
            log.info("UI import requested: %s", url)
            with st.spinner("Fetching job posting…"):
                _remember(import_from_url(url))
    with c2:
        if st.button("Save link only", use_container_width=True, disabled=not url):
            _remember(save_url(url))

    result = st.session_state.get("last_result")
    if result:
        _show_result(result)

    record = st.session_state.get("record")
    if record is None:
        return

    st.divider()
    st.subheader("Job Record")
    _record_form(record)

    if record.is_ghost_job and st.button("Report ghost job", use_container_width=True):
        if report_ghost_job(record):
            st.success("Thanks, the posting was reported.")
        else:
            st.warning("Could not reach the ghost job tracker. Try again later.")


# ── Page: Boards ─────────────────────────────────────────────────────────


def page_boards() -> None:
    st.header("Supported Job Boards")
    st.write("A posting is recognised when its host contains one of these patterns.")
    st.table([{"Pattern": b.host_pattern, "Board": b.display_name} for b in KNOWN_BOARDS])


pages = [
    st.Page(page_import, title="Import", icon="🔗", url_path="import", default=True),
    st.Page(page_boards, title="Boards", icon="📋", url_path="boards"),
]

nav = st.navigation(pages)
nav.run()
