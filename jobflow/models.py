"""Data models for imported job postings."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any

# Fields an extraction stage may propose; everything else is owned by the importer.
PROPOSABLE_FIELDS: tuple[str, ...] = (
    "title", "company", "location", "salary", "description", "notes",
)


class ApplicationStatus(str, Enum):
    APPLIED = "Applied"
    INTERVIEWING = "Interviewing"
    OFFER = "Offer"
    REJECTED = "Rejected"
    ACCEPTED = "Accepted"


@dataclass(frozen=True)
class SiteIdentity:
    host_pattern: str
    display_name: str


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ExtractedJobInfo:
    """A job record as handed back to the caller.

    Empty string means "nothing found"; every field is always present.
    """

    title: str = ""
    company: str = ""
    location: str = ""
    salary: str = ""
    description: str = ""
    notes: str = ""
    url: str = ""
    date_applied: datetime = field(default_factory=_now)
    status: ApplicationStatus = ApplicationStatus.APPLIED
    is_ghost_job: bool = False

    @property
    def date_string(self) -> str:
        """Display form, e.g. ``Mar 4, 2025``."""
        d = self.date_applied
        return f"{d.strftime('%b')} {d.day}, {d.year}"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {f.name: getattr(self, f.name) for f in fields(self)}
        data["date_applied"] = self.date_applied.isoformat()
        data["status"] = self.status.value
        return data


def merge_proposals(*stages: dict[str, str], **defaults: Any) -> ExtractedJobInfo:
    """Build a record from extraction stages, first non-empty value per field wins.

    Keyword arguments seed the fields no stage proposes (``url``,
    ``date_applied``, ``status``, ``is_ghost_job``).
    """
    merged: dict[str, str] = {}
    for stage in stages:
        for name in PROPOSABLE_FIELDS:
            if merged.get(name):
                continue
            value = stage.get(name) or ""
            if value:
                merged[name] = value
    return ExtractedJobInfo(**merged, **defaults)


@dataclass
class ImportResult:
    """Outcome of one import call.

    ``ok`` is False only for malformed input, in which case ``record`` is None.
    ``level`` is a rendering hint: success, info, warning or error.
    """

    ok: bool
    record: ExtractedJobInfo | None
    message: str
    level: str = "success"

    @classmethod
    def success(cls, record: ExtractedJobInfo, message: str, level: str = "success") -> "ImportResult":
        return cls(ok=True, record=record, message=message, level=level)

    @classmethod
    def failure(cls, message: str) -> "ImportResult":
        return cls(ok=False, record=None, message=message, level="error")
