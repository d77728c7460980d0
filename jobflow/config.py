"""Load importer settings from .env and config/settings.yaml."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from jobflow.log import get_logger

log = get_logger(__name__)

load_dotenv()

CONFIG_DIR: Path = Path(__file__).resolve().parent.parent / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Safari/605.1.15"
)
DEFAULT_GHOST_REPORT_ENDPOINT = "https://ghostjobs.io/api/report"


@dataclass(frozen=True)
class Settings:
    user_agent: str = DEFAULT_USER_AGENT
    # None leaves the timeout to requests, which waits indefinitely
    request_timeout: float | None = None
    ghost_report_endpoint: str = DEFAULT_GHOST_REPORT_ENDPOINT


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        log.warning("Ignoring unreadable settings file %s: %s", path.name, exc)
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring %s: expected a mapping, got %s", path.name, type(data).__name__)
        return {}
    return data


def _parse_timeout(raw: Any) -> float | None:
    if raw in (None, ""):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        log.warning("Invalid request_timeout %r, using client default", raw)
        return None
    return value if value > 0 else None


def load_settings(path: Path | None = None) -> Settings:
    """Settings from YAML, with JOBFLOW_* / GHOST_REPORT_ENDPOINT env overrides."""
    data = _read_yaml(path or SETTINGS_PATH)

    user_agent = get_env("JOBFLOW_USER_AGENT") or str(data.get("user_agent") or DEFAULT_USER_AGENT)
    timeout_raw = get_env("JOBFLOW_REQUEST_TIMEOUT") or data.get("request_timeout")
    endpoint = (
        get_env("GHOST_REPORT_ENDPOINT")
        or str(data.get("ghost_report_endpoint") or DEFAULT_GHOST_REPORT_ENDPOINT)
    )
    return Settings(
        user_agent=user_agent,
        request_timeout=_parse_timeout(timeout_raw),
        ghost_report_endpoint=endpoint,
    )
