from __future__ import annotations

import pytest

from jobflow.config import (
    DEFAULT_GHOST_REPORT_ENDPOINT,
    DEFAULT_USER_AGENT,
    Settings,
    load_settings,
)

_ENV_KEYS = ("JOBFLOW_USER_AGENT", "JOBFLOW_REQUEST_TIMEOUT", "GHOST_REPORT_ENDPOINT")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_when_file_missing(tmp_path):
    settings = load_settings(tmp_path / "missing.yaml")
    assert settings == Settings()
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.request_timeout is None
    assert settings.ghost_report_endpoint == DEFAULT_GHOST_REPORT_ENDPOINT


def test_values_from_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "user_agent: jobflow-test/1.0\n"
        "request_timeout: 12.5\n"
        "ghost_report_endpoint: https://ghost.test/report\n",
        encoding="utf-8",
    )
    settings = load_settings(path)
    assert settings.user_agent == "jobflow-test/1.0"
    assert settings.request_timeout == 12.5
    assert settings.ghost_report_endpoint == "https://ghost.test/report"


def test_env_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text("user_agent: from-file\nrequest_timeout: 5\n", encoding="utf-8")
    monkeypatch.setenv("JOBFLOW_USER_AGENT", "from-env")
    monkeypatch.setenv("JOBFLOW_REQUEST_TIMEOUT", "30")
    settings = load_settings(path)
    assert settings.user_agent == "from-env"
    assert settings.request_timeout == 30.0


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_bad_timeout_falls_back_to_client_default(tmp_path, raw):
    path = tmp_path / "settings.yaml"
    path.write_text(f"request_timeout: '{raw}'\n", encoding="utf-8")
    assert load_settings(path).request_timeout is None


def test_non_mapping_or_broken_yaml_is_ignored(tmp_path):
    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n", encoding="utf-8")
    assert load_settings(listing) == Settings()

    broken = tmp_path / "broken.yaml"
    broken.write_text("user_agent: [unterminated\n", encoding="utf-8")
    assert load_settings(broken) == Settings()
