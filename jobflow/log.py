"""Logging setup for the importer — stdlib only.

Console output goes to stdout at ``LOG_LEVEL``; a per-day file under
``logs/`` (or ``JOBFLOW_LOG_DIR``) always captures DEBUG so extraction
misses can be traced after the fact.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import date
from pathlib import Path

_DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_NOISY = ("urllib3", "charset_normalizer")
_configured = False


def get_logger(name: str) -> logging.Logger:
    """Named logger; the root handlers are installed once per process."""
    global _configured
    if not _configured:
        _install_handlers()
        _configured = True
    return logging.getLogger(name)


def _log_dir() -> Path:
    override = os.environ.get("JOBFLOW_LOG_DIR", "").strip()
    return Path(override) if override else _DEFAULT_LOG_DIR


def _install_handlers() -> None:
    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FMT)

    root = logging.getLogger()
    root.setLevel(level)

    # requests' transport chatter drowns out the extractor logs at DEBUG
    for name in _NOISY:
        logging.getLogger(name).setLevel(logging.WARNING)

    if root.handlers:
        return

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if os.environ.get("JOBFLOW_LOG_FILE", "true").lower() not in ("1", "true", "yes"):
        return
    try:
        log_dir = _log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / f"jobflow_{date.today():%Y-%m-%d}.log", encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        root.addHandler(fh)
        root.setLevel(logging.DEBUG)
    except OSError:
        pass
