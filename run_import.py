#!/usr/bin/env python3
"""Entry point: import a job posting URL and print the record as JSON."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobflow.log import get_logger

log = get_logger(__name__)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import a job posting from its URL.")
    parser.add_argument("url", help="absolute URL of the job posting")
    parser.add_argument(
        "--save", action="store_true",
        help="only save the link and detected company; do not fetch the page",
    )
    parser.add_argument(
        "--report-ghost", action="store_true",
        help="also report the imported job to the ghost-job tracker",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    from jobflow.importer import import_from_url, save_url

    result = save_url(args.url) if args.save else import_from_url(args.url)
    if not result.ok or result.record is None:
        log.error(result.message)
        return 1

    log.info(result.message)
    if args.report_ghost:
        from jobflow.ghost_report import report_ghost_job

        result.record.is_ghost_job = True
        ok = report_ghost_job(result.record)
        log.info("Ghost job report: %s", "sent" if ok else "failed")

    print(json.dumps(result.record.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
