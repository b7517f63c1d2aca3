"""CLI entry point.

This script scrapes one job posting and creates or updates its row in the
Notion database configured through NOTION_API_KEY / NOTION_DATABASE_ID
(environment or `.env`).

Examples:
    python run_ingest.py "https://boards.greenhouse.io/acme/jobs/1"
    python run_ingest.py "https://www.linkedin.com/jobs/view/123" --applied
    python run_ingest.py "<URL>" --status "Applied" --applied-date 2025-09-23

The result is printed as JSON, e.g. {"action": "created", "id": "..."}.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from job_ingest.config import Settings
from job_ingest.errors import JobIngestError, StoreError
from job_ingest.fetch import PageFetcher
from job_ingest.models import DEFAULT_STATUS, SyncOptions
from job_ingest.store import NotionStore
from job_ingest.sync import sync_job

USAGE = 'Usage: python run_ingest.py "<JOB_URL>" [--applied] [--status "Applied"] [--applied-date 2025-09-23]'


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Scrape a job posting and upsert it into Notion.")
    p.add_argument("url", nargs="?", help="Job posting URL.")
    p.add_argument("--applied", action="store_true", help="Mark the job as applied (date defaults to today).")
    p.add_argument("--status", type=str, default=DEFAULT_STATUS, help="Status to set on the row.")
    p.add_argument(
        "--applied-date",
        "--appliedDate",
        dest="applied_date",
        type=str,
        default=None,
        help="Applied date (YYYY-MM-DD); only used together with --applied.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.url:
        print(USAGE)
        return 0

    options = SyncOptions(applied=args.applied, status=args.status, applied_date=args.applied_date)

    try:
        settings = Settings.from_env().require()
        fetcher = PageFetcher(timeout_s=settings.timeout_s, user_agent=settings.user_agent)
        store = NotionStore(
            api_key=settings.notion_api_key,
            database_id=settings.notion_database_id,
            notion_version=settings.notion_version,
            timeout_s=settings.timeout_s,
        )
        result = sync_job(args.url, options, fetcher=fetcher, store=store)
    except JobIngestError as exc:
        if isinstance(exc, StoreError) and exc.payload is not None:
            print(json.dumps(exc.payload, ensure_ascii=False), file=sys.stderr)
        else:
            print(str(exc), file=sys.stderr)
        return 1

    print(json.dumps(result.model_dump(), ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
