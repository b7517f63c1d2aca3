"""Scrape a job page and upsert it into the store.

A run is strictly sequential: fetch, extract, look up the existing row by Job
URL, then create or update. Nothing is retried; FetchError and StoreError
propagate to the caller. If the lookup fails no write is attempted.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Optional

from .fetch import PageFetcher
from .models import DEFAULT_STATUS, JobRecord, SyncOptions, SyncResult
from .sites import get_extractor
from .store import JobStore
from .store import notion
from .utils import today_iso

logger = logging.getLogger(__name__)

FALLBACK_TITLE = "Job"


def scrape(url: str, fetcher: PageFetcher) -> JobRecord:
    """Fetch `url` and run the matching site extractor over it."""
    html = fetcher.fetch(url)
    extractor = get_extractor(url)
    logger.debug("Using %s extractor for %s", extractor.name, url)
    return extractor.extract(html, url)


def resolve_status(options: SyncOptions) -> str:
    return options.status or DEFAULT_STATUS


def resolve_applied_date(options: SyncOptions, today: Optional[date] = None) -> Optional[str]:
    """Return the applied date to store, or None when the job is not applied to.

    An explicit `applied_date` wins; otherwise `applied` means "applied today".
    """
    if not options.applied:
        return None
    return options.applied_date or today_iso(today)


def build_properties(record: JobRecord, status: str, applied_date: Optional[str]) -> Dict[str, Any]:
    """Map a record onto the store's property schema.

    `Applied Date` and `Applied` are only included when there is an applied
    date. Leaving them out keeps whatever value an existing row already has.
    """
    properties: Dict[str, Any] = {
        notion.COMPANY_NAME: notion.title_value(record.company or record.position or FALLBACK_TITLE),
        notion.POSITION: notion.rich_text_value(record.position or ""),
        notion.LOCATION: notion.rich_text_value(record.location or ""),
        notion.JOB_URL: notion.url_value(record.job_url),
        notion.SALARY: notion.rich_text_value(record.salary or ""),
        notion.NOTES: notion.rich_text_value(record.notes or ""),
        notion.STATUS: notion.status_value(status),
    }
    if applied_date:
        properties[notion.APPLIED_DATE] = notion.date_value(applied_date)
        properties[notion.APPLIED] = notion.checkbox_value(True)
    return properties


def sync_job(
    url: str,
    options: Optional[SyncOptions] = None,
    *,
    fetcher: PageFetcher,
    store: JobStore,
    today: Optional[date] = None,
) -> SyncResult:
    """Scrape `url` and create or update its row in `store`.

    Args:
        url: Canonical job URL. Also the key used to find an existing row.
        options: Status/applied overrides. Defaults to `SyncOptions()`.
        fetcher: Page fetcher used to download the posting.
        store: Target store.
        today: Date used when `applied` is set without an explicit date.

    Returns:
        SyncResult with action "created" or "updated" and the row id.
    """
    options = options or SyncOptions()
    record = scrape(url, fetcher)

    status = resolve_status(options)
    applied_date = resolve_applied_date(options, today)

    existing = store.query_by_url(url)
    properties = build_properties(record, status, applied_date)
    logger.debug("Properties for %s: %s", url, sorted(properties))

    if existing is not None:
        store.update_record(existing.id, properties)
        logger.info("Updated %s (%s)", existing.id, url)
        return SyncResult(action="updated", id=existing.id)

    new_id = store.create_record(store.database_id, properties)
    logger.info("Created %s (%s)", new_id, url)
    return SyncResult(action="created", id=new_id)
