from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest

from job_ingest.fetch import PageFetcher
from job_ingest.models import StoredRecord
from job_ingest.store.base import JobStore
from job_ingest.store.notion import JOB_URL


class FakeFetcher(PageFetcher):
    """Serves pages from a dict instead of the network."""

    def __init__(self, pages: Dict[str, str]) -> None:
        super().__init__()
        self.pages = pages
        self.calls: List[str] = []

    def fetch(self, url: str) -> str:
        self.calls.append(url)
        return self.pages[url]


class InMemoryStore(JobStore):
    """Dict-backed store that merges updates the way Notion does."""

    def __init__(self, database_id: str = "db-test") -> None:
        self.database_id = database_id
        self.rows: Dict[str, Dict[str, Any]] = {}
        self.calls: List[Tuple[str, Any]] = []

    def query_by_url(self, url: str) -> Optional[StoredRecord]:
        self.calls.append(("query", url))
        for row_id, props in self.rows.items():
            if props.get(JOB_URL, {}).get("url") == url:
                return StoredRecord(id=row_id, properties=props)
        return None

    def create_record(self, database_id: str, properties: Dict[str, Any]) -> str:
        self.calls.append(("create", database_id))
        row_id = f"page-{len(self.rows) + 1}"
        self.rows[row_id] = dict(properties)
        return row_id

    def update_record(self, record_id: str, properties: Dict[str, Any]) -> None:
        self.calls.append(("update", record_id))
        self.rows[record_id].update(properties)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def greenhouse_html() -> str:
    return """
    <html>
      <head><meta property="og:site_name" content="Acme"></head>
      <body>
        <div class="opening">
          <h1 class="app-title">Backend Engineer</h1>
          <div class="location">
            Remote,   US
          </div>
        </div>
        <div class="content">
          <p>We are hiring a backend engineer.</p>
          <p>You will build APIs.</p>
        </div>
      </body>
    </html>
    """


@pytest.fixture
def fetcher_for():
    """Build a FakeFetcher serving the given url -> html mapping."""
    return FakeFetcher
