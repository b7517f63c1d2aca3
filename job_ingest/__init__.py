"""Job ingest package.

The package turns one job-posting URL into one row in a Notion database:
- `sites/` holds per-site extractors that turn page markup into a `JobRecord`.
- `normalize.py` contains the text cleanup every extracted value goes through.
- `store/` wraps the external store (Notion) behind a small interface.
- `sync.py` decides whether to create or update the stored row.
"""

from .models import JobRecord, SyncOptions, SyncResult  # noqa: F401
from .sync import sync_job  # noqa: F401
