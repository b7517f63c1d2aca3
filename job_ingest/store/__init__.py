"""External store for job rows."""

from .base import JobStore  # noqa: F401
from .notion import NotionStore  # noqa: F401
