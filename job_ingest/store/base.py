"""Base class for job stores."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..models import StoredRecord


class JobStore(ABC):
    """A collection of job rows keyed by their Job URL property."""

    database_id: str

    @abstractmethod
    def query_by_url(self, url: str) -> Optional[StoredRecord]:
        """Return the first row whose Job URL equals `url` exactly, or None."""
        raise NotImplementedError

    @abstractmethod
    def create_record(self, database_id: str, properties: Dict[str, Any]) -> str:
        """Create a row under `database_id` and return its id."""
        raise NotImplementedError

    @abstractmethod
    def update_record(self, record_id: str, properties: Dict[str, Any]) -> None:
        """Overwrite the given properties of an existing row."""
        raise NotImplementedError
