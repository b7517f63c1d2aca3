"""Exceptions raised by the ingest pipeline."""

from __future__ import annotations

from typing import Any, Optional


class JobIngestError(Exception):
    """Base class for every error surfaced to the caller."""


class ConfigError(JobIngestError):
    """A required setting (credential, database id) is missing."""


class FetchError(JobIngestError):
    """The job page could not be retrieved."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class StoreError(JobIngestError):
    """A query, create or update call against the store failed.

    `payload` keeps the decoded error body returned by the store API (for Notion
    that is an object with `code` and `message`), or None when the failure
    happened before a response was received.
    """

    def __init__(
        self,
        message: str,
        payload: Optional[Any] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.payload = payload
        self.status_code = status_code
