"""Data models for job ingest.

`JobRecord` is what an extractor produces from one page; `SyncOptions` is what
the caller says about the application (status, applied date); `StoredRecord`
and `SyncResult` describe the store side.

Text fields default to "" rather than None: an empty string is the "unknown"
value everywhere in this package.

This file uses Pydantic v2.
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

DEFAULT_STATUS = "Not Started"

SyncAction = Literal["created", "updated"]


class JobRecord(BaseModel):
    """Fields extracted from a single job posting."""

    company: str = ""
    position: str = ""
    location: str = ""
    # Kept as the exact input string: it is the key used to find the stored row.
    job_url: str = Field(..., min_length=1, description="Canonical job URL as passed in.")
    salary: str = ""
    notes: str = Field(default="", description="Description excerpt, truncated per extractor.")


class SyncOptions(BaseModel):
    """Caller-supplied overrides applied on top of the extracted record."""

    applied: bool = False
    status: str = DEFAULT_STATUS
    applied_date: Optional[str] = Field(
        default=None,
        description="Applied date (YYYY-MM-DD). Defaults to today when `applied` is set.",
    )


class StoredRecord(BaseModel):
    """A row in the external store."""

    id: str
    properties: Dict[str, Any] = Field(default_factory=dict)


class SyncResult(BaseModel):
    action: SyncAction
    id: str
