"""Notion database store.

Talks to the Notion REST API (https://developers.notion.com/reference) with
httpx. The target database must have these properties:

    Company Name  title
    Position      rich_text
    Location      rich_text
    Job URL       url
    Salary        rich_text
    Notes         rich_text
    Status        status
    Applied Date  date
    Applied       checkbox

Notion rejects writes to unknown property names or mismatched types with a
400 `validation_error`, which surfaces here as a StoreError.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from ..config import DEFAULT_NOTION_VERSION, DEFAULT_TIMEOUT_S
from ..errors import StoreError
from ..models import StoredRecord
from .base import JobStore

logger = logging.getLogger(__name__)

COMPANY_NAME = "Company Name"
POSITION = "Position"
LOCATION = "Location"
JOB_URL = "Job URL"
SALARY = "Salary"
NOTES = "Notes"
STATUS = "Status"
APPLIED_DATE = "Applied Date"
APPLIED = "Applied"


def title_value(text: str) -> Dict[str, Any]:
    return {"title": [{"text": {"content": text}}]}


def rich_text_value(text: str) -> Dict[str, Any]:
    return {"rich_text": [{"text": {"content": text}}]}


def url_value(url: str) -> Dict[str, Any]:
    return {"url": url}


def status_value(name: str) -> Dict[str, Any]:
    return {"status": {"name": name}}


def date_value(start: str) -> Dict[str, Any]:
    return {"date": {"start": start}}


def checkbox_value(checked: bool) -> Dict[str, Any]:
    return {"checkbox": checked}


class NotionStore(JobStore):
    """Job rows stored as pages of a Notion database."""

    base_url = "https://api.notion.com/v1"

    def __init__(
        self,
        api_key: str,
        database_id: str,
        notion_version: str = DEFAULT_NOTION_VERSION,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.database_id = database_id
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Notion-Version": notion_version,
            "Content-Type": "application/json",
        }
        self._timeout = timeout_s
        self._transport = transport

    def _request(self, method: str, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Send one API call and return the decoded JSON body.

        Raises:
            StoreError: on transport failure or any non-success status. The
                Notion error object (`code`, `message`) is attached as payload.
        """
        try:
            with httpx.Client(
                base_url=self.base_url,
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                resp = client.request(method, path, json=payload)
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPStatusError as exc:
            body = _decode_error(exc.response)
            message = body.get("message") if isinstance(body, dict) else None
            raise StoreError(
                message or f"Notion {method} {path} returned HTTP {exc.response.status_code}",
                payload=body,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise StoreError(f"Notion {method} {path} failed: {exc}") from exc
        except ValueError as exc:
            raise StoreError(f"Notion {method} {path} returned a non-JSON body") from exc

    def query_by_url(self, url: str) -> Optional[StoredRecord]:
        body = self._request(
            "POST",
            f"/databases/{self.database_id}/query",
            {"filter": {"property": JOB_URL, "url": {"equals": url}}, "page_size": 1},
        )
        results = body.get("results") or []
        if not results:
            return None
        page = results[0]
        return StoredRecord(id=page["id"], properties=page.get("properties") or {})

    def create_record(self, database_id: str, properties: Dict[str, Any]) -> str:
        body = self._request(
            "POST",
            "/pages",
            {"parent": {"database_id": database_id}, "properties": properties},
        )
        logger.debug("Created Notion page %s", body.get("id"))
        return body["id"]

    def update_record(self, record_id: str, properties: Dict[str, Any]) -> None:
        self._request("PATCH", f"/pages/{record_id}", {"properties": properties})
        logger.debug("Updated Notion page %s", record_id)


def _decode_error(resp: httpx.Response) -> Optional[Any]:
    try:
        return resp.json()
    except ValueError:
        return resp.text or None
