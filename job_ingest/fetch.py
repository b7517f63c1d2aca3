"""Page fetcher: a plain GET with a fixed user agent."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import DEFAULT_TIMEOUT_S, DEFAULT_USER_AGENT
from .errors import FetchError

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetch server-rendered job pages."""

    def __init__(
        self,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._timeout = timeout_s
        self._headers = {"User-Agent": user_agent}
        self._transport = transport

    def fetch(self, url: str) -> str:
        """Return the page body for `url`.

        Raises:
            FetchError: on a malformed URL, transport failure or a non-success status.
        """
        try:
            with httpx.Client(
                timeout=self._timeout,
                headers=self._headers,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                resp = client.get(url)
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise FetchError(f"GET {url} returned HTTP {status}", url, status_code=status) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"GET {url} failed: {exc}", url) from exc
        except (httpx.InvalidURL, UnicodeError) as exc:
            raise FetchError(f"Invalid URL {url!r}: {exc}", url) from exc

        logger.debug("Fetched %s (%d bytes)", url, len(resp.content))
        return resp.text
