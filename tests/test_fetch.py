from __future__ import annotations

import httpx
import pytest

from job_ingest.errors import FetchError
from job_ingest.fetch import PageFetcher


def test_fetch_sends_fixed_user_agent():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["ua"] = request.headers["User-Agent"]
        return httpx.Response(200, text="<h1>Job</h1>")

    html = PageFetcher(transport=httpx.MockTransport(handler)).fetch("https://example.com/job")

    assert html == "<h1>Job</h1>"
    assert seen["ua"] == "Mozilla/5.0 (compatible; JobIngest/1.0)"


def test_fetch_follows_redirects():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://example.com/new"})
        return httpx.Response(200, text="moved here")

    fetcher = PageFetcher(transport=httpx.MockTransport(handler))
    assert fetcher.fetch("https://example.com/old") == "moved here"


def test_fetch_raises_on_http_error_status():
    fetcher = PageFetcher(transport=httpx.MockTransport(lambda request: httpx.Response(404)))

    with pytest.raises(FetchError) as excinfo:
        fetcher.fetch("https://example.com/missing")

    assert excinfo.value.status_code == 404
    assert excinfo.value.url == "https://example.com/missing"


def test_fetch_raises_on_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(FetchError) as excinfo:
        PageFetcher(transport=httpx.MockTransport(handler)).fetch("https://example.com/slow")

    assert excinfo.value.status_code is None


@pytest.mark.parametrize(
    "url",
    [
        "http://[::1/job",
        "https://" + "a" * 70 + ".example.com/job",
    ],
)
def test_fetch_raises_on_malformed_url(url):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="unreachable")

    with pytest.raises(FetchError) as excinfo:
        PageFetcher(transport=httpx.MockTransport(handler)).fetch(url)

    assert excinfo.value.url == url
    assert excinfo.value.status_code is None
