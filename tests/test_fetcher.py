"""Tests for the HTTP fetcher."""

import asyncio

import httpx
import pytest

from seo_audit.config import AuditConfig
from seo_audit.constants import DEFAULT_USER_AGENT
from seo_audit.exceptions import FetchTimeoutError, NetworkError
from seo_audit.fetcher import HttpFetcher


class TestHttpFetcher:
    """Test cases for HttpFetcher."""

    @pytest.mark.asyncio
    async def test_fetch_success_sends_user_agent(self):
        """Test a 200 response and the identifying User-Agent header."""
        seen_headers = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen_headers.update(request.headers)
            return httpx.Response(200, text="<html></html>")

        async with HttpFetcher(transport=httpx.MockTransport(handler)) as fetcher:
            result = await fetcher.fetch("https://example.com/")

        assert result.ok is True
        assert result.status_code == 200
        assert result.body == "<html></html>"
        assert result.elapsed_ms >= 0
        assert seen_headers["user-agent"] == DEFAULT_USER_AGENT

    @pytest.mark.asyncio
    async def test_non_2xx_is_returned(self):
        """Test that error statuses are returned rather than raised."""
        transport = httpx.MockTransport(lambda request: httpx.Response(404))

        async with HttpFetcher(transport=transport) as fetcher:
            result = await fetcher.fetch("https://example.com/missing")

        assert result.ok is False
        assert result.status_code == 404

    @pytest.mark.asyncio
    async def test_timeout_raises_fetch_timeout(self):
        """Test that a slow response is cancelled at the budget."""

        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(2)
            return httpx.Response(200)

        async with HttpFetcher(transport=httpx.MockTransport(handler)) as fetcher:
            with pytest.raises(FetchTimeoutError) as exc_info:
                await fetcher.fetch("https://slow.example.com/", timeout_ms=50)

        assert exc_info.value.timeout_ms == 50
        assert "timed out after 50ms" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_connection_error_raises_network_error(self):
        """Test that transport failures become NetworkError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        async with HttpFetcher(transport=httpx.MockTransport(handler)) as fetcher:
            with pytest.raises(NetworkError) as exc_info:
                await fetcher.fetch("https://down.example.com/")

        assert "Connection refused" in exc_info.value.message
        assert exc_info.value.url == "https://down.example.com/"

    @pytest.mark.asyncio
    async def test_fetch_requires_context(self):
        """Test that fetching before entering the context fails loudly."""
        fetcher = HttpFetcher()
        with pytest.raises(RuntimeError):
            await fetcher.fetch("https://example.com/")

    @pytest.mark.asyncio
    async def test_custom_user_agent(self):
        """Test that the configured User-Agent is sent."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers["user-agent"])
            return httpx.Response(200)

        config = AuditConfig(user_agent="CustomBot/1.0")
        async with HttpFetcher(config, transport=httpx.MockTransport(handler)) as fetcher:
            await fetcher.fetch("https://example.com/")

        assert seen == ["CustomBot/1.0"]


class TestProbe:
    """Test cases for HttpFetcher.probe."""

    @pytest.mark.asyncio
    async def test_probe_resolves_against_origin(self):
        """Test that the path replaces the page path."""
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            return httpx.Response(200, text="User-agent: *")

        async with HttpFetcher(transport=httpx.MockTransport(handler)) as fetcher:
            probe = await fetcher.probe("https://example.com/blog/post?x=1", "/robots.txt")

        assert requested == ["https://example.com/robots.txt"]
        assert probe.found is True
        assert probe.checked is True

    @pytest.mark.asyncio
    async def test_probe_not_found(self):
        """Test that a 404 means found=False but checked."""
        transport = httpx.MockTransport(lambda request: httpx.Response(404))

        async with HttpFetcher(transport=transport) as fetcher:
            probe = await fetcher.probe("https://example.com/", "/sitemap.xml")

        assert probe.found is False
        assert probe.checked is True
        assert probe.status_code == 404

    @pytest.mark.asyncio
    async def test_probe_failure_is_not_raised(self):
        """Test that a network failure is downgraded to an unchecked probe."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("DNS failure", request=request)

        async with HttpFetcher(transport=httpx.MockTransport(handler)) as fetcher:
            probe = await fetcher.probe("https://example.com/", "/robots.txt")

        assert probe.found is False
        assert probe.checked is False
        assert "DNS failure" in probe.error
