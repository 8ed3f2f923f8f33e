"""Tests for link discovery and validation."""

import asyncio

import httpx
import pytest
from bs4 import BeautifulSoup

from seo_audit.config import AuditConfig
from seo_audit.fetcher import HttpFetcher
from seo_audit.link_checker import LinkChecker, collect_same_domain_links, resolve_href


class TestCollectLinks:
    """Test cases for collect_same_domain_links."""

    def test_same_domain_deduplicated_in_order(self):
        """Test hostname filtering, resolution and de-duplication."""
        soup = BeautifulSoup(
            """
            <a href="/b">B</a>
            <a href="https://example.com/a">A</a>
            <a href="https://other.com/x">X</a>
            <a href="/b">B again</a>
            <a href="http://[bad">bad</a>
            <a>no href</a>
            """,
            "html.parser",
        )

        links = collect_same_domain_links(soup, "https://example.com/page")

        assert links == ["https://example.com/b", "https://example.com/a"]

    def test_resolve_href_malformed(self):
        """Test that malformed hrefs resolve to None."""
        assert resolve_href("https://example.com/", "http://[bad") is None
        assert resolve_href("https://example.com/dir/", "page") == "https://example.com/dir/page"


class TestLinkChecker:
    """Test cases for LinkChecker."""

    @pytest.mark.asyncio
    async def test_reports_only_broken_links(self):
        """Test reasons for error statuses and transport failures."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/missing":
                return httpx.Response(404)
            if request.url.path == "/down":
                raise httpx.ConnectError("Connection refused", request=request)
            return httpx.Response(200)

        links = [
            "https://example.com/ok",
            "https://example.com/missing",
            "https://example.com/down",
        ]
        async with HttpFetcher(transport=httpx.MockTransport(handler)) as fetcher:
            broken = await LinkChecker(fetcher).check_links(links)

        reasons = {outcome.url: outcome.reason for outcome in broken}
        assert set(reasons) == {"https://example.com/missing", "https://example.com/down"}
        assert reasons["https://example.com/missing"] == "Status: 404"
        assert "Connection refused" in reasons["https://example.com/down"]
        assert all(outcome.ok is False for outcome in broken)

    @pytest.mark.asyncio
    async def test_limit_and_concurrency(self):
        """Test that at most 20 links are checked, never more than 5 at once."""
        in_flight = 0
        max_in_flight = 0
        calls = 0

        async def handler(request: httpx.Request) -> httpx.Response:
            nonlocal in_flight, max_in_flight, calls
            calls += 1
            in_flight += 1
            max_in_flight = max(max_in_flight, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return httpx.Response(200)

        links = [f"https://example.com/page{i}" for i in range(50)]
        async with HttpFetcher(transport=httpx.MockTransport(handler)) as fetcher:
            broken = await LinkChecker(fetcher).check_links(links)

        assert broken == []
        assert calls == 20
        assert max_in_flight <= 5

    @pytest.mark.asyncio
    async def test_next_batch_waits_for_slowest_link(self):
        """Test that no link of batch two starts before every link of batch one ends."""
        events = []

        async def handler(request: httpx.Request) -> httpx.Response:
            path = request.url.path
            events.append(("start", path))
            await asyncio.sleep(0.2 if path == "/page0" else 0.01)
            events.append(("end", path))
            return httpx.Response(200)

        links = [f"https://example.com/page{i}" for i in range(10)]
        async with HttpFetcher(transport=httpx.MockTransport(handler)) as fetcher:
            await LinkChecker(fetcher).check_links(links)

        first_batch = {f"/page{i}" for i in range(5)}
        second_batch_start = min(
            index for index, (kind, path) in enumerate(events)
            if kind == "start" and path not in first_batch
        )
        slow_end = events.index(("end", "/page0"))
        assert slow_end < second_batch_start
        assert {path for kind, path in events[:second_batch_start] if kind == "end"} == first_batch

    @pytest.mark.asyncio
    async def test_slow_link_times_out_without_aborting_batch(self):
        """Test that a link exceeding its budget is reported and others still run."""

        async def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/slow":
                await asyncio.sleep(2)
            return httpx.Response(200)

        config = AuditConfig(link_check_timeout_ms=50)
        links = ["https://example.com/slow", "https://example.com/fast"]
        async with HttpFetcher(config, transport=httpx.MockTransport(handler)) as fetcher:
            broken = await LinkChecker(fetcher, config).check_links(links)

        assert [outcome.url for outcome in broken] == ["https://example.com/slow"]
        assert "timed out" in broken[0].reason

    @pytest.mark.asyncio
    async def test_custom_limit(self):
        """Test that an explicit limit overrides the configured one."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(str(request.url))
            return httpx.Response(500)

        links = [f"https://example.com/{i}" for i in range(10)]
        async with HttpFetcher(transport=httpx.MockTransport(handler)) as fetcher:
            broken = await LinkChecker(fetcher).check_links(links, limit=3)

        assert len(calls) == 3
        assert {outcome.reason for outcome in broken} == {"Status: 500"}
