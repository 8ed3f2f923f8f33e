"""Timeout-bounded HTTP fetching for the audit pipeline."""

import asyncio
import logging
import time
from typing import Optional
from urllib.parse import urljoin

import httpx

from seo_audit.config import AuditConfig, default_config
from seo_audit.exceptions import FetchTimeoutError, NetworkError
from seo_audit.models import FetchResult, ResourceProbe

logger = logging.getLogger(__name__)


class HttpFetcher:
    """Performs single-attempt GET requests, each bounded by its own timeout.

    Use as an async context manager; the underlying ``httpx.AsyncClient`` is
    opened on enter and closed on exit::

        async with HttpFetcher(config) as fetcher:
            result = await fetcher.fetch("https://example.com")
    """

    def __init__(
        self,
        config: Optional[AuditConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the fetcher.

        Args:
            config: Audit configuration (timeouts, user agent)
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``
        """
        self.config = config or default_config
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "HttpFetcher":
        self._client = httpx.AsyncClient(
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str, timeout_ms: Optional[int] = None) -> FetchResult:
        """GET a URL within a time budget.

        Non-2xx responses are returned, not raised; callers decide what a
        failing status means for them.

        Args:
            url: Absolute URL to fetch
            timeout_ms: Budget for the whole request, body included

        Returns:
            FetchResult with status, body and elapsed time

        Raises:
            FetchTimeoutError: If the budget expires; the request is cancelled
            NetworkError: For DNS, connection and protocol failures
        """
        if self._client is None:
            raise RuntimeError("HttpFetcher not started; use 'async with'")

        timeout_ms = timeout_ms or self.config.fetch_timeout_ms
        timeout_s = timeout_ms / 1000
        logger.debug(f"Fetching {url} (timeout {timeout_ms}ms)")

        start_time = time.monotonic()
        try:
            response = await asyncio.wait_for(
                self._client.get(url, timeout=timeout_s),
                timeout=timeout_s,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.debug(f"Timeout fetching {url} after {timeout_ms}ms")
            raise FetchTimeoutError(url, timeout_ms)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            error_msg = str(e) or type(e).__name__
            logger.debug(f"Network error fetching {url}: {error_msg}")
            raise NetworkError(error_msg, url) from e
        elapsed_ms = int((time.monotonic() - start_time) * 1000)

        logger.debug(f"Fetched {url}: {response.status_code} in {elapsed_ms}ms")
        return FetchResult(
            url=url,
            status_code=response.status_code,
            body=response.text,
            elapsed_ms=elapsed_ms,
        )

    async def probe(self, page_url: str, path: str) -> ResourceProbe:
        """Check whether a resource exists at ``path`` on the page's origin.

        Failures are never raised: a non-2xx status means "not found" and a
        network or timeout failure means "could not check".

        Args:
            page_url: Any URL on the site
            path: Absolute path such as ``/robots.txt``

        Returns:
            ResourceProbe describing the outcome
        """
        resource_url = urljoin(page_url, path)
        try:
            result = await self.fetch(resource_url)
        except (FetchTimeoutError, NetworkError) as e:
            logger.warning(f"Could not check {resource_url}: {e.message}")
            return ResourceProbe(url=resource_url, found=False, error=e.message)

        if not result.ok:
            logger.info(f"No resource at {resource_url} (status: {result.status_code})")
        return ResourceProbe(
            url=resource_url,
            found=result.ok,
            status_code=result.status_code,
        )
