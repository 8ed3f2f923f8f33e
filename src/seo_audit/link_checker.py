"""Same-domain link discovery and bounded-concurrency validation."""

import asyncio
import logging
from typing import Iterable, Optional
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from seo_audit.config import AuditConfig, default_config
from seo_audit.exceptions import FetchError
from seo_audit.fetcher import HttpFetcher
from seo_audit.models import LinkCheckOutcome

logger = logging.getLogger(__name__)


def resolve_href(page_url: str, href: str) -> Optional[str]:
    """Resolve an href against the page URL, or None if it is malformed."""
    try:
        absolute_url = urljoin(page_url, href.strip())
        # Accessing .port validates the netloc
        urlparse(absolute_url).port
    except ValueError:
        return None
    return absolute_url


def collect_same_domain_links(soup: BeautifulSoup, page_url: str) -> list[str]:
    """Collect anchors whose resolved hostname equals the page's hostname.

    Args:
        soup: Parsed page
        page_url: URL the page was fetched from

    Returns:
        De-duplicated absolute URLs in document order
    """
    page_host = urlparse(page_url).hostname
    links: dict[str, None] = {}

    for anchor in soup.find_all("a", href=True):
        absolute_url = resolve_href(page_url, anchor["href"])
        if absolute_url is None:
            logger.debug(f"Skipping malformed href: {anchor['href']!r}")
            continue
        if urlparse(absolute_url).hostname == page_host:
            links.setdefault(absolute_url, None)

    return list(links)


class LinkChecker:
    """Validates a sample of links in fixed-size concurrent batches.

    At most ``concurrent_requests_limit`` requests are in flight at once:
    each batch runs concurrently and the next batch starts only after the
    whole previous batch has finished.
    """

    def __init__(self, fetcher: HttpFetcher, config: Optional[AuditConfig] = None):
        """Initialize the link checker.

        Args:
            fetcher: Started HttpFetcher used for validation requests
            config: Audit configuration (limits and link timeout)
        """
        self.fetcher = fetcher
        self.config = config or default_config

    async def check_links(
        self, links: Iterable[str], limit: Optional[int] = None
    ) -> list[LinkCheckOutcome]:
        """Validate up to ``limit`` links and return the ones that failed.

        Args:
            links: Candidate URLs, in priority order
            limit: Maximum number of links to examine (defaults to config)

        Returns:
            One LinkCheckOutcome per broken link, in batch order
        """
        limit = self.config.link_check_limit if limit is None else limit
        links_to_check = list(links)[:limit]
        batch_size = self.config.concurrent_requests_limit
        broken: list[LinkCheckOutcome] = []

        logger.info(
            f"Checking {len(links_to_check)} links in batches of {batch_size}"
        )

        for start in range(0, len(links_to_check), batch_size):
            batch = links_to_check[start:start + batch_size]
            outcomes = await asyncio.gather(*(self._check_link(link) for link in batch))
            broken.extend(outcome for outcome in outcomes if outcome is not None)

        if broken:
            logger.warning(f"Found {len(broken)} broken links")
        return broken

    async def _check_link(self, link: str) -> Optional[LinkCheckOutcome]:
        """Validate a single link; None means it is healthy."""
        try:
            result = await self.fetcher.fetch(link, timeout_ms=self.config.link_check_timeout_ms)
        except FetchError as e:
            return LinkCheckOutcome(url=link, ok=False, reason=e.message)

        if not result.ok:
            return LinkCheckOutcome(url=link, ok=False, reason=f"Status: {result.status_code}")
        return None
