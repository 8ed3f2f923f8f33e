"""Technical SEO checks on a single parsed page."""

import logging
from typing import Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from seo_audit.config import AuditConfig, default_config
from seo_audit.link_checker import resolve_href
from seo_audit.messages import build_issue, format_decimal
from seo_audit.models import Issue, IssueKind, ResourceProbe

logger = logging.getLogger(__name__)


def extract_title(soup: BeautifulSoup) -> str:
    if soup.title is None:
        return ""
    return soup.title.get_text().strip()


def extract_meta_description(soup: BeautifulSoup) -> str:
    tag = soup.find("meta", attrs={"name": "description"})
    if tag is None:
        return ""
    return (tag.get("content") or "").strip()


def count_images(soup: BeautifulSoup) -> tuple[int, int]:
    """Return (total images, images without an alt attribute).

    An empty ``alt=""`` counts as present; it marks decorative images.
    """
    images = soup.find_all("img")
    without_alt = sum(1 for img in images if not img.has_attr("alt"))
    return len(images), without_alt


def find_canonical_url(soup: BeautifulSoup) -> Optional[str]:
    for link in soup.find_all("link", href=True):
        rel = [value.lower() for value in (link.get("rel") or [])]
        if "canonical" in rel:
            return link["href"].strip() or None
    return None


def has_viewport(soup: BeautifulSoup) -> bool:
    return soup.find("meta", attrs={"name": "viewport"}) is not None


def has_schema_markup(soup: BeautifulSoup) -> bool:
    return soup.find("script", attrs={"type": "application/ld+json"}) is not None


def find_meta_robots(soup: BeautifulSoup) -> Optional[str]:
    tag = soup.find("meta", attrs={"name": "robots"})
    if tag is None:
        return None
    return (tag.get("content") or "").strip() or None


def has_hreflang(soup: BeautifulSoup) -> bool:
    for link in soup.find_all("link", hreflang=True):
        rel = [value.lower() for value in (link.get("rel") or [])]
        if "alternate" in rel:
            return True
    return False


def count_links(soup: BeautifulSoup, page_url: str) -> tuple[int, int]:
    """Classify every anchor as internal or external by hostname.

    Args:
        soup: Parsed page
        page_url: URL the page was fetched from

    Returns:
        Tuple of (internal_count, external_count)
    """
    page_host = urlparse(page_url).hostname
    internal = external = 0

    for anchor in soup.find_all("a", href=True):
        absolute_url = resolve_href(page_url, anchor["href"])
        if absolute_url is None:
            logger.debug(f"Skipping malformed href: {anchor['href']!r}")
            continue
        if urlparse(absolute_url).hostname == page_host:
            internal += 1
        else:
            external += 1

    return internal, external


def metadata_issues(
    title: str,
    meta_description: str,
    config: AuditConfig = default_config,
) -> list[Issue]:
    """Check title and meta description lengths against their bounds."""
    issues = []
    locale = config.locale

    if not config.title_min_length <= len(title) <= config.title_max_length:
        issues.append(build_issue(
            IssueKind.TITLE_LENGTH,
            locale,
            length=len(title),
            min_length=config.title_min_length,
            max_length=config.title_max_length,
        ))

    if not (config.meta_description_min_length
            <= len(meta_description)
            <= config.meta_description_max_length):
        issues.append(build_issue(
            IssueKind.META_DESCRIPTION_LENGTH,
            locale,
            length=len(meta_description),
            min_length=config.meta_description_min_length,
            max_length=config.meta_description_max_length,
        ))

    return issues


def image_alt_issues(img_count: int, img_without_alt: int, locale: str) -> list[Issue]:
    if img_without_alt == 0:
        return []
    return [build_issue(IssueKind.IMAGES_WITHOUT_ALT, locale, missing=img_without_alt, total=img_count)]


def url_length_exceeded(url: str, config: AuditConfig = default_config) -> bool:
    return len(url) > config.max_url_length


def is_https(url: str) -> bool:
    return url.lower().startswith("https://")


def load_time_exceeded(load_time_ms: int, config: AuditConfig = default_config) -> bool:
    return load_time_ms > config.slow_load_time_ms


def url_issues(url: str, config: AuditConfig = default_config) -> list[Issue]:
    if not url_length_exceeded(url, config):
        return []
    return [build_issue(
        IssueKind.URL_TOO_LONG,
        config.locale,
        length=len(url),
        max_length=config.max_url_length,
    )]


def transport_issues(url: str, load_time_ms: int, config: AuditConfig = default_config) -> list[Issue]:
    """HTTPS and load time issues, in that order."""
    issues = []
    if not is_https(url):
        issues.append(build_issue(IssueKind.NOT_HTTPS, config.locale))
    if load_time_exceeded(load_time_ms, config):
        issues.append(build_issue(
            IssueKind.SLOW_LOAD_TIME,
            config.locale,
            load_time=load_time_ms,
            max_seconds=format_decimal(config.slow_load_time_ms / 1000, config.locale),
        ))
    return issues


def _probe_issue(
    probe: ResourceProbe, not_found: IssueKind, unchecked: IssueKind, locale: str
) -> list[Issue]:
    if probe.found:
        return []
    if not probe.checked:
        return [build_issue(unchecked, locale)]
    return [build_issue(not_found, locale)]


def analyze_site_resources(
    robots_txt: ResourceProbe, sitemap: ResourceProbe, locale: str
) -> list[Issue]:
    """Turn the robots.txt and sitemap.xml probes into issues.

    A probe that got a non-2xx answer means the file is missing; a probe
    that failed outright only means the file could not be checked.
    """
    return (
        _probe_issue(robots_txt, IssueKind.ROBOTS_TXT_NOT_FOUND, IssueKind.ROBOTS_TXT_UNCHECKED, locale)
        + _probe_issue(sitemap, IssueKind.SITEMAP_NOT_FOUND, IssueKind.SITEMAP_UNCHECKED, locale)
    )
