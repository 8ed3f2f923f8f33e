"""Tests for technical on-page checks."""

import pytest
from bs4 import BeautifulSoup

from seo_audit.config import AuditConfig
from seo_audit.models import IssueKind, ResourceProbe, Severity
from seo_audit import technical


@pytest.fixture
def soup():
    html = """
    <html>
        <head>
            <title>  A title that is long enough to pass  </title>
            <meta name="description" content="Short description">
            <meta name="viewport" content="width=device-width">
            <meta name="robots" content="index, follow">
            <link rel="canonical" href="https://example.com/page">
            <link rel="alternate" hreflang="es" href="https://example.com/es/page">
            <script type="application/ld+json">{"@type": "Organization"}</script>
        </head>
        <body>
            <img src="a.jpg" alt="A">
            <img src="b.jpg" alt="">
            <img src="c.jpg">
            <a href="/about">About</a>
            <a href="https://example.com/contact">Contact</a>
            <a href="https://other.org/">Other</a>
            <a href="mailto:info@example.com">Mail</a>
            <a href="http://[bad">Broken</a>
        </body>
    </html>
    """
    return BeautifulSoup(html, "html.parser")


class TestExtraction:
    """Test cases for tag extraction helpers."""

    def test_title_and_description(self, soup):
        """Test title stripping and meta description extraction."""
        assert technical.extract_title(soup) == "A title that is long enough to pass"
        assert technical.extract_meta_description(soup) == "Short description"

    def test_missing_title_and_description(self):
        """Test that missing tags read as empty strings."""
        empty = BeautifulSoup("<html></html>", "html.parser")
        assert technical.extract_title(empty) == ""
        assert technical.extract_meta_description(empty) == ""

    def test_count_images(self, soup):
        """Test that only images without an alt attribute are counted."""
        assert technical.count_images(soup) == (3, 1)

    def test_presence_checks(self, soup):
        """Test canonical, viewport, schema, robots and hreflang detection."""
        assert technical.find_canonical_url(soup) == "https://example.com/page"
        assert technical.has_viewport(soup) is True
        assert technical.has_schema_markup(soup) is True
        assert technical.find_meta_robots(soup) == "index, follow"
        assert technical.has_hreflang(soup) is True

    def test_presence_checks_absent(self):
        """Test the same checks on a bare page."""
        bare = BeautifulSoup("<html><head></head></html>", "html.parser")
        assert technical.find_canonical_url(bare) is None
        assert technical.has_viewport(bare) is False
        assert technical.has_schema_markup(bare) is False
        assert technical.find_meta_robots(bare) is None
        assert technical.has_hreflang(bare) is False

    def test_count_links(self, soup):
        """Test internal/external classification, skipping malformed hrefs."""
        internal, external = technical.count_links(soup, "https://example.com/page")
        assert internal == 2
        assert external == 2


class TestMetadataIssues:
    """Test cases for metadata_issues."""

    def test_boundaries_are_inclusive(self):
        """Test that 30 and 60 character titles pass."""
        assert technical.metadata_issues("t" * 30, "d" * 120) == []
        assert technical.metadata_issues("t" * 60, "d" * 160) == []

    def test_out_of_range(self):
        """Test that short and long values raise issues with the length."""
        issues = technical.metadata_issues("t" * 61, "")

        assert [issue.kind for issue in issues] == [
            IssueKind.TITLE_LENGTH,
            IssueKind.META_DESCRIPTION_LENGTH,
        ]
        assert "61" in issues[0].message
        assert "(0)" in issues[1].message
        assert issues[0].severity == Severity.MEDIUM

    def test_custom_bounds(self):
        """Test that the configured bounds are used."""
        config = AuditConfig(title_min_length=5, title_max_length=10)
        issues = technical.metadata_issues("t" * 8, "d" * 130, config)
        assert issues == []


class TestThresholds:
    """Test cases for URL, HTTPS and load time checks."""

    def test_url_length(self):
        """Test the 75 character URL limit."""
        short_url = "https://example.com/" + "a" * 55
        long_url = "https://example.com/" + "a" * 56

        assert len(short_url) == 75
        assert technical.url_issues(short_url) == []
        issues = technical.url_issues(long_url)
        assert issues[0].kind == IssueKind.URL_TOO_LONG
        assert "76" in issues[0].message

    def test_transport_issues(self):
        """Test HTTPS and slow load detection."""
        issues = technical.transport_issues("http://example.com", 3001)

        assert [issue.kind for issue in issues] == [IssueKind.NOT_HTTPS, IssueKind.SLOW_LOAD_TIME]
        assert issues[1].message == "Page load time (3001ms) is too slow. Aim for under 3 seconds."

    def test_fast_https_page(self):
        """Test that a fast HTTPS page has no transport issues."""
        assert technical.transport_issues("https://example.com", 3000) == []


class TestSiteResources:
    """Test cases for analyze_site_resources."""

    def test_found(self):
        """Test that found resources raise nothing."""
        robots = ResourceProbe(url="https://example.com/robots.txt", found=True, status_code=200)
        sitemap = ResourceProbe(url="https://example.com/sitemap.xml", found=True, status_code=200)
        assert technical.analyze_site_resources(robots, sitemap, "en") == []

    def test_not_found_and_unchecked(self):
        """Test that a 404 and a failed probe map to different issues."""
        robots = ResourceProbe(url="https://example.com/robots.txt", found=False, status_code=404)
        sitemap = ResourceProbe(url="https://example.com/sitemap.xml", found=False, error="timed out")

        issues = technical.analyze_site_resources(robots, sitemap, "en")

        assert [issue.kind for issue in issues] == [
            IssueKind.ROBOTS_TXT_NOT_FOUND,
            IssueKind.SITEMAP_UNCHECKED,
        ]
        assert issues[0].message == "robots.txt file not found"
        assert issues[1].severity == Severity.LOW
