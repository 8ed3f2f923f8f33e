"""Single-page content analysis.

Combines the heading, metadata, social, content quality and privacy checks
into one ``ContentAnalysis``. Everything here is synchronous and works only
on the parsed document and the URL; nothing touches the network.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup

from seo_audit.config import AuditConfig, default_config
from seo_audit.content_quality import calculate_keyword_density, calculate_readability, count_words
from seo_audit.headings import analyze_heading_hierarchy
from seo_audit.messages import build_issue
from seo_audit.models import ContentAnalysis, Issue, IssueKind, ResourceProbe
from seo_audit.parser import visible_body_text
from seo_audit.privacy import detect_personal_info, personal_info_issues
from seo_audit import social, technical

logger = logging.getLogger(__name__)


class ContentAnalyzer:
    """Runs every on-page check for one document."""

    def __init__(self, config: Optional[AuditConfig] = None):
        """Initialize the analyzer.

        Args:
            config: Audit configuration (thresholds and locale)
        """
        self.config = config or default_config

    @property
    def locale(self) -> str:
        return self.config.locale

    def analyze(
        self,
        soup: BeautifulSoup,
        url: str,
        load_time_ms: int = 0,
        page_size: int = 0,
    ) -> ContentAnalysis:
        """Analyze a parsed page.

        Args:
            soup: Parsed page
            url: URL the audit was requested for
            load_time_ms: Time taken by the primary fetch
            page_size: Length of the HTML in characters

        Returns:
            ContentAnalysis holding the extracted facts and on-page issues
        """
        config = self.config
        locale = self.locale

        title = technical.extract_title(soup)
        meta_description = technical.extract_meta_description(soup)
        img_count, img_without_alt = technical.count_images(soup)
        headings = analyze_heading_hierarchy(soup, locale)
        canonical_url = technical.find_canonical_url(soup)
        viewport = technical.has_viewport(soup)
        schema = technical.has_schema_markup(soup)
        og_tags = social.extract_open_graph(soup)
        twitter_tags = social.extract_twitter_card(soup)
        meta_robots = technical.find_meta_robots(soup)
        hreflang = technical.has_hreflang(soup)
        internal_links, external_links = technical.count_links(soup, url)

        body_text = visible_body_text(soup)
        personal_info = detect_personal_info(body_text)

        issues: list[Issue] = []
        issues.extend(technical.metadata_issues(title, meta_description, config))
        issues.extend(technical.image_alt_issues(img_count, img_without_alt, locale))
        issues.extend(headings.issues)
        if headings.h1_count == 0:
            issues.append(build_issue(IssueKind.MISSING_H1, locale))
        if canonical_url is None:
            issues.append(build_issue(IssueKind.MISSING_CANONICAL, locale))
        if not viewport:
            issues.append(build_issue(IssueKind.MISSING_VIEWPORT, locale))
        if not schema:
            issues.append(build_issue(IssueKind.MISSING_SCHEMA, locale))
        issues.extend(technical.url_issues(url, config))
        issues.extend(social.check_social_meta_tags(og_tags, twitter_tags, locale))
        issues.extend(technical.transport_issues(url, load_time_ms, config))
        issues.extend(personal_info_issues(personal_info, locale))
        if meta_robots is None:
            issues.append(build_issue(IssueKind.MISSING_META_ROBOTS, locale))
        if not hreflang:
            issues.append(build_issue(IssueKind.MISSING_HREFLANG, locale))

        logger.debug(f"Content analysis of {url} found {len(issues)} issues")

        return ContentAnalysis(
            url=url,
            title=title,
            meta_description=meta_description,
            h1_count=headings.h1_count,
            img_count=img_count,
            img_without_alt=img_without_alt,
            headings=headings,
            has_canonical=canonical_url is not None,
            canonical_url=canonical_url,
            has_viewport=viewport,
            has_schema=schema,
            meta_robots=meta_robots,
            has_hreflang=hreflang,
            og_tags=og_tags,
            twitter_tags=twitter_tags,
            keyword_density=tuple(calculate_keyword_density(body_text, config.top_keywords_count)),
            word_count=count_words(body_text),
            readability_score=calculate_readability(body_text),
            personal_info=personal_info,
            internal_links_count=internal_links,
            external_links_count=external_links,
            url_length=len(url),
            is_https=technical.is_https(url),
            load_time_ms=load_time_ms,
            page_size=page_size,
            issues=tuple(issues),
        )

    def analyze_site_resources(
        self, robots_txt: ResourceProbe, sitemap: ResourceProbe
    ) -> list[Issue]:
        return technical.analyze_site_resources(robots_txt, sitemap, self.locale)
