# src/seo_audit/social.py
# Open Graph and Twitter Card meta tag checks.

from typing import Optional

from bs4 import BeautifulSoup

from seo_audit.constants import DEFAULT_LOCALE
from seo_audit.messages import build_issue
from seo_audit.models import Issue, IssueKind, OpenGraphTags, TwitterTags


def _meta_content(soup: BeautifulSoup, **attrs) -> Optional[str]:
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return None
    content = (tag.get("content") or "").strip()
    return content or None


def extract_open_graph(soup: BeautifulSoup) -> OpenGraphTags:
    return OpenGraphTags(
        og_title=_meta_content(soup, property="og:title"),
        og_description=_meta_content(soup, property="og:description"),
        og_image=_meta_content(soup, property="og:image"),
    )


def extract_twitter_card(soup: BeautifulSoup) -> TwitterTags:
    return TwitterTags(
        twitter_card=_meta_content(soup, name="twitter:card"),
        twitter_title=_meta_content(soup, name="twitter:title"),
        twitter_description=_meta_content(soup, name="twitter:description"),
        twitter_image=_meta_content(soup, name="twitter:image"),
    )


def check_social_meta_tags(
    og_tags: OpenGraphTags, twitter_tags: TwitterTags, locale: str = DEFAULT_LOCALE
) -> list[Issue]:
    """
    Reports every required Open Graph and Twitter Card tag that is missing
    or empty, Open Graph first.
    """
    required = [
        (og_tags.og_title, IssueKind.MISSING_OG_TITLE),
        (og_tags.og_description, IssueKind.MISSING_OG_DESCRIPTION),
        (og_tags.og_image, IssueKind.MISSING_OG_IMAGE),
        (twitter_tags.twitter_card, IssueKind.MISSING_TWITTER_CARD),
        (twitter_tags.twitter_title, IssueKind.MISSING_TWITTER_TITLE),
        (twitter_tags.twitter_description, IssueKind.MISSING_TWITTER_DESCRIPTION),
        (twitter_tags.twitter_image, IssueKind.MISSING_TWITTER_IMAGE),
    ]
    return [build_issue(kind, locale) for value, kind in required if not value]
