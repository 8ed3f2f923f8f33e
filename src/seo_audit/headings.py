"""Heading hierarchy validation."""

from bs4 import BeautifulSoup

from seo_audit.constants import DEFAULT_LOCALE
from seo_audit.messages import build_issue
from seo_audit.models import HeadingAnalysis, HeadingNode, IssueKind

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def extract_headings(soup: BeautifulSoup) -> list[HeadingNode]:
    """Return every h1-h6 element in document order."""
    return [
        HeadingNode(level=int(tag.name[1]), text=tag.get_text(strip=True))
        for tag in soup.find_all(HEADING_TAGS)
    ]


def analyze_heading_hierarchy(
    soup: BeautifulSoup, locale: str = DEFAULT_LOCALE
) -> HeadingAnalysis:
    """Validate the order and nesting of headings.

    Rules:
        - The first heading should be an H1. When it is not, it is reported
          and skipped, so the next heading is still measured from level 0.
        - A heading may go at most one level deeper than the previous one.
          Going back up any number of levels is fine. A jump from level 0
          is reported as coming from H1.
        - There should be only one H1.

    Args:
        soup: Parsed page
        locale: Language for the issue messages

    Returns:
        HeadingAnalysis with the headings and every violation found
    """
    headings = extract_headings(soup)
    issues = []
    previous_level = 0

    for index, heading in enumerate(headings):
        if index == 0 and heading.level != 1:
            issues.append(build_issue(IssueKind.HEADING_NOT_STARTING_WITH_H1, locale))
            continue
        if heading.level - previous_level > 1:
            issues.append(build_issue(
                IssueKind.HEADING_LEVEL_JUMP,
                locale,
                from_level=previous_level or 1,
                to_level=heading.level,
            ))
        previous_level = heading.level

    h1_count = sum(1 for heading in headings if heading.level == 1)
    if h1_count > 1:
        issues.append(build_issue(IssueKind.MULTIPLE_H1, locale, count=h1_count))

    return HeadingAnalysis(is_valid=not issues, headings=tuple(headings), issues=tuple(issues))
