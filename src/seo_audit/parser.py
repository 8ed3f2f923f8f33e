"""HTML parsing provider and text extraction helpers."""

import copy
from typing import Protocol

from bs4 import BeautifulSoup

from seo_audit.constants import NON_VISIBLE_TAGS


class HtmlParser(Protocol):
    """Anything that turns an HTML string into a queryable document."""

    def parse(self, html: str) -> BeautifulSoup:
        ...


class BeautifulSoupParser:
    """Default parser backed by BeautifulSoup."""

    def __init__(self, features: str = "html.parser"):
        """Initialize the parser.

        Args:
            features: BeautifulSoup tree builder, e.g. "html.parser" or "lxml"
        """
        self.features = features

    def parse(self, html: str) -> BeautifulSoup:
        return BeautifulSoup(html, self.features)


def visible_body_text(soup: BeautifulSoup) -> str:
    """Return the text of <body>, without script, style and template content.

    Falls back to the whole document when there is no <body> element.
    The parsed document itself is left untouched.
    """
    root = soup.body if soup.body is not None else soup
    root = copy.copy(root)
    for tag in root.find_all(NON_VISIBLE_TAGS):
        tag.decompose()
    return root.get_text(separator=" ")
