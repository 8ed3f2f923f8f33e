"""Tests for the content analyzer."""

import pytest
from bs4 import BeautifulSoup

from seo_audit.config import AuditConfig
from seo_audit.content_analyzer import ContentAnalyzer
from seo_audit.models import IssueKind
from seo_audit.parser import BeautifulSoupParser, visible_body_text

PAGE = """
<html>
<head><title>Short</title></head>
<body>
    <h2>Start</h2>
    <h4>Deep</h4>
    <p>Escríbenos a contacto@empresa.es o llama al 612 345 678.</p>
    <script>var hidden = "script text";</script>
    <style>.x { color: red; }</style>
    <img src="a.png">
    <a href="/inside">Inside</a>
</body>
</html>
"""


@pytest.fixture
def analysis():
    soup = BeautifulSoupParser().parse(PAGE)
    return ContentAnalyzer().analyze(soup, "http://example.com/page", load_time_ms=4200, page_size=len(PAGE))


class TestContentAnalyzer:
    """Test cases for ContentAnalyzer.analyze."""

    def test_extracted_facts(self, analysis):
        """Test the basic facts pulled from the page."""
        assert analysis.title == "Short"
        assert analysis.h1_count == 0
        assert analysis.img_count == 1
        assert analysis.img_without_alt == 1
        assert analysis.internal_links_count == 1
        assert analysis.external_links_count == 0
        assert analysis.is_https is False
        assert analysis.url_length == len("http://example.com/page")
        assert analysis.load_time_ms == 4200
        assert analysis.page_size == len(PAGE)
        assert analysis.headings.is_valid is False

    def test_personal_data(self, analysis):
        """Test that personal data in the body is detected."""
        assert analysis.personal_info.emails == ("contacto@empresa.es",)
        assert analysis.personal_info.phone_numbers == ("612 345 678",)

    def test_script_and_style_are_not_content(self, analysis):
        """Test that non-visible text never becomes a keyword."""
        words = {kd.word for kd in analysis.keyword_density}
        assert "hidden" not in words
        assert "color" not in words

    def test_issue_kinds(self, analysis):
        """Test that each failing on-page check yields its issue."""
        kinds = [issue.kind for issue in analysis.issues]

        for expected in (
            IssueKind.TITLE_LENGTH,
            IssueKind.META_DESCRIPTION_LENGTH,
            IssueKind.IMAGES_WITHOUT_ALT,
            IssueKind.HEADING_NOT_STARTING_WITH_H1,
            IssueKind.HEADING_LEVEL_JUMP,
            IssueKind.MISSING_H1,
            IssueKind.MISSING_CANONICAL,
            IssueKind.MISSING_VIEWPORT,
            IssueKind.MISSING_SCHEMA,
            IssueKind.MISSING_OG_TITLE,
            IssueKind.MISSING_TWITTER_CARD,
            IssueKind.NOT_HTTPS,
            IssueKind.SLOW_LOAD_TIME,
            IssueKind.EMAILS_EXPOSED,
            IssueKind.PHONE_NUMBERS_EXPOSED,
            IssueKind.MISSING_META_ROBOTS,
            IssueKind.MISSING_HREFLANG,
        ):
            assert expected in kinds
        assert IssueKind.URL_TOO_LONG not in kinds
        assert IssueKind.CIFS_EXPOSED not in kinds

    def test_catalan_locale(self):
        """Test that issues are written in the configured locale."""
        soup = BeautifulSoup("<html><body></body></html>", "html.parser")
        analysis = ContentAnalyzer(AuditConfig(locale="ca")).analyze(soup, "https://example.com/")

        messages = [issue.message for issue in analysis.issues]
        assert "Falta la URL canònica" in messages


class TestVisibleBodyText:
    """Test cases for visible_body_text."""

    def test_excludes_hidden_elements_without_mutating(self):
        """Test that hidden content is dropped from a copy of the tree."""
        soup = BeautifulSoup(
            "<body><p>Shown</p><noscript>Nope</noscript><template>Hidden</template></body>",
            "html.parser",
        )

        text = visible_body_text(soup)

        assert "Shown" in text
        assert "Nope" not in text and "Hidden" not in text
        assert soup.find("noscript") is not None
