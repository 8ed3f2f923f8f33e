"""Data models for the SEO page audit."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional
from urllib.parse import urlparse

from seo_audit.constants import ANALYSIS_ERROR_TITLE, INVALID_URL_ERROR, MISSING_URL_ERROR
from seo_audit.exceptions import ValidationError


class Severity(Enum):
    """How urgently an issue should be addressed."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IssueKind(Enum):
    """Every kind of issue the analyzers can raise."""

    TITLE_LENGTH = "title_length"
    META_DESCRIPTION_LENGTH = "meta_description_length"
    IMAGES_WITHOUT_ALT = "images_without_alt"
    MISSING_H1 = "missing_h1"
    HEADING_NOT_STARTING_WITH_H1 = "heading_not_starting_with_h1"
    HEADING_LEVEL_JUMP = "heading_level_jump"
    MULTIPLE_H1 = "multiple_h1"
    MISSING_CANONICAL = "missing_canonical"
    MISSING_VIEWPORT = "missing_viewport"
    MISSING_SCHEMA = "missing_schema"
    URL_TOO_LONG = "url_too_long"
    ROBOTS_TXT_NOT_FOUND = "robots_txt_not_found"
    ROBOTS_TXT_UNCHECKED = "robots_txt_unchecked"
    SITEMAP_NOT_FOUND = "sitemap_not_found"
    SITEMAP_UNCHECKED = "sitemap_unchecked"
    MISSING_OG_TITLE = "missing_og_title"
    MISSING_OG_DESCRIPTION = "missing_og_description"
    MISSING_OG_IMAGE = "missing_og_image"
    MISSING_TWITTER_CARD = "missing_twitter_card"
    MISSING_TWITTER_TITLE = "missing_twitter_title"
    MISSING_TWITTER_DESCRIPTION = "missing_twitter_description"
    MISSING_TWITTER_IMAGE = "missing_twitter_image"
    NOT_HTTPS = "not_https"
    SLOW_LOAD_TIME = "slow_load_time"
    EMAILS_EXPOSED = "emails_exposed"
    PHONE_NUMBERS_EXPOSED = "phone_numbers_exposed"
    CIFS_EXPOSED = "cifs_exposed"
    MISSING_META_ROBOTS = "missing_meta_robots"
    MISSING_HREFLANG = "missing_hreflang"
    BROKEN_LINKS = "broken_links"


SEVERITY_BY_KIND: dict[IssueKind, Severity] = {
    IssueKind.TITLE_LENGTH: Severity.MEDIUM,
    IssueKind.META_DESCRIPTION_LENGTH: Severity.MEDIUM,
    IssueKind.IMAGES_WITHOUT_ALT: Severity.HIGH,
    IssueKind.MISSING_H1: Severity.HIGH,
    IssueKind.HEADING_NOT_STARTING_WITH_H1: Severity.HIGH,
    IssueKind.HEADING_LEVEL_JUMP: Severity.HIGH,
    IssueKind.MULTIPLE_H1: Severity.HIGH,
    IssueKind.MISSING_CANONICAL: Severity.HIGH,
    IssueKind.MISSING_VIEWPORT: Severity.HIGH,
    IssueKind.MISSING_SCHEMA: Severity.MEDIUM,
    IssueKind.URL_TOO_LONG: Severity.HIGH,
    IssueKind.ROBOTS_TXT_NOT_FOUND: Severity.HIGH,
    IssueKind.ROBOTS_TXT_UNCHECKED: Severity.LOW,
    IssueKind.SITEMAP_NOT_FOUND: Severity.HIGH,
    IssueKind.SITEMAP_UNCHECKED: Severity.LOW,
    IssueKind.MISSING_OG_TITLE: Severity.HIGH,
    IssueKind.MISSING_OG_DESCRIPTION: Severity.HIGH,
    IssueKind.MISSING_OG_IMAGE: Severity.HIGH,
    IssueKind.MISSING_TWITTER_CARD: Severity.HIGH,
    IssueKind.MISSING_TWITTER_TITLE: Severity.HIGH,
    IssueKind.MISSING_TWITTER_DESCRIPTION: Severity.HIGH,
    IssueKind.MISSING_TWITTER_IMAGE: Severity.HIGH,
    IssueKind.NOT_HTTPS: Severity.HIGH,
    IssueKind.SLOW_LOAD_TIME: Severity.HIGH,
    IssueKind.EMAILS_EXPOSED: Severity.MEDIUM,
    IssueKind.PHONE_NUMBERS_EXPOSED: Severity.MEDIUM,
    IssueKind.CIFS_EXPOSED: Severity.MEDIUM,
    IssueKind.MISSING_META_ROBOTS: Severity.HIGH,
    IssueKind.MISSING_HREFLANG: Severity.MEDIUM,
    IssueKind.BROKEN_LINKS: Severity.MEDIUM,
}


class CheckKind(Enum):
    """One boolean criterion of the scoring checklist."""

    TITLE_LENGTH = "title_length"
    META_DESCRIPTION_LENGTH = "meta_description_length"
    SINGLE_H1 = "single_h1"
    IMAGES_HAVE_ALT = "images_have_alt"
    CANONICAL = "canonical"
    VIEWPORT = "viewport"
    HTTPS = "https"
    SCHEMA = "schema"
    HEADING_HIERARCHY = "heading_hierarchy"
    URL_LENGTH = "url_length"
    OPEN_GRAPH_COMPLETE = "open_graph_complete"
    TWITTER_CARD_COMPLETE = "twitter_card_complete"
    LOAD_TIME = "load_time"
    ROBOTS_TXT = "robots_txt"
    SITEMAP = "sitemap"
    META_ROBOTS = "meta_robots"
    HREFLANG = "hreflang"
    NO_EMAILS = "no_emails"
    NO_PHONE_NUMBERS = "no_phone_numbers"
    NO_CIFS = "no_cifs"
    NO_BROKEN_LINKS = "no_broken_links"


# Canonical checklist; every item weighs 100 / len(checklist) points
DEFAULT_CHECKLIST: tuple[CheckKind, ...] = tuple(CheckKind)


class AuditStage(Enum):
    """Pipeline states, in the order a successful audit visits them."""

    IDLE = "idle"
    FETCHING = "fetching"
    ANALYZING = "analyzing"
    LINK_CHECKING = "link_checking"
    CONTENT_ANALYSIS = "content_analysis"
    SCORING = "scoring"
    DONE = "done"
    FAILED = "failed"


@dataclass
class AuditRequest:
    """A request to audit a single URL."""

    url: Optional[str] = None

    def validate(self) -> str:
        """Return the stripped URL or raise ValidationError.

        Returns:
            The URL to audit

        Raises:
            ValidationError: If the URL is empty or not an absolute http(s) URL
        """
        url = (self.url or "").strip()
        if not url:
            raise ValidationError(MISSING_URL_ERROR)

        try:
            parsed = urlparse(url)
            # Raises ValueError for a non-numeric or out-of-range port
            parsed.port
        except ValueError as e:
            raise ValidationError(f"{INVALID_URL_ERROR}: {url} ({e})", url) from e
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValidationError(f"{INVALID_URL_ERROR}: {url}", url)
        return url


@dataclass
class FetchResult:
    """Outcome of one HTTP GET."""

    url: str
    status_code: int
    body: str = ""
    elapsed_ms: int = 0

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class HeadingNode:
    """A heading element, in document order."""

    level: int
    text: str

    def to_dict(self) -> dict:
        return {"level": self.level, "text": self.text}


@dataclass(frozen=True)
class HeadingAnalysis:
    """Result of validating the heading hierarchy."""

    is_valid: bool = True
    headings: tuple[HeadingNode, ...] = ()
    issues: tuple["Issue", ...] = ()

    @property
    def h1_count(self) -> int:
        return sum(1 for heading in self.headings if heading.level == 1)


@dataclass(frozen=True)
class LinkCheckOutcome:
    """A link that failed validation."""

    url: str
    ok: bool = False
    reason: Optional[str] = None

    def to_dict(self) -> dict:
        return {"url": self.url, "reason": self.reason}


@dataclass(frozen=True)
class ResourceProbe:
    """Presence check for an auxiliary resource such as robots.txt."""

    url: str
    found: bool
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def checked(self) -> bool:
        """False when the probe itself failed rather than returning a status."""
        return self.error is None


@dataclass(frozen=True)
class Issue:
    """A single detected deviation from a checklist item."""

    kind: IssueKind
    message: str
    severity: Severity

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "severity": self.severity.value,
        }


@dataclass(frozen=True)
class KeywordDensity:
    """A keyword and its share of all words on the page."""

    word: str
    count: int
    density: float

    def to_dict(self) -> dict:
        return {"word": self.word, "count": self.count, "density": self.density}


@dataclass(frozen=True)
class OpenGraphTags:
    """Content of the Open Graph tags the audit requires."""

    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None

    @property
    def complete(self) -> bool:
        return bool(self.og_title and self.og_description and self.og_image)

    def to_dict(self) -> dict:
        return {
            "ogTitle": self.og_title,
            "ogDescription": self.og_description,
            "ogImage": self.og_image,
        }


@dataclass(frozen=True)
class TwitterTags:
    """Content of the Twitter Card tags the audit requires."""

    twitter_card: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image: Optional[str] = None

    @property
    def complete(self) -> bool:
        return bool(
            self.twitter_card
            and self.twitter_title
            and self.twitter_description
            and self.twitter_image
        )

    def to_dict(self) -> dict:
        return {
            "twitterCard": self.twitter_card,
            "twitterTitle": self.twitter_title,
            "twitterDescription": self.twitter_description,
            "twitterImage": self.twitter_image,
        }


@dataclass(frozen=True)
class PersonalInfo:
    """Personal data found in the visible page text."""

    emails: tuple[str, ...] = ()
    phone_numbers: tuple[str, ...] = ()
    cifs: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.emails or self.phone_numbers or self.cifs)

    def to_dict(self) -> dict:
        return {
            "emails": list(self.emails),
            "phoneNumbers": list(self.phone_numbers),
            "cifs": list(self.cifs),
        }


@dataclass(frozen=True)
class PerformanceMetrics:
    """Paint and layout-shift metrics.

    When ``synthetic`` is True the values were generated, not measured.
    """

    fcp_ms: int
    lcp_ms: int
    cls: float
    synthetic: bool = True

    def to_dict(self) -> dict:
        return {
            "fcp": self.fcp_ms,
            "lcp": self.lcp_ms,
            "cls": self.cls,
            "synthetic": self.synthetic,
        }


@dataclass(frozen=True)
class ContentAnalysis:
    """Everything the content analyzer learns from one page."""

    url: str
    title: str = ""
    meta_description: str = ""
    h1_count: int = 0
    img_count: int = 0
    img_without_alt: int = 0
    headings: HeadingAnalysis = field(default_factory=HeadingAnalysis)
    has_canonical: bool = False
    canonical_url: Optional[str] = None
    has_viewport: bool = False
    has_schema: bool = False
    meta_robots: Optional[str] = None
    has_hreflang: bool = False
    og_tags: OpenGraphTags = field(default_factory=OpenGraphTags)
    twitter_tags: TwitterTags = field(default_factory=TwitterTags)
    keyword_density: tuple[KeywordDensity, ...] = ()
    word_count: int = 0
    readability_score: float = 0.0
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    internal_links_count: int = 0
    external_links_count: int = 0
    url_length: int = 0
    is_https: bool = False
    load_time_ms: int = 0
    page_size: int = 0
    issues: tuple[Issue, ...] = ()


@dataclass(frozen=True)
class AuditReport:
    """The terminal aggregate returned for a successful audit."""

    url: str
    analysis: ContentAnalysis
    robots_txt: ResourceProbe
    sitemap: ResourceProbe
    broken_links: tuple[LinkCheckOutcome, ...]
    performance: PerformanceMetrics
    checks: Mapping[CheckKind, bool]
    overall_score: float
    issues: tuple[Issue, ...]
    suggestions: tuple[str, ...]
    analysis_time_ms: int
    locale: str

    def __post_init__(self):
        # Read-only view over a private copy of the flags
        object.__setattr__(self, "checks", MappingProxyType(dict(self.checks)))

    @property
    def passed_checks(self) -> int:
        return sum(1 for passed in self.checks.values() if passed)

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys the report renderer consumes."""
        analysis = self.analysis
        return {
            "url": self.url,
            "loadTime": analysis.load_time_ms,
            "title": analysis.title,
            "metaDescription": analysis.meta_description,
            "h1Count": analysis.h1_count,
            "imgCount": analysis.img_count,
            "imgWithoutAlt": analysis.img_without_alt,
            "seoIssues": [issue.to_dict() for issue in self.issues],
            "brokenLinks": [outcome.to_dict() for outcome in self.broken_links],
            "brokenLinksCount": len(self.broken_links),
            "wordCount": analysis.word_count,
            "readabilityScore": analysis.readability_score,
            "hasSSL": analysis.is_https,
            "hasSchema": analysis.has_schema,
            "hasCanonical": analysis.has_canonical,
            "canonicalUrl": analysis.canonical_url,
            "hasViewport": analysis.has_viewport,
            "metaRobots": analysis.meta_robots,
            "hasHreflangTags": analysis.has_hreflang,
            "overallScore": self.overall_score,
            "passedChecks": self.passed_checks,
            "totalChecks": len(self.checks),
            "checks": {kind.value: passed for kind, passed in self.checks.items()},
            "analysisTime": self.analysis_time_ms,
            "headingStructure": [h.to_dict() for h in analysis.headings.headings],
            "headingHierarchyValid": analysis.headings.is_valid,
            "urlLength": analysis.url_length,
            "hasRobotsTxt": self.robots_txt.found,
            "hasSitemap": self.sitemap.found,
            "ogTags": analysis.og_tags.to_dict(),
            "twitterTags": analysis.twitter_tags.to_dict(),
            "keywordDensity": [kd.to_dict() for kd in analysis.keyword_density],
            "internalLinksCount": analysis.internal_links_count,
            "externalLinksCount": analysis.external_links_count,
            "pageSize": analysis.page_size,
            "fcp": self.performance.fcp_ms,
            "lcp": self.performance.lcp_ms,
            "cls": self.performance.cls,
            "performanceMetrics": self.performance.to_dict(),
            "personalInfo": analysis.personal_info.to_dict(),
            "suggestions": list(self.suggestions),
            "locale": self.locale,
        }


@dataclass(frozen=True)
class AuditFailure:
    """Structured error result for an audit that could not complete."""

    error: str
    message: str
    details: dict = field(default_factory=dict)

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        url: Optional[str] = None,
        stage: Optional[AuditStage] = None,
    ) -> "AuditFailure":
        """Build a failure from any exception raised by the pipeline.

        Args:
            exc: The exception that stopped the audit
            url: The URL being audited, if known
            stage: The stage that was running when the audit failed

        Returns:
            AuditFailure ready to serialize
        """
        message = str(exc) or type(exc).__name__
        details = {
            "name": type(exc).__name__,
            "message": message,
            "url": url or getattr(exc, "url", None),
            "stage": stage.value if stage else None,
        }
        status_code = getattr(exc, "status_code", None)
        if status_code is not None:
            details["statusCode"] = status_code
        return cls(error=ANALYSIS_ERROR_TITLE, message=message, details=details)

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message, "details": self.details}


@dataclass(frozen=True)
class AuditResult:
    """Either a report or a failure; exactly one is set."""

    report: Optional[AuditReport] = None
    failure: Optional[AuditFailure] = None
    error: Optional[BaseException] = None

    @property
    def success(self) -> bool:
        return self.report is not None
