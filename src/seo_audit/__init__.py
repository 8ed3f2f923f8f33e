"""Single-page SEO audit: fetch, analyze, check links and score."""

__version__ = "0.1.0"

from seo_audit.auditor import SiteAuditor, audit_url
from seo_audit.config import AuditConfig, settings
from seo_audit.content_analyzer import ContentAnalyzer
from seo_audit.fetcher import HttpFetcher
from seo_audit.link_checker import LinkChecker
from seo_audit.models import (
    AuditFailure,
    AuditReport,
    AuditResult,
    AuditStage,
    CheckKind,
    Issue,
    IssueKind,
    Severity,
)
from seo_audit.exceptions import (
    AuditError,
    AuditTimeoutError,
    FetchError,
    FetchTimeoutError,
    NetworkError,
    ValidationError,
)
from seo_audit.output_manager import JsonReportExporter, ReportExporter
from seo_audit.performance import PerformanceMetricsProvider, SyntheticPerformanceMetrics

__all__ = [
    "SiteAuditor",
    "audit_url",
    "AuditConfig",
    "settings",
    "ContentAnalyzer",
    "HttpFetcher",
    "LinkChecker",
    "AuditFailure",
    "AuditReport",
    "AuditResult",
    "AuditStage",
    "CheckKind",
    "Issue",
    "IssueKind",
    "Severity",
    "AuditError",
    "AuditTimeoutError",
    "FetchError",
    "FetchTimeoutError",
    "NetworkError",
    "ValidationError",
    "JsonReportExporter",
    "ReportExporter",
    "PerformanceMetricsProvider",
    "SyntheticPerformanceMetrics",
]
