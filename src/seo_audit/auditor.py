"""Audit orchestration: fetch, analyze, check links, score."""

import asyncio
import logging
import time
from typing import Callable, Optional

from seo_audit.config import AuditConfig, default_config
from seo_audit.constants import ROBOTS_TXT_PATH, SITEMAP_XML_PATH
from seo_audit.content_analyzer import ContentAnalyzer
from seo_audit.exceptions import AuditTimeoutError, FetchError
from seo_audit.fetcher import HttpFetcher
from seo_audit.link_checker import LinkChecker, collect_same_domain_links
from seo_audit.messages import build_issue
from seo_audit.models import (
    AuditFailure,
    AuditReport,
    AuditRequest,
    AuditResult,
    AuditStage,
    IssueKind,
)
from seo_audit.parser import BeautifulSoupParser, HtmlParser
from seo_audit.performance import PerformanceMetricsProvider, SyntheticPerformanceMetrics
from seo_audit.scoring import AuditFacts, calculate_score, evaluate_checks, generate_suggestions

logger = logging.getLogger(__name__)


class AuditRun:
    """Tracks the stage of one audit invocation."""

    def __init__(self, url: Optional[str]):
        self.url = url
        self.stage = AuditStage.IDLE
        self.failed_stage: Optional[AuditStage] = None
        self.started_at = time.monotonic()

    def advance(self, stage: AuditStage) -> None:
        logger.info(f"[{self.url}] {self.stage.value} -> {stage.value}")
        self.stage = stage

    def fail(self, exc: BaseException) -> None:
        if self.stage is AuditStage.FAILED:
            return
        self.failed_stage = self.stage
        logger.error(f"[{self.url}] audit failed during {self.stage.value}: {exc}")
        self.stage = AuditStage.FAILED

    @property
    def elapsed_ms(self) -> int:
        return int((time.monotonic() - self.started_at) * 1000)


class SiteAuditor:
    """Audits single pages.

    One auditor can serve any number of audits, sequentially or
    concurrently; each call keeps its own state.

    Example::

        auditor = SiteAuditor(AuditConfig(locale="es"))
        report = await auditor.audit("https://example.com")
    """

    def __init__(
        self,
        config: Optional[AuditConfig] = None,
        fetcher_factory: Optional[Callable[[AuditConfig], HttpFetcher]] = None,
        parser: Optional[HtmlParser] = None,
        metrics_provider: Optional[PerformanceMetricsProvider] = None,
    ):
        """Initialize the auditor.

        Args:
            config: Audit configuration
            fetcher_factory: Builds an unstarted fetcher from the config;
                called once per audit
            parser: HTML parser, BeautifulSoup by default
            metrics_provider: Source of FCP/LCP/CLS, synthetic by default
        """
        self.config = config or default_config
        self.fetcher_factory = fetcher_factory or HttpFetcher
        self.parser = parser or BeautifulSoupParser()
        self.metrics_provider = metrics_provider or SyntheticPerformanceMetrics()
        self.content_analyzer = ContentAnalyzer(self.config)

    async def audit(self, url: Optional[str]) -> AuditReport:
        """Audit a page and return its report.

        Args:
            url: Absolute http(s) URL

        Returns:
            AuditReport for the page

        Raises:
            ValidationError: If the URL is missing or malformed
            FetchError: If the page answered with a non-2xx status or could
                not be reached (NetworkError, FetchTimeoutError)
            AuditTimeoutError: If the whole audit exceeded its deadline
        """
        return await self._audit(url, AuditRun(url))

    async def run(self, url: Optional[str]) -> AuditResult:
        """Audit a page, converting any failure into an AuditFailure.

        Args:
            url: Absolute http(s) URL

        Returns:
            AuditResult holding either the report or the failure
        """
        audit_run = AuditRun(url)
        try:
            report = await self._audit(url, audit_run)
        except Exception as e:
            failure = AuditFailure.from_exception(e, url=url, stage=audit_run.failed_stage)
            return AuditResult(failure=failure, error=e)
        return AuditResult(report=report)

    async def _audit(self, url: Optional[str], audit_run: AuditRun) -> AuditReport:
        try:
            url = AuditRequest(url).validate()
            timeout_s = self.config.global_timeout_ms / 1000
            try:
                return await asyncio.wait_for(self._pipeline(url, audit_run), timeout=timeout_s)
            except asyncio.TimeoutError:
                raise AuditTimeoutError(url, self.config.global_timeout_ms)
        except Exception as e:
            audit_run.fail(e)
            raise

    async def _pipeline(self, url: str, audit_run: AuditRun) -> AuditReport:
        config = self.config

        audit_run.advance(AuditStage.FETCHING)
        async with self.fetcher_factory(config) as fetcher:
            page = await fetcher.fetch(url)
            if not page.ok:
                raise FetchError(
                    f"HTTP error! status: {page.status_code}", url, page.status_code
                )

            audit_run.advance(AuditStage.ANALYZING)
            soup = self.parser.parse(page.body)
            links = collect_same_domain_links(soup, url)

            audit_run.advance(AuditStage.LINK_CHECKING)
            network_checks = asyncio.gather(
                LinkChecker(fetcher, config).check_links(links),
                fetcher.probe(url, ROBOTS_TXT_PATH),
                fetcher.probe(url, SITEMAP_XML_PATH),
            )
            try:
                audit_run.advance(AuditStage.CONTENT_ANALYSIS)
                analysis = self.content_analyzer.analyze(
                    soup, url, load_time_ms=page.elapsed_ms, page_size=len(page.body)
                )
            except Exception:
                network_checks.cancel()
                raise
            broken_links, robots_txt, sitemap = await network_checks

        audit_run.advance(AuditStage.SCORING)
        issues = list(analysis.issues)
        issues.extend(self.content_analyzer.analyze_site_resources(robots_txt, sitemap))
        if broken_links:
            issues.append(build_issue(IssueKind.BROKEN_LINKS, config.locale, count=len(broken_links)))

        facts = AuditFacts(
            analysis=analysis,
            robots_txt=robots_txt,
            sitemap=sitemap,
            broken_links_count=len(broken_links),
        )
        metrics = self.metrics_provider.measure(url)
        checks = evaluate_checks(facts, config)
        overall_score = calculate_score(checks, config.checklist)
        suggestions = generate_suggestions(checks, facts, metrics, config)

        report = AuditReport(
            url=url,
            analysis=analysis,
            robots_txt=robots_txt,
            sitemap=sitemap,
            broken_links=tuple(broken_links),
            performance=metrics,
            checks=checks,
            overall_score=overall_score,
            issues=tuple(issues),
            suggestions=tuple(suggestions),
            analysis_time_ms=audit_run.elapsed_ms,
            locale=config.locale,
        )
        audit_run.advance(AuditStage.DONE)
        logger.info(
            f"Audit of {url} finished: score {overall_score:.1f}, "
            f"{report.passed_checks}/{len(checks)} checks passed, {len(issues)} issues"
        )
        return report


def audit_url(url: str, config: Optional[AuditConfig] = None) -> AuditReport:
    """Audit a page from synchronous code.

    Args:
        url: Absolute http(s) URL
        config: Optional audit configuration

    Returns:
        AuditReport for the page
    """
    return asyncio.run(SiteAuditor(config).audit(url))
