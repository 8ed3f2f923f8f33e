"""Checklist evaluation, overall score and improvement suggestions."""

from dataclasses import dataclass
from typing import Iterable, Optional

from seo_audit.config import AuditConfig, default_config
from seo_audit.messages import (
    PERFORMANCE_CLS,
    PERFORMANCE_FCP,
    PERFORMANCE_LCP,
    format_decimal,
    performance_suggestion_text,
    suggestion_text,
)
from seo_audit.models import CheckKind, ContentAnalysis, PerformanceMetrics, ResourceProbe
from seo_audit.technical import load_time_exceeded, url_length_exceeded


@dataclass(frozen=True)
class AuditFacts:
    """Everything the checklist is evaluated against."""

    analysis: ContentAnalysis
    robots_txt: ResourceProbe
    sitemap: ResourceProbe
    broken_links_count: int = 0


def _check_results(facts: AuditFacts, config: AuditConfig) -> dict[CheckKind, bool]:
    analysis = facts.analysis
    personal_info = analysis.personal_info
    return {
        CheckKind.TITLE_LENGTH: (
            config.title_min_length <= len(analysis.title) <= config.title_max_length
        ),
        CheckKind.META_DESCRIPTION_LENGTH: (
            config.meta_description_min_length
            <= len(analysis.meta_description)
            <= config.meta_description_max_length
        ),
        CheckKind.SINGLE_H1: analysis.h1_count == 1,
        CheckKind.IMAGES_HAVE_ALT: analysis.img_without_alt == 0,
        CheckKind.CANONICAL: analysis.has_canonical,
        CheckKind.VIEWPORT: analysis.has_viewport,
        CheckKind.HTTPS: analysis.is_https,
        CheckKind.SCHEMA: analysis.has_schema,
        CheckKind.HEADING_HIERARCHY: analysis.headings.is_valid,
        CheckKind.URL_LENGTH: not url_length_exceeded(analysis.url, config),
        CheckKind.OPEN_GRAPH_COMPLETE: analysis.og_tags.complete,
        CheckKind.TWITTER_CARD_COMPLETE: analysis.twitter_tags.complete,
        CheckKind.LOAD_TIME: not load_time_exceeded(analysis.load_time_ms, config),
        CheckKind.ROBOTS_TXT: facts.robots_txt.found,
        CheckKind.SITEMAP: facts.sitemap.found,
        CheckKind.META_ROBOTS: analysis.meta_robots is not None,
        CheckKind.HREFLANG: analysis.has_hreflang,
        CheckKind.NO_EMAILS: not personal_info.emails,
        CheckKind.NO_PHONE_NUMBERS: not personal_info.phone_numbers,
        CheckKind.NO_CIFS: not personal_info.cifs,
        CheckKind.NO_BROKEN_LINKS: facts.broken_links_count == 0,
    }


def evaluate_checks(
    facts: AuditFacts, config: Optional[AuditConfig] = None
) -> dict[CheckKind, bool]:
    """Evaluate the configured checklist.

    Args:
        facts: Analysis results, probes and broken link count
        config: Audit configuration; its checklist picks and orders the checks

    Returns:
        Mapping of each configured check to whether it passed, in checklist order
    """
    config = config or default_config
    results = _check_results(facts, config)
    return {check: results[check] for check in config.checklist}


def calculate_score(flags: dict[CheckKind, bool], checklist: Iterable[CheckKind]) -> float:
    """Percentage of checklist items that passed.

    Every item weighs the same. A check missing from ``flags`` counts as
    failed.
    """
    checklist = list(checklist)
    if not checklist:
        raise ValueError("checklist must contain at least one check")
    passed = sum(1 for check in checklist if flags.get(check, False))
    return passed / len(checklist) * 100


def _suggestion_values(facts: AuditFacts, config: AuditConfig) -> dict:
    analysis = facts.analysis
    personal_info = analysis.personal_info
    return {
        "title_length": len(analysis.title),
        "meta_length": len(analysis.meta_description),
        "count_h1": analysis.h1_count,
        "missing": analysis.img_without_alt,
        "url_length": analysis.url_length,
        "load_time": analysis.load_time_ms,
        "max_seconds": format_decimal(config.slow_load_time_ms / 1000, config.locale),
        "emails": len(personal_info.emails),
        "phones": len(personal_info.phone_numbers),
        "cifs": len(personal_info.cifs),
        "broken": facts.broken_links_count,
    }


def _suggestion_for(check: CheckKind, values: dict, config: AuditConfig) -> str:
    locale = config.locale
    if check is CheckKind.TITLE_LENGTH:
        return suggestion_text(
            check, locale,
            length=values["title_length"],
            min_length=config.title_min_length,
            max_length=config.title_max_length,
        )
    if check is CheckKind.META_DESCRIPTION_LENGTH:
        return suggestion_text(
            check, locale,
            length=values["meta_length"],
            min_length=config.meta_description_min_length,
            max_length=config.meta_description_max_length,
        )
    if check is CheckKind.SINGLE_H1:
        return suggestion_text(check, locale, count=values["count_h1"])
    if check is CheckKind.IMAGES_HAVE_ALT:
        return suggestion_text(check, locale, missing=values["missing"])
    if check is CheckKind.URL_LENGTH:
        return suggestion_text(check, locale, length=values["url_length"])
    if check is CheckKind.LOAD_TIME:
        return suggestion_text(
            check, locale, load_time=values["load_time"], max_seconds=values["max_seconds"]
        )
    if check is CheckKind.NO_EMAILS:
        return suggestion_text(check, locale, count=values["emails"])
    if check is CheckKind.NO_PHONE_NUMBERS:
        return suggestion_text(check, locale, count=values["phones"])
    if check is CheckKind.NO_CIFS:
        return suggestion_text(check, locale, count=values["cifs"])
    if check is CheckKind.NO_BROKEN_LINKS:
        return suggestion_text(check, locale, count=values["broken"])
    return suggestion_text(check, locale)


def performance_suggestions(
    metrics: PerformanceMetrics, config: Optional[AuditConfig] = None
) -> list[str]:
    """Suggestions for FCP, LCP and CLS values above their targets."""
    config = config or default_config
    locale = config.locale
    suggestions = []

    if metrics.fcp_ms > config.fcp_target_ms:
        suggestions.append(performance_suggestion_text(
            PERFORMANCE_FCP, locale,
            value=metrics.fcp_ms,
            target=format_decimal(config.fcp_target_ms / 1000, locale),
        ))
    if metrics.lcp_ms > config.lcp_target_ms:
        suggestions.append(performance_suggestion_text(
            PERFORMANCE_LCP, locale,
            value=metrics.lcp_ms,
            target=format_decimal(config.lcp_target_ms / 1000, locale),
        ))
    if metrics.cls > config.cls_target:
        suggestions.append(performance_suggestion_text(
            PERFORMANCE_CLS, locale,
            value=format_decimal(metrics.cls, locale),
            target=format_decimal(config.cls_target, locale),
        ))

    return suggestions


def generate_suggestions(
    flags: dict[CheckKind, bool],
    facts: AuditFacts,
    metrics: PerformanceMetrics,
    config: Optional[AuditConfig] = None,
) -> list[str]:
    """Build one suggestion per failed check, then the performance ones.

    Args:
        flags: Check results from ``evaluate_checks``
        facts: The values the suggestions quote
        metrics: Paint and layout-shift metrics
        config: Audit configuration (locale, thresholds, targets)

    Returns:
        Localized suggestions, failed checks in checklist order first
    """
    config = config or default_config
    values = _suggestion_values(facts, config)
    suggestions = [
        _suggestion_for(check, values, config)
        for check, passed in flags.items()
        if not passed
    ]
    suggestions.extend(performance_suggestions(metrics, config))
    return suggestions
