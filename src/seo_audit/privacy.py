"""Detection of personal data exposed in page text."""

import re

from seo_audit.constants import CIF_PATTERN, DEFAULT_LOCALE, EMAIL_PATTERN, PHONE_PATTERN
from seo_audit.messages import build_issue
from seo_audit.models import Issue, IssueKind, PersonalInfo


def _find_all(pattern: re.Pattern, text: str) -> tuple[str, ...]:
    # The phone pattern may swallow trailing separators
    return tuple(match.group(0).rstrip(" -") for match in pattern.finditer(text))


def detect_personal_info(text: str) -> PersonalInfo:
    """Find emails, Spanish mobile numbers and CIFs in the text.

    Matches are reported in the order they appear, duplicates included.
    """
    return PersonalInfo(
        emails=_find_all(EMAIL_PATTERN, text),
        phone_numbers=_find_all(PHONE_PATTERN, text),
        cifs=_find_all(CIF_PATTERN, text),
    )


def personal_info_issues(info: PersonalInfo, locale: str = DEFAULT_LOCALE) -> list[Issue]:
    issues = []
    if info.emails:
        issues.append(build_issue(IssueKind.EMAILS_EXPOSED, locale, count=len(info.emails)))
    if info.phone_numbers:
        issues.append(build_issue(IssueKind.PHONE_NUMBERS_EXPOSED, locale, count=len(info.phone_numbers)))
    if info.cifs:
        issues.append(build_issue(IssueKind.CIFS_EXPOSED, locale, count=len(info.cifs)))
    return issues
