# src/seo_audit/constants.py
"""Centralized constants for the SEO page audit.

This module contains magic numbers and fixed patterns used across modules.
For values a caller may override per audit, see config.py and AuditConfig.
"""

import re

# =============================================================================
# Network Constants
# =============================================================================

# Budget for the primary page, robots.txt and sitemap.xml fetches (ms)
DEFAULT_FETCH_TIMEOUT_MS = 10_000

# Budget for each link validation request (ms)
DEFAULT_LINK_CHECK_TIMEOUT_MS = 5_000

# Deadline for the whole pipeline (ms)
DEFAULT_GLOBAL_TIMEOUT_MS = 60_000

# Maximum number of same-domain links validated per audit
LINK_CHECK_LIMIT = 20

# Size of each concurrent link validation batch
CONCURRENT_REQUESTS_LIMIT = 5

# Identifying user agent sent with every request
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; SEOAuditBot/1.0;)"

# Auxiliary resources probed relative to the page origin
ROBOTS_TXT_PATH = "/robots.txt"
SITEMAP_XML_PATH = "/sitemap.xml"


# =============================================================================
# Metadata Thresholds
# =============================================================================

TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60

META_DESCRIPTION_MIN_LENGTH = 120
META_DESCRIPTION_MAX_LENGTH = 160

# URL length (characters) above which an issue is raised
MAX_URL_LENGTH = 75

# Page load time (ms) above which an issue is raised
SLOW_LOAD_TIME_MS = 3_000


# =============================================================================
# Content Quality Constants
# =============================================================================

# Number of keywords kept in the density table
TOP_KEYWORDS_COUNT = 5

# Tokens of this length or shorter are never keywords
MAX_IGNORED_TOKEN_LENGTH = 2

# Baseline sentence length for the readability formula
READABILITY_BASELINE_WORDS = 15

# Points lost per word above the baseline sentence length
READABILITY_PENALTY_PER_WORD = 2

# Spanish function words excluded from keyword density
STOP_WORDS = frozenset({
    'a', 'ante', 'bajo', 'cabe', 'con', 'contra', 'de', 'desde', 'durante',
    'en', 'entre', 'hacia', 'hasta', 'mediante', 'para', 'por', 'según',
    'sin', 'so', 'sobre', 'tras', 'el', 'la', 'los', 'las', 'un', 'una',
    'unos', 'unas', 'y', 'e', 'ni', 'que', 'es', 'son', 'era', 'fue',
    'fueron', 'ser', 'estar', 'este', 'esta', 'estos', 'estas', 'ese', 'esa',
    'esos', 'esas', 'aquel', 'aquella', 'aquellos', 'aquellas', 'su', 'sus',
    'cuyo', 'cuya', 'cuyos', 'cuyas', 'mi', 'mis', 'tu', 'tus', 'nuestro',
    'nuestra', 'nuestros', 'nuestras',
})

WORD_PATTERN = re.compile(r"\b\w+\b")
VOWELS_ONLY_PATTERN = re.compile(r"^[aeiou]+$")
SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")

# Elements whose text is never visible body copy
NON_VISIBLE_TAGS = ("script", "style", "noscript", "template")


# =============================================================================
# Personal Data Patterns
# =============================================================================

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Spanish mobile numbers, optional country prefix, spaces/dashes allowed
PHONE_PATTERN = re.compile(r"(?:\+34|0034|34)?[ -]*[67][ -]*(?:[0-9][ -]*){8}")

# Spanish company tax identifier (CIF)
CIF_PATTERN = re.compile(r"[ABCDEFGHJKLMNPQRSUVW][0-9]{7}[0-9A-J]", re.IGNORECASE)


# =============================================================================
# Simulated Performance Metrics
# =============================================================================

# FCP is drawn from [FCP_BASE_MS, FCP_BASE_MS + FCP_SPREAD_MS)
SYNTHETIC_FCP_BASE_MS = 500
SYNTHETIC_FCP_SPREAD_MS = 1_000

SYNTHETIC_LCP_BASE_MS = 1_000
SYNTHETIC_LCP_SPREAD_MS = 2_000

SYNTHETIC_CLS_MAX = 0.2

# Targets used when suggesting performance improvements
FCP_TARGET_MS = 1_800
LCP_TARGET_MS = 2_500
CLS_TARGET = 0.1


# =============================================================================
# Reporting Constants
# =============================================================================

DEFAULT_LOCALE = "en"
SUPPORTED_LOCALES = ("en", "es", "ca")

ANALYSIS_ERROR_TITLE = "An error occurred during analysis"
MISSING_URL_ERROR = "URL is required"
INVALID_URL_ERROR = "Invalid URL"
