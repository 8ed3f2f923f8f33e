"""Content quality analysis - readability, keyword density and word count."""

from collections import Counter

from seo_audit.constants import (
    MAX_IGNORED_TOKEN_LENGTH,
    READABILITY_BASELINE_WORDS,
    READABILITY_PENALTY_PER_WORD,
    SENTENCE_SPLIT_PATTERN,
    STOP_WORDS,
    TOP_KEYWORDS_COUNT,
    VOWELS_ONLY_PATTERN,
    WORD_PATTERN,
)
from seo_audit.models import KeywordDensity


def count_words(text: str) -> int:
    """Count whitespace-separated tokens."""
    return len(text.split())


def split_sentences(text: str) -> list[str]:
    """Split text into sentences.

    Args:
        text: Text to split

    Returns:
        List of non-blank sentences
    """
    sentences = SENTENCE_SPLIT_PATTERN.split(text)
    return [s.strip() for s in sentences if s.strip()]


def calculate_readability(text: str) -> float:
    """Score how easy the text is to read, from 0 to 100.

    The score starts at 100 and drops 2 points for every word the average
    sentence has above 15. Text with no words or no sentences scores 0.

    Args:
        text: Visible page text

    Returns:
        Readability score clamped to [0, 100]
    """
    word_count = count_words(text)
    sentence_count = len(split_sentences(text))
    if word_count == 0 or sentence_count == 0:
        return 0

    avg_words_per_sentence = word_count / sentence_count
    score = 100 - (avg_words_per_sentence - READABILITY_BASELINE_WORDS) * READABILITY_PENALTY_PER_WORD
    return max(0, min(100, score))


def is_keyword_candidate(word: str) -> bool:
    return (
        len(word) > MAX_IGNORED_TOKEN_LENGTH
        and word not in STOP_WORDS
        and not VOWELS_ONLY_PATTERN.match(word)
    )


def calculate_keyword_density(
    text: str, top_n: int = TOP_KEYWORDS_COUNT
) -> list[KeywordDensity]:
    """Find the most frequent meaningful words in the text.

    Stop words, very short tokens and vowel-only tokens are not counted as
    keywords, but they still count towards the total the density is
    measured against.

    Args:
        text: Visible page text
        top_n: Number of keywords to return

    Returns:
        Up to ``top_n`` keywords, highest density first. Ties keep the order
        in which the words first appear.
    """
    tokens = WORD_PATTERN.findall(text.lower())
    if not tokens:
        return []

    total = len(tokens)
    frequency = Counter(word for word in tokens if is_keyword_candidate(word))

    keywords = [
        KeywordDensity(word=word, count=count, density=count / total * 100)
        for word, count in frequency.items()
    ]
    keywords.sort(key=lambda kd: kd.density, reverse=True)
    return keywords[:top_n]
