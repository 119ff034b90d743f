from __future__ import annotations

import re
from collections.abc import Iterable

from ats_engine.core.scoring import get_scoring_value

_NON_WORD_RE = re.compile(r"\W+", re.ASCII)

STOP_WORDS: frozenset[str] = frozenset(
    {
        # Articles, conjunctions, prepositions
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
        "by", "from",
        # Auxiliary verbs
        "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do",
        "does", "did",
        # Modal verbs
        "will", "would", "could", "should", "may", "might", "must", "can",
        # Resume / JD boilerplate
        "experience", "experienced", "looking", "seeking", "years",
    }
)


def normalize_text(text: str) -> str:
    """Lower-case and collapse every run of non-word characters to one space."""
    if not text:
        return ""
    return _NON_WORD_RE.sub(" ", text.lower()).strip()


def tokenize(text: str) -> list[str]:
    return normalize_text(text).split()


def _stop_words(stop_words: Iterable[str] | None) -> frozenset[str]:
    if stop_words is None:
        return STOP_WORDS
    return frozenset(word.strip().lower() for word in stop_words if word and word.strip())


def _min_token_length() -> int:
    return int(get_scoring_value("extraction.min_token_length", 3))


def _phrase_window_sizes() -> tuple[int, ...]:
    sizes = get_scoring_value("extraction.phrase_window_sizes", [2, 3]) or []
    return tuple(int(size) for size in sizes if int(size) >= 2)


def _dedupe(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    output: list[str] = []
    for item in items:
        key = item.lower()
        if key in seen:
            continue
        seen.add(key)
        output.append(item)
    return output


def _is_term_token(token: str, stops: frozenset[str], min_length: int) -> bool:
    return len(token) >= min_length and token not in stops


def extract_keywords(text: str, stop_words: Iterable[str] | None = None) -> list[str]:
    """Single-word candidate terms in first-seen order.

    Numeric tokens are kept when long enough, so years and version numbers
    survive.
    """
    stops = _stop_words(stop_words)
    min_length = _min_token_length()
    return _dedupe(token for token in tokenize(text) if _is_term_token(token, stops, min_length))


def extract_phrases(text: str, stop_words: Iterable[str] | None = None) -> list[str]:
    """Multi-word candidate terms built from adjacent tokens.

    Windows run over the unfiltered token stream; a window is kept when both
    its edge tokens would qualify as keywords on their own.
    """
    stops = _stop_words(stop_words)
    min_length = _min_token_length()
    tokens = tokenize(text)

    phrases: list[str] = []
    for size in _phrase_window_sizes():
        for start in range(len(tokens) - size + 1):
            window = tokens[start : start + size]
            if not _is_term_token(window[0], stops, min_length):
                continue
            if not _is_term_token(window[-1], stops, min_length):
                continue
            phrases.append(" ".join(window))
    return _dedupe(phrases)


def extract_terms(text: str, stop_words: Iterable[str] | None = None) -> list[str]:
    """Keywords followed by phrases, as one deduplicated KeywordSet."""
    return _dedupe([*extract_keywords(text, stop_words), *extract_phrases(text, stop_words)])
