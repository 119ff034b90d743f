from __future__ import annotations

import math
from collections.abc import Iterable

from ats_engine.core.scoring import get_scoring_value
from ats_engine.schemas.analysis import MatchResult


def round_half_up(value: float) -> int:
    """Round .5 upwards regardless of parity, unlike the builtin round()."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float, lower: float = 0, upper: float = 100) -> float:
    return min(upper, max(lower, value))


def _unique_terms(terms: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    output: list[str] = []
    for term in terms:
        key = term.lower()
        if not key or key in seen:
            continue
        seen.add(key)
        output.append(term)
    return output


def analyze_keyword_match(resume_keywords: Iterable[str], jd_keywords: Iterable[str]) -> MatchResult:
    resume_set = {term.lower() for term in resume_keywords}
    jd_terms = _unique_terms(jd_keywords)

    matched = [term for term in jd_terms if term.lower() in resume_set]
    missing = [term for term in jd_terms if term.lower() not in resume_set]

    raw_percentage = (len(matched) / len(jd_terms)) * 100 if jd_terms else 0.0

    score = raw_percentage
    if matched:
        score += float(get_scoring_value("matching.any_match_bonus", 5))
    score = clamp_score(score)

    return MatchResult(
        matched=matched,
        missing=missing,
        match_percentage=round_half_up(raw_percentage),
        score=round_half_up(score),
    )
