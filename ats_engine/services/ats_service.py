from __future__ import annotations

import logging
from collections.abc import Iterable

from ats_engine.features import (
    analyze_keyword_match,
    build_keyword_categories,
    calculate_ats_score,
    detect_sections,
    find_action_verbs,
    generate_insights,
)
from ats_engine.normalize.text import extract_terms
from ats_engine.schemas.analysis import AnalysisResult, KeywordStats
from ats_engine.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

logger = logging.getLogger(__name__)


class ATSComputationError(RuntimeError):
    """Unexpected failure inside the engine; never carries a partial result."""


def analyze(
    resume_text: str,
    job_description_text: str,
    *,
    stop_words: Iterable[str] | None = None,
    taxonomy: TaxonomyProvider | None = None,
) -> AnalysisResult:
    """Score a resume against a job description.

    Empty strings are valid input and produce a zero-score result. The
    optional ``stop_words`` and ``taxonomy`` arguments replace the packaged
    defaults for this call only.
    """
    try:
        analysis = _run_analysis(
            resume_text or "",
            job_description_text or "",
            stop_words=stop_words,
            taxonomy=taxonomy or get_default_taxonomy_provider(),
        )
    except Exception as exc:
        logger.exception("ats_analysis_failed: %s", exc)
        raise ATSComputationError("ATS analysis failed") from exc

    logger.info(
        "ats_analysis_completed score=%s match_percentage=%s jd_keywords=%s matched=%s",
        analysis.score,
        analysis.match_percentage,
        analysis.keyword_stats.total_jd_keywords,
        analysis.keyword_stats.matched_count,
    )
    return analysis


def _run_analysis(
    resume_text: str,
    job_description_text: str,
    *,
    stop_words: Iterable[str] | None,
    taxonomy: TaxonomyProvider,
) -> AnalysisResult:
    if stop_words is not None:
        stop_words = tuple(stop_words)

    resume_terms = extract_terms(resume_text, stop_words)
    jd_terms = extract_terms(job_description_text, stop_words)
    match = analyze_keyword_match(resume_terms, jd_terms)

    analysis = AnalysisResult(
        score=match.score,
        match_percentage=match.match_percentage,
        matched_keywords=match.matched,
        missing_keywords=match.missing,
        keyword_stats=KeywordStats(
            total_jd_keywords=len(match.matched) + len(match.missing),
            matched_count=len(match.matched),
            match_percentage=match.match_percentage,
        ),
        sections=detect_sections(resume_text),
        keyword_categories=build_keyword_categories(match.matched, match.missing, taxonomy),
        action_verbs=find_action_verbs(resume_terms, taxonomy),
    )

    bundle = generate_insights(analysis, resume_text, job_description_text)
    analysis.insights = bundle.insights
    analysis.strengths = bundle.strengths
    analysis.weaknesses = bundle.weaknesses
    analysis.recommendations = bundle.recommendations

    analysis.score = calculate_ats_score(analysis)
    return analysis
