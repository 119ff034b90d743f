from __future__ import annotations

from ats_engine.core.scoring import get_scoring_value
from ats_engine.schemas.analysis import AnalysisResult, InsightBundle

FALLBACK_STRENGTH = "Resume has relevant content"


def _threshold(path: str, default: int) -> int:
    return int(get_scoring_value(path, default))


def generate_insights(analysis: AnalysisResult, resume_text: str, jd_text: str) -> InsightBundle:
    """Run the fixed rule cascade over a scored analysis.

    Every rule that applies fires, in order. Recommendations may repeat
    keywords across rules. Only ``strengths`` has a fallback entry.
    """
    _ = jd_text

    insights: list[str] = []
    strengths: list[str] = []
    weaknesses: list[str] = []
    recommendations: list[str] = []

    match_percentage = analysis.keyword_stats.match_percentage
    missing = analysis.missing_keywords

    if match_percentage >= _threshold("insights.excellent_match_percentage", 80):
        insights.append("Excellent keyword alignment with the job description")
        strengths.append("Strong match in required keywords and technologies")
    elif match_percentage >= _threshold("insights.good_match_percentage", 60):
        insights.append("Good keyword alignment, but some gaps exist")
        tier_missing = missing[: _threshold("insights.tier_missing_keywords", 3)]
        if tier_missing:
            recommendations.append(f"Add {', '.join(tier_missing)} to strengthen your resume")
    else:
        insights.append("Limited keyword alignment with job requirements")
        weaknesses.append("Many required keywords are missing from your resume")

    sections = analysis.sections
    if not sections.has_contact_info:
        weaknesses.append("Missing or unclear contact information")
        recommendations.append("Add clear contact information at the top of your resume")

    if not sections.has_skills:
        weaknesses.append("No dedicated skills section")
        recommendations.append("Include a clear skills section with relevant technologies")

    if not sections.has_experience:
        weaknesses.append("No work experience details found")
        recommendations.append("Add detailed work experience with accomplishments")

    resume_length = len(resume_text or "")
    if resume_length < _threshold("insights.short_resume_chars", 200):
        weaknesses.append("Resume appears too short")
        recommendations.append("Expand your resume with more details and accomplishments")
    elif resume_length > _threshold("insights.detailed_resume_chars", 3000):
        insights.append("Resume has good detail level")

    if missing:
        top_missing = missing[: _threshold("insights.top_missing_keywords", 5)]
        recommendations.append(f"Consider adding these keywords: {', '.join(top_missing)}")

    if not strengths:
        strengths.append(str(get_scoring_value("insights.fallback_strength", FALLBACK_STRENGTH)))

    return InsightBundle(
        insights=insights,
        strengths=strengths,
        weaknesses=weaknesses,
        recommendations=recommendations,
    )
