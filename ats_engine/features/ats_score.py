from __future__ import annotations

from typing import Any

from ats_engine.core.scoring import get_scoring_value
from ats_engine.schemas.analysis import AnalysisResult, SectionFlags

from .keyword_match import clamp_score, round_half_up

_DEFAULT_COVERAGE_TIERS = (
    {"min_percentage": 75, "bonus": 10},
    {"min_percentage": 50, "bonus": 5},
)


def section_bonus(sections: SectionFlags) -> float:
    section_count = int(get_scoring_value("scoring.section_count", 5))
    bonus_max = float(get_scoring_value("scoring.section_bonus_max", 15))
    if section_count <= 0:
        return 0.0
    return (sections.count_present() / section_count) * bonus_max


def coverage_bonus(match_percentage: int) -> float:
    tiers: Any = get_scoring_value("scoring.coverage_tiers", _DEFAULT_COVERAGE_TIERS)
    for tier in tiers:
        if match_percentage >= float(tier["min_percentage"]):
            return float(tier["bonus"])
    return 0.0


def calculate_ats_score(analysis: AnalysisResult) -> int:
    """Composite score on top of the keyword match score already in ``analysis.score``."""
    score = float(analysis.score)
    score += section_bonus(analysis.sections)
    score += coverage_bonus(analysis.match_percentage)
    return round_half_up(clamp_score(score))
