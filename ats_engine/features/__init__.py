from .ats_score import calculate_ats_score, coverage_bonus, section_bonus
from .insights import FALLBACK_STRENGTH, generate_insights
from .keyword_labels import build_keyword_categories, find_action_verbs
from .keyword_match import analyze_keyword_match, clamp_score, round_half_up
from .sections import detect_sections

__all__ = [
    "detect_sections",
    "analyze_keyword_match",
    "round_half_up",
    "clamp_score",
    "calculate_ats_score",
    "section_bonus",
    "coverage_bonus",
    "generate_insights",
    "FALLBACK_STRENGTH",
    "build_keyword_categories",
    "find_action_verbs",
]
