import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_engine.features.ats_score import calculate_ats_score, coverage_bonus, section_bonus  # noqa: E402
from ats_engine.schemas.analysis import AnalysisResult, SectionFlags  # noqa: E402

ALL_SECTIONS = SectionFlags(
    has_contact_info=True,
    has_education=True,
    has_experience=True,
    has_skills=True,
    has_projects=True,
)


class ATSScoreTests(unittest.TestCase):
    def test_section_and_coverage_bonuses_are_added(self):
        analysis = AnalysisResult(score=72, match_percentage=67, sections=ALL_SECTIONS)
        self.assertEqual(calculate_ats_score(analysis), 92)

    def test_partial_sections_scale_linearly(self):
        sections = SectionFlags(has_contact_info=True, has_skills=True)
        analysis = AnalysisResult(score=45, match_percentage=40, sections=sections)
        self.assertEqual(section_bonus(sections), 6.0)
        self.assertEqual(calculate_ats_score(analysis), 51)

    def test_coverage_tiers(self):
        self.assertEqual(coverage_bonus(100), 10.0)
        self.assertEqual(coverage_bonus(75), 10.0)
        self.assertEqual(coverage_bonus(74), 5.0)
        self.assertEqual(coverage_bonus(50), 5.0)
        self.assertEqual(coverage_bonus(49), 0.0)

    def test_full_match_is_clamped_to_100(self):
        analysis = AnalysisResult(score=100, match_percentage=100, sections=ALL_SECTIONS)
        self.assertEqual(calculate_ats_score(analysis), 100)
        bare = AnalysisResult(score=100, match_percentage=100, sections=SectionFlags())
        self.assertEqual(calculate_ats_score(bare), 100)

    def test_zero_inputs_score_zero(self):
        self.assertEqual(calculate_ats_score(AnalysisResult()), 0)


if __name__ == "__main__":
    unittest.main()
