import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_engine.integrations.report_email import (  # noqa: E402
    build_report_email,
    score_band,
    to_email_message,
)
from ats_engine.schemas.analysis import AnalysisResult, KeywordStats  # noqa: E402


def _analysis(score: int, **overrides) -> AnalysisResult:
    values = {
        "score": score,
        "match_percentage": 70,
        "matched_keywords": ["python", "docker"],
        "missing_keywords": ["kubernetes"],
        "keyword_stats": KeywordStats(total_jd_keywords=3, matched_count=2, match_percentage=70),
        "insights": ["Good keyword alignment, but some gaps exist"],
        "strengths": ["Resume has relevant content"],
        "weaknesses": [],
        "recommendations": ["Consider adding these keywords: kubernetes"],
    }
    values.update(overrides)
    return AnalysisResult(**values)


class ReportEmailTests(unittest.TestCase):
    def test_score_bands(self):
        self.assertEqual(score_band(85), "excellent")
        self.assertEqual(score_band(80), "excellent")
        self.assertEqual(score_band(65), "good")
        self.assertEqual(score_band(10), "poor")

    def test_report_contains_score_keywords_and_lists(self):
        report = build_report_email(_analysis(85), "jane@example.com", job_title="Backend Engineer")
        self.assertIn("85/100", report.subject)
        self.assertIn("Position: Backend Engineer", report.html)
        self.assertIn("#22c55e", report.html)
        self.assertIn("Excellent", report.html)
        self.assertIn("Match Rate: <strong>70%</strong> (2/3 keywords)", report.html)
        self.assertIn('<span class="keyword-tag missing">kubernetes</span>', report.html)
        self.assertNotIn("Areas for Improvement", report.html)
        self.assertIn("Overall ATS Score: 85/100 (Excellent)", report.text)
        self.assertIn("/ats-checker", report.text)

    def test_low_score_uses_needs_improvement_band(self):
        report = build_report_email(_analysis(30), "jane@example.com")
        self.assertIn("#ef4444", report.html)
        self.assertIn("Needs Improvement", report.html)
        self.assertIn("Resume Analysis", report.html)

    def test_user_content_is_escaped(self):
        analysis = _analysis(50, matched_keywords=["<script>alert(1)</script>"])
        report = build_report_email(analysis, "<b>@x.io", job_title="<i>Lead</i>")
        self.assertNotIn("<script>", report.html)
        self.assertIn("&lt;script&gt;", report.html)
        self.assertIn("&lt;i&gt;Lead&lt;/i&gt;", report.html)
        self.assertNotIn("<b>@x.io", report.html)

    def test_keyword_lists_are_capped(self):
        keywords = [f"kw{index}" for index in range(20)]
        report = build_report_email(_analysis(70, matched_keywords=keywords), "jane@example.com")
        self.assertIn(">kw14<", report.html)
        self.assertNotIn(">kw15<", report.html)

    def test_personalized_subject(self):
        report = build_report_email(_analysis(70), "jane@example.com", recipient_name="Jane")
        self.assertEqual(report.subject, "Jane, your ATS analysis report: 70/100")

    def test_email_message_has_text_and_html_parts(self):
        report = build_report_email(_analysis(70), "jane@example.com")
        message = to_email_message(report, sender="reports@example.com", recipient="jane@example.com")
        self.assertEqual(message["To"], "jane@example.com")
        self.assertEqual(message["Subject"], report.subject)
        self.assertTrue(message.is_multipart())
        html_part = message.get_body(preferencelist=("html",))
        self.assertIn("Overall ATS Score", html_part.get_content())


if __name__ == "__main__":
    unittest.main()
