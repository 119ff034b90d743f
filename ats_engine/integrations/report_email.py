from __future__ import annotations

import html
from email.message import EmailMessage

from ats_engine.core.config import settings
from ats_engine.core.scoring import get_scoring_value
from ats_engine.schemas.analysis import AnalysisResult
from ats_engine.schemas.ats import ReportEmail

_SCORE_COLORS = {
    "excellent": "#22c55e",
    "good": "#f59e0b",
    "poor": "#ef4444",
}
_SCORE_LABELS = {
    "excellent": "Excellent",
    "good": "Good",
    "poor": "Needs Improvement",
}

_STYLES = """
body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; }
.container { max-width: 600px; margin: 0 auto; padding: 20px; }
.header { background: #f3f4f6; padding: 20px; border-radius: 8px; margin-bottom: 20px; }
.score-card { color: white; padding: 30px; border-radius: 8px; text-align: center; margin-bottom: 20px; }
.score-value { font-size: 48px; font-weight: bold; }
.section { margin-bottom: 20px; }
.section-title { font-size: 18px; font-weight: bold; margin-bottom: 10px; color: #1f2937; }
.keyword-tag { display: inline-block; background: #e5e7eb; padding: 6px 12px; border-radius: 20px; font-size: 14px; margin: 0 8px 8px 0; }
.keyword-tag.matched { background: #d1fae5; color: #065f46; }
.keyword-tag.missing { background: #fee2e2; color: #991b1b; }
.insight { background: #f0f9ff; padding: 10px; border-left: 4px solid #3b82f6; margin: 8px 0; }
.strength { background: #f0fdf4; padding: 10px; border-left: 4px solid #22c55e; margin: 8px 0; }
.weakness { background: #fef2f2; padding: 10px; border-left: 4px solid #ef4444; margin: 8px 0; }
.recommendation { background: #fffbeb; padding: 10px; border-left: 4px solid #f59e0b; margin: 8px 0; }
.button { display: inline-block; background: #2563eb; color: white; padding: 12px 24px; border-radius: 8px; text-decoration: none; margin-top: 20px; }
.footer { text-align: center; color: #6b7280; font-size: 12px; margin-top: 30px; border-top: 1px solid #e5e7eb; padding-top: 20px; }
""".strip()


def score_band(score: int) -> str:
    if score >= int(get_scoring_value("report.score_bands.excellent", 80)):
        return "excellent"
    if score >= int(get_scoring_value("report.score_bands.good", 60)):
        return "good"
    return "poor"


def _esc(value: object) -> str:
    return html.escape(str(value), quote=True)


def _keyword_section(title: str, keywords: list[str], css_class: str, limit: int) -> str:
    if not keywords:
        return ""
    tags = "".join(f'<span class="keyword-tag {css_class}">{_esc(k)}</span>' for k in keywords[:limit])
    return (
        '<div class="section">'
        f'<div class="section-title">{_esc(title)}</div>'
        f"<div>{tags}</div>"
        "</div>"
    )


def _list_section(title: str, items: list[str], css_class: str, prefix: str = "") -> str:
    if not items:
        return ""
    rows = "".join(f'<div class="{css_class}">{_esc(prefix)}{_esc(item)}</div>' for item in items)
    return f'<div class="section"><div class="section-title">{_esc(title)}</div>{rows}</div>'


def _render_html(
    analysis: AnalysisResult,
    recipient: str,
    *,
    job_title: str | None,
    report_url: str,
) -> str:
    band = score_band(analysis.score)
    limit = int(get_scoring_value("report.keyword_display_limit", 15))
    stats = analysis.keyword_stats
    heading = f"Position: {job_title}" if job_title else "Resume Analysis"

    body = "".join(
        [
            '<div class="header">',
            "<h1>ATS Resume Analysis Report</h1>",
            f"<p>{_esc(heading)}</p>",
            f"<p>Generated for: {_esc(recipient)}</p>",
            "</div>",
            f'<div class="score-card" style="background: {_SCORE_COLORS[band]};">',
            "<div>Overall ATS Score</div>",
            f'<div class="score-value">{analysis.score}/100</div>',
            f"<div>{_SCORE_LABELS[band]}</div>",
            "</div>",
            '<div class="section"><div class="section-title">Keyword Analysis</div>',
            f"<p>Match Rate: <strong>{stats.match_percentage}%</strong> "
            f"({stats.matched_count}/{stats.total_jd_keywords} keywords)</p></div>",
            _keyword_section("Matched Keywords", analysis.matched_keywords, "matched", limit),
            _keyword_section("Missing Keywords", analysis.missing_keywords, "missing", limit),
            _list_section("Key Insights", analysis.insights, "insight"),
            _list_section("Strengths", analysis.strengths, "strength", "✓ "),
            _list_section("Areas for Improvement", analysis.weaknesses, "weakness", "• "),
            _list_section("Recommendations", analysis.recommendations, "recommendation", "→ "),
            f'<center><a href="{_esc(report_url)}" class="button">View Detailed Report</a></center>',
            '<div class="footer">',
            f"<p>{_esc(settings.product_name)} - ATS Compatibility Checker</p>",
            "<p>This report was automatically generated and may vary based on your resume formatting.</p>",
            "</div>",
        ]
    )
    return (
        "<!DOCTYPE html>"
        '<html><head><meta charset="UTF-8">'
        f"<style>{_STYLES}</style>"
        f'</head><body><div class="container">{body}</div></body></html>'
    )


def _render_text(analysis: AnalysisResult, *, job_title: str | None, report_url: str) -> str:
    band = score_band(analysis.score)
    stats = analysis.keyword_stats
    lines = [
        "ATS Resume Analysis Report",
        f"Position: {job_title}" if job_title else "Resume Analysis",
        "",
        f"Overall ATS Score: {analysis.score}/100 ({_SCORE_LABELS[band]})",
        f"Match Rate: {stats.match_percentage}% ({stats.matched_count}/{stats.total_jd_keywords} keywords)",
    ]
    for title, items in (
        ("Key Insights", analysis.insights),
        ("Strengths", analysis.strengths),
        ("Areas for Improvement", analysis.weaknesses),
        ("Recommendations", analysis.recommendations),
    ):
        if not items:
            continue
        lines.append("")
        lines.append(f"{title}:")
        lines.extend(f"- {item}" for item in items)
    lines.append("")
    lines.append(f"View detailed report: {report_url}")
    return "\n".join(lines)


def build_report_email(
    analysis: AnalysisResult,
    recipient: str,
    *,
    recipient_name: str | None = None,
    job_title: str | None = None,
    report_url: str | None = None,
) -> ReportEmail:
    url = report_url or f"{settings.report_base_url.rstrip('/')}/ats-checker"
    title = (job_title or "").strip() or None
    greeting = f"{recipient_name.strip()}, your" if recipient_name and recipient_name.strip() else "Your"
    subject = f"{greeting} ATS analysis report: {analysis.score}/100"
    return ReportEmail(
        subject=subject,
        html=_render_html(analysis, recipient, job_title=title, report_url=url),
        text=_render_text(analysis, job_title=title, report_url=url),
    )


def to_email_message(report: ReportEmail, *, sender: str, recipient: str) -> EmailMessage:
    """Package a rendered report for an external mail sender."""
    msg = EmailMessage()
    msg["Subject"] = report.subject
    msg["From"] = sender
    msg["To"] = recipient
    msg.set_content(report.text)
    msg.add_alternative(report.html, subtype="html")
    return msg
