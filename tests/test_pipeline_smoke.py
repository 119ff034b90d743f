import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ats_engine.main import app
from ats_engine.services.ats_service import analyze


def _registered_paths() -> set[str]:
    return {route.path for route in app.routes}


def test_ats_routes_are_registered() -> None:
    paths = _registered_paths()

    assert "/v1/health" in paths
    assert "/v1/ats/analyze" in paths
    assert "/v1/ats/report" in paths


def test_engine_runs_end_to_end() -> None:
    result = analyze(
        "Senior engineer. Email me@example.com. Skills: Python, SQL. Education: BSc, State University.",
        "Python and SQL engineer",
    )

    assert 0 <= result.score <= 100
    assert "python" in result.matched_keywords
    assert result.sections.has_contact_info
    assert result.sections.has_education
    assert result.strengths
