import importlib.util
import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def _load_cli():
    spec = importlib.util.spec_from_file_location("analyze_resume", PROJECT_ROOT / "scripts" / "analyze_resume.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class AnalyzeResumeCliTests(unittest.TestCase):
    def test_prints_json_and_writes_reports(self):
        cli = _load_cli()
        with tempfile.TemporaryDirectory() as tmp:
            tmp_path = Path(tmp)
            resume = tmp_path / "resume.txt"
            job = tmp_path / "job.txt"
            resume.write_text(
                "Experienced Python developer with AWS and Docker skills. Built REST APIs.",
                encoding="utf-8",
            )
            job.write_text(
                "Looking for a Python developer with AWS, Docker, and Kubernetes experience.",
                encoding="utf-8",
            )
            html_out = tmp_path / "out" / "report.html"
            eml_out = tmp_path / "out" / "report.eml"

            argv = [
                "analyze_resume.py",
                "--resume", str(resume),
                "--job", str(job),
                "--html", str(html_out),
                "--eml", str(eml_out),
                "--job-title", "Backend Engineer",
            ]
            buffer = io.StringIO()
            with patch.object(sys, "argv", argv), redirect_stdout(buffer):
                cli.main()

            payload = json.loads(buffer.getvalue())
            self.assertEqual(payload["score"], 86)
            self.assertEqual(payload["keywordStats"]["totalJDKeywords"], 9)
            self.assertIn("Position: Backend Engineer", html_out.read_text(encoding="utf-8"))
            self.assertIn(b"Subject: Your ATS analysis report: 86/100", eml_out.read_bytes())


if __name__ == "__main__":
    unittest.main()
