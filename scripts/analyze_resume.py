from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from ats_engine.integrations.report_email import build_report_email, to_email_message
from ats_engine.services.ats_service import analyze


def _read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8", errors="ignore")


def main() -> None:
    parser = argparse.ArgumentParser(description="Score a plain-text resume against a job description.")
    parser.add_argument("--resume", required=True, help="Path to the resume text file")
    parser.add_argument("--job", required=True, help="Path to the job description text file")
    parser.add_argument("--html", help="Write the HTML report to this path")
    parser.add_argument("--eml", help="Write the report as an .eml message to this path")
    parser.add_argument("--email", default="candidate@example.com", help="Recipient shown in the report")
    parser.add_argument("--job-title", default=None, help="Position shown in the report header")
    parser.add_argument("--verbose", action="store_true", help="Log engine events to stderr")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format="%(message)s")

    result = analyze(_read_text(args.resume), _read_text(args.job))
    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))

    if args.html or args.eml:
        report = build_report_email(result, args.email, job_title=args.job_title)
        if args.html:
            out_path = Path(args.html)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(report.html, encoding="utf-8")
        if args.eml:
            message = to_email_message(report, sender="no-reply@localhost", recipient=args.email)
            out_path = Path(args.eml)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_bytes(message.as_bytes())


if __name__ == "__main__":
    main()
