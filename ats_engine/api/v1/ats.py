import logging
import re

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from ats_engine.core.config import settings
from ats_engine.core.rate_limit import rate_limit
from ats_engine.integrations.report_email import build_report_email
from ats_engine.schemas.ats import AnalyzeRequest, AnalyzeResponse, ReportRequest, ReportResponse
from ats_engine.services.ats_service import ATSComputationError, analyze

router = APIRouter()
logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _truncate(text: str) -> str:
    return text[: settings.max_input_chars]


@router.post(
    "/ats/analyze",
    response_model=AnalyzeResponse,
    response_model_exclude_none=True,
    responses={400: {"model": AnalyzeResponse}, 500: {"model": AnalyzeResponse}},
)
@rate_limit()
def ats_analyze(request: Request, payload: AnalyzeRequest):
    _ = request
    resume_text = payload.resume_text or ""
    job_description = payload.job_description or ""
    if not resume_text.strip() or not job_description.strip():
        return _error(status.HTTP_400_BAD_REQUEST, "Resume text and job description are required")

    if len(resume_text) > settings.max_input_chars or len(job_description) > settings.max_input_chars:
        logger.info(
            "ats_input_truncated resume_chars=%s jd_chars=%s limit=%s",
            len(resume_text),
            len(job_description),
            settings.max_input_chars,
        )

    try:
        result = analyze(_truncate(resume_text), _truncate(job_description))
    except ATSComputationError as exc:
        logger.error("ats_analyze_request_failed: %s", exc.__cause__ or exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to analyze resume")

    return AnalyzeResponse(success=True, data=result)


@router.post(
    "/ats/report",
    response_model=ReportResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ReportResponse}},
)
@rate_limit()
def ats_report(request: Request, payload: ReportRequest):
    _ = request
    email = (payload.email or "").strip()
    if not email or payload.analysis_data is None:
        return _error(status.HTTP_400_BAD_REQUEST, "Email and analysis data are required")
    if not _EMAIL_RE.match(email):
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid email format")

    report = build_report_email(
        payload.analysis_data,
        email,
        recipient_name=payload.name,
        job_title=payload.job_title,
    )
    return ReportResponse(success=True, data=report)
