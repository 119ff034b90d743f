from __future__ import annotations

from pydantic import Field

from .analysis import AnalysisResult, CamelModel


class AnalyzeRequest(CamelModel):
    resume_text: str | None = None
    job_description: str | None = None


class AnalyzeResponse(CamelModel):
    success: bool
    data: AnalysisResult | None = None
    error: str | None = None


class ReportRequest(CamelModel):
    email: str | None = Field(default=None, max_length=320)
    name: str | None = Field(default=None, max_length=200)
    job_title: str | None = Field(default=None, max_length=300)
    analysis_data: AnalysisResult | None = None


class ReportEmail(CamelModel):
    subject: str
    html: str
    text: str


class ReportResponse(CamelModel):
    success: bool
    data: ReportEmail | None = None
    error: str | None = None
