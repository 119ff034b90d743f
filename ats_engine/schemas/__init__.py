from .analysis import (
    AnalysisResult,
    CamelModel,
    CategoryMatch,
    InsightBundle,
    KeywordStats,
    MatchResult,
    SectionFlags,
)
from .ats import AnalyzeRequest, AnalyzeResponse, ReportEmail, ReportRequest, ReportResponse

__all__ = [
    "CamelModel",
    "SectionFlags",
    "MatchResult",
    "KeywordStats",
    "CategoryMatch",
    "InsightBundle",
    "AnalysisResult",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "ReportRequest",
    "ReportEmail",
    "ReportResponse",
]
