from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SectionFlags(CamelModel):
    has_contact_info: bool = False
    has_education: bool = False
    has_experience: bool = False
    has_skills: bool = False
    has_projects: bool = False

    def count_present(self) -> int:
        return sum(
            (
                self.has_contact_info,
                self.has_education,
                self.has_experience,
                self.has_skills,
                self.has_projects,
            )
        )


class MatchResult(CamelModel):
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    match_percentage: int = Field(default=0, ge=0, le=100)
    score: int = Field(default=0, ge=0, le=100)


class KeywordStats(CamelModel):
    total_jd_keywords: int = Field(default=0, ge=0, alias="totalJDKeywords")
    matched_count: int = Field(default=0, ge=0)
    match_percentage: int = Field(default=0, ge=0, le=100)


class CategoryMatch(CamelModel):
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class InsightBundle(CamelModel):
    insights: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class AnalysisResult(CamelModel):
    score: int = Field(default=0, ge=0, le=100)
    match_percentage: int = Field(default=0, ge=0, le=100)
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    keyword_stats: KeywordStats = Field(default_factory=KeywordStats)
    sections: SectionFlags = Field(default_factory=SectionFlags)
    insights: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    # Taxonomy labels for display only; never part of the score.
    keyword_categories: dict[str, CategoryMatch] = Field(default_factory=dict)
    action_verbs: list[str] = Field(default_factory=list)
