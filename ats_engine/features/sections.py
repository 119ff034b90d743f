from __future__ import annotations

import re

from ats_engine.schemas.analysis import SectionFlags

_CONTACT_RE = re.compile(r"(\d{10}|phone|email|@|contact|linkedin|github)")
_EDUCATION_RE = re.compile(r"(bachelor|master|phd|degree|university|college|education)")
_EXPERIENCE_RE = re.compile(r"(experience|worked|worked at|employment|position|role)")
_SKILLS_RE = re.compile(r"(skill|proficient|expertise|technical|tools|framework)")
_PROJECTS_RE = re.compile(r"(project|developed|created|built|github|portfolio|deployed)")


def detect_sections(resume_text: str) -> SectionFlags:
    """Heuristic presence flags; each pattern is tested on its own."""
    lowered = (resume_text or "").lower()
    return SectionFlags(
        has_contact_info=bool(_CONTACT_RE.search(lowered)),
        has_education=bool(_EDUCATION_RE.search(lowered)),
        has_experience=bool(_EXPERIENCE_RE.search(lowered)),
        has_skills=bool(_SKILLS_RE.search(lowered)),
        has_projects=bool(_PROJECTS_RE.search(lowered)),
    )
