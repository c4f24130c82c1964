"""Pydantic models for job description analysis output."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ExperienceLevel = Literal["Entry-level", "Mid-level", "Senior", "Executive"]

DEFAULT_COMPANY_TYPE = "Technology"


class JobAnalysis(BaseModel):
    """Structured view of a job posting produced by the keyword extractor."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    required_skills: tuple[str, ...] = ()
    preferred_skills: tuple[str, ...] = ()
    key_responsibilities: tuple[str, ...] = ()  # at most 8
    qualifications: tuple[str, ...] = ()  # at most 5
    industry_keywords: tuple[str, ...] = ()  # at most 20
    experience_level: ExperienceLevel = "Mid-level"
    company_type: str = DEFAULT_COMPANY_TYPE
